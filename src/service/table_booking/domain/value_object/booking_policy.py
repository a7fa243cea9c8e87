import attrs


@attrs.define(frozen=True)
class BookingPolicy:
    """Tunable limits applied by the availability rules."""

    horizon_days: int = 90
    min_party_size: int = 1
    max_party_size: int = 20
    min_dining_minutes: int = 60  # last seating is this long before closing
