from datetime import date

from src.service.table_booking.app.interface.i_clock import IClock


class SystemClock(IClock):
    """Restaurant-local calendar day from the host clock."""

    def today(self) -> date:
        return date.today()
