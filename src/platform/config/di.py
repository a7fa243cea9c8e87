"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.platform.database.orm_db_setting import Database
from src.platform.state.keyed_lock import KeyedLockManager
from src.service.table_booking.domain.value_object.booking_policy import BookingPolicy
from src.service.table_booking.driven_adapter.clock.system_clock import SystemClock
from src.service.table_booking.driven_adapter.repo.booking_query_repo_impl import (
    BookingQueryRepoImpl,
)
from src.service.table_booking.driven_adapter.repo.restaurant_query_repo_impl import (
    RestaurantQueryRepoImpl,
)


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    database = providers.Singleton(Database)

    # Reference day for every date rule
    clock = providers.Singleton(SystemClock)

    booking_policy = providers.Singleton(
        BookingPolicy,
        horizon_days=config_service.provided.BOOKING_HORIZON_DAYS,
        min_party_size=config_service.provided.MIN_PARTY_SIZE,
        max_party_size=config_service.provided.MAX_PARTY_SIZE,
        min_dining_minutes=config_service.provided.MIN_DINING_MINUTES,
    )

    # Serializes slot check-then-insert within this process
    lock_manager = providers.Singleton(KeyedLockManager)

    # Read-side repositories (stateless - use session_factory per call)
    restaurant_query_repo = providers.Singleton(
        RestaurantQueryRepoImpl, session_factory=database.provided.session
    )
    booking_query_repo = providers.Singleton(
        BookingQueryRepoImpl, session_factory=database.provided.session
    )


container = Container()


def setup() -> None:
    container.config_service()
    container.lock_manager()


def cleanup() -> None:
    container.reset_singletons()
