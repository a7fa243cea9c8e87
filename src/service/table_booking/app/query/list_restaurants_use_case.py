from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.table_booking.app.interface.i_restaurant_query_repo import IRestaurantQueryRepo
from src.service.table_booking.domain.entity.restaurant_entity import Restaurant


class ListRestaurantsUseCase:
    def __init__(self, *, restaurant_query_repo: IRestaurantQueryRepo) -> None:
        self.restaurant_query_repo = restaurant_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        restaurant_query_repo: IRestaurantQueryRepo = Depends(
            Provide[Container.restaurant_query_repo]
        ),
    ) -> Self:
        return cls(restaurant_query_repo=restaurant_query_repo)

    @Logger.io
    async def list_restaurants(self) -> List[Restaurant]:
        return await self.restaurant_query_repo.list_restaurants()
