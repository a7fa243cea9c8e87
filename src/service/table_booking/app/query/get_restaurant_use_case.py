from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.table_booking.app.interface.i_restaurant_query_repo import IRestaurantQueryRepo
from src.service.table_booking.domain.entity.restaurant_entity import Restaurant


class GetRestaurantUseCase:
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
    async def get_restaurant(self, *, restaurant_id: int) -> Restaurant:
        restaurant = await self.restaurant_query_repo.get_with_details(restaurant_id=restaurant_id)
        if not restaurant:
            raise NotFoundError('Restaurant not found')
        return restaurant
