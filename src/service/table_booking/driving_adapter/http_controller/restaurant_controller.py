from typing import List

from fastapi import APIRouter, Depends

from src.platform.logging.loguru_io import Logger
from src.service.table_booking.app.query.get_restaurant_use_case import GetRestaurantUseCase
from src.service.table_booking.app.query.list_restaurants_use_case import ListRestaurantsUseCase
from src.service.table_booking.driving_adapter.http_controller.schema.restaurant_schema import (
    RestaurantDetailResponse,
    RestaurantResponse,
)


router = APIRouter()


@router.get('', response_model=List[RestaurantResponse])
@Logger.io
async def list_restaurants(
    use_case: ListRestaurantsUseCase = Depends(ListRestaurantsUseCase.depends),
) -> List[RestaurantResponse]:
    restaurants = await use_case.list_restaurants()
    return [RestaurantResponse.from_entity(r) for r in restaurants]


@router.get('/{restaurant_id}', response_model=RestaurantDetailResponse)
@Logger.io
async def get_restaurant(
    restaurant_id: int,
    use_case: GetRestaurantUseCase = Depends(GetRestaurantUseCase.depends),
) -> RestaurantDetailResponse:
    restaurant = await use_case.get_restaurant(restaurant_id=restaurant_id)
    return RestaurantDetailResponse.from_entity(restaurant)
