from abc import ABC, abstractmethod

from src.service.table_booking.domain.entity.customer_entity import Customer


class ICustomerCommandRepo(ABC):
    @abstractmethod
    async def get_by_id(self, *, customer_id: int) -> Customer | None:
        pass

    @abstractmethod
    async def find_by_email(self, *, email: str) -> Customer | None:
        pass

    @abstractmethod
    async def create(self, *, customer: Customer) -> Customer:
        """Insert a new customer and return it with its id assigned."""
        pass

    @abstractmethod
    async def update_contact(self, *, customer: Customer) -> Customer:
        pass
