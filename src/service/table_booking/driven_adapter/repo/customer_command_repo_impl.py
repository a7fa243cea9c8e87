from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.database.unit_of_work import conflict_from_integrity_error
from src.platform.logging.loguru_io import Logger
from src.service.table_booking.app.interface.i_customer_command_repo import ICustomerCommandRepo
from src.service.table_booking.domain.entity.customer_entity import Customer
from src.service.table_booking.driven_adapter.model.customer_model import CustomerModel


class CustomerCommandRepoImpl(ICustomerCommandRepo):
    """Always runs on the unit-of-work session; the UoW decides when to commit."""

    def __init__(self) -> None:
        self.session: AsyncSession | None = None

    def _require_session(self) -> AsyncSession:
        if self.session is None:
            raise RuntimeError('CustomerCommandRepoImpl must be used inside a unit of work')
        return self.session

    async def _flush(self, session: AsyncSession) -> None:
        try:
            await session.flush()
        except IntegrityError as e:
            if conflict := conflict_from_integrity_error(e):
                raise conflict from e
            raise

    @staticmethod
    def to_entity(db_customer: CustomerModel) -> Customer:
        return Customer(
            id=db_customer.id,
            name=db_customer.name,
            email=db_customer.email,
            phone=db_customer.phone,
            created_at=db_customer.created_at,
        )

    @Logger.io
    async def get_by_id(self, *, customer_id: int) -> Customer | None:
        db_customer = await self._require_session().get(CustomerModel, customer_id)
        return self.to_entity(db_customer) if db_customer else None

    @Logger.io
    async def find_by_email(self, *, email: str) -> Customer | None:
        result = await self._require_session().execute(
            select(CustomerModel).where(CustomerModel.email == email)
        )
        db_customer = result.scalar_one_or_none()
        return self.to_entity(db_customer) if db_customer else None

    @Logger.io
    async def create(self, *, customer: Customer) -> Customer:
        session = self._require_session()
        db_customer = CustomerModel(name=customer.name, email=customer.email, phone=customer.phone)
        session.add(db_customer)
        await self._flush(session)
        await session.refresh(db_customer)
        return self.to_entity(db_customer)

    @Logger.io
    async def update_contact(self, *, customer: Customer) -> Customer:
        session = self._require_session()
        db_customer = await session.get(CustomerModel, customer.id)
        if db_customer is None:
            raise RuntimeError(f'Customer {customer.id} vanished inside the transaction')
        db_customer.name = customer.name
        db_customer.email = customer.email
        db_customer.phone = customer.phone
        await self._flush(session)
        return self.to_entity(db_customer)
