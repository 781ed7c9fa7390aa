"""SQLAlchemy Customer Repository Implementation

Implements tenant-scoped customer persistence using SQLAlchemy async session.
"""

from typing import Optional, List
from datetime import datetime
from sqlalchemy import or_
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.customer_repository import CustomerRepository
from src.domain.customer import Customer, CustomerStatus


class SqlAlchemyCustomerRepository(CustomerRepository):
    """SQLAlchemy implementation of CustomerRepository"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, customer: Customer) -> Customer:
        self.session.add(customer)
        await self.session.flush()
        await self.session.refresh(customer)
        return customer

    async def get_by_id(self, tenant_id: str, customer_id: int) -> Optional[Customer]:
        statement = (
            select(Customer)
            .where(Customer.tenant_id == tenant_id)
            .where(Customer.id == customer_id)
        )
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def list_by_tenant(
        self,
        tenant_id: str,
        status: Optional[CustomerStatus] = None,
        search: Optional[str] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> List[Customer]:
        """
        List a tenant's customers, newest first

        search matches name, email or company, case-insensitively.
        """
        statement = select(Customer).where(Customer.tenant_id == tenant_id)

        if status:
            statement = statement.where(Customer.status == status)

        if search:
            pattern = f"%{search.lower()}%"
            statement = statement.where(
                or_(
                    Customer.name.ilike(pattern),
                    Customer.email.ilike(pattern),
                    Customer.company.ilike(pattern),
                )
            )

        statement = statement.order_by(Customer.created_at.desc(), Customer.id.desc())
        statement = statement.limit(limit).offset(offset)

        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def update(self, customer: Customer) -> Customer:
        customer.updated_at = datetime.utcnow()
        self.session.add(customer)
        await self.session.flush()
        await self.session.refresh(customer)
        return customer

    async def delete(self, customer: Customer) -> None:
        await self.session.delete(customer)
        await self.session.flush()
