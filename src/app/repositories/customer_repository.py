"""Customer Repository Interface

Defines the contract for tenant-scoped customer persistence.
"""

from abc import ABC, abstractmethod
from typing import Optional, List
from src.domain.customer import Customer, CustomerStatus


class CustomerRepository(ABC):
    """
    Repository interface for Customer persistence

    Every lookup is scoped by tenant_id so tenants never see each other's
    customers.
    """

    @abstractmethod
    async def create(self, customer: Customer) -> Customer:
        """
        Create a new customer

        Args:
            customer: Customer entity to persist

        Returns:
            Created Customer with generated ID
        """
        pass

    @abstractmethod
    async def get_by_id(self, tenant_id: str, customer_id: int) -> Optional[Customer]:
        """
        Retrieve a tenant's customer by ID

        Args:
            tenant_id: Tenant identifier
            customer_id: Customer ID

        Returns:
            Customer if found, None otherwise
        """
        pass

    @abstractmethod
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

        Args:
            tenant_id: Tenant identifier
            status: Optional filter by status
            search: Optional case-insensitive name/email/company filter
            limit: Maximum number of customers to return
            offset: Offset for pagination

        Returns:
            List of customers
        """
        pass

    @abstractmethod
    async def update(self, customer: Customer) -> Customer:
        """
        Update an existing customer

        Args:
            customer: Customer entity with updated values

        Returns:
            Updated Customer
        """
        pass

    @abstractmethod
    async def delete(self, customer: Customer) -> None:
        """
        Delete a customer

        Args:
            customer: Customer entity to remove
        """
        pass
