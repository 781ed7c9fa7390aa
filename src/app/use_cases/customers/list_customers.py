"""ListCustomers Use Case"""

import logging
from typing import Optional
from libs.result import Result, Return, Error
from src.app.repositories.customer_repository import CustomerRepository
from src.domain.customer import CustomerStatus
from .dtos import CustomerListResponseDTO, CustomerResponseDTO

logger = logging.getLogger(__name__)


class ListCustomers:
    """
    Use Case: List a tenant's customers, newest first

    search matches name, email or company.
    """

    def __init__(self, customer_repo: CustomerRepository):
        self.customer_repo = customer_repo

    async def execute(
        self,
        tenant_id: str,
        status: Optional[CustomerStatus] = None,
        search: Optional[str] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> Result[CustomerListResponseDTO]:
        try:
            customers = await self.customer_repo.list_by_tenant(
                tenant_id=tenant_id,
                status=status,
                search=search.strip() if search else None,
                limit=limit,
                offset=offset,
            )

            items = [CustomerResponseDTO.from_entity(customer) for customer in customers]
            return Return.ok(
                CustomerListResponseDTO(
                    customers=items,
                    count=len(items),
                    limit=limit,
                    offset=offset,
                )
            )

        except Exception as e:
            logger.error(f"Failed to retrieve customers: {e}")
            return Return.err(
                Error(
                    code="LIST_CUSTOMERS_FAILED",
                    message="Failed to retrieve customers",
                    reason=str(e),
                )
            )
