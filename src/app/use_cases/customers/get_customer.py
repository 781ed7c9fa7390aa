"""GetCustomer Use Case"""

import logging
from libs.result import Result, Return, Error
from src.app.repositories.customer_repository import CustomerRepository
from .dtos import CustomerResponseDTO

logger = logging.getLogger(__name__)


def customer_not_found(customer_id: int) -> Error:
    return Error(
        code="CUSTOMER_NOT_FOUND",
        message=f"Customer with ID {customer_id} not found",
        reason="Customer does not exist",
    )


class GetCustomer:
    """Use Case: Retrieve one customer of a tenant"""

    def __init__(self, customer_repo: CustomerRepository):
        self.customer_repo = customer_repo

    async def execute(self, tenant_id: str, customer_id: int) -> Result[CustomerResponseDTO]:
        try:
            customer = await self.customer_repo.get_by_id(tenant_id, customer_id)
            if not customer:
                return Return.err(customer_not_found(customer_id))

            return Return.ok(CustomerResponseDTO.from_entity(customer))

        except Exception as e:
            logger.error(f"Failed to retrieve customer: {e}")
            return Return.err(
                Error(
                    code="GET_CUSTOMER_FAILED",
                    message="Failed to retrieve customer",
                    reason=str(e),
                )
            )
