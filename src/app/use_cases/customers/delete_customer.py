"""DeleteCustomer Use Case"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.customer_repository import CustomerRepository
from .get_customer import customer_not_found
from .dtos import DeleteCustomerResponseDTO

logger = logging.getLogger(__name__)


class DeleteCustomer:
    """
    Use Case: Delete a customer

    Invoices issued to the customer are kept; they carry the customer
    name and bill-to snapshot.
    """

    def __init__(self, uow: UnitOfWork, customer_repo: CustomerRepository):
        self.uow = uow
        self.customer_repo = customer_repo

    async def execute(self, tenant_id: str, customer_id: int) -> Result[DeleteCustomerResponseDTO]:
        try:
            customer = await self.customer_repo.get_by_id(tenant_id, customer_id)
            if not customer:
                return Return.err(customer_not_found(customer_id))

            await self.customer_repo.delete(customer)
            await self.uow.commit()

            logger.info(f"Deleted customer {customer_id} for tenant {tenant_id}")
            return Return.ok(DeleteCustomerResponseDTO(customer_id=customer_id))

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to delete customer: {e}")
            return Return.err(
                Error(
                    code="DELETE_CUSTOMER_FAILED",
                    message="Failed to delete customer",
                    reason=str(e),
                )
            )
