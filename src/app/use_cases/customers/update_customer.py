"""UpdateCustomer Use Case"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.customer_repository import CustomerRepository
from .create_customer import normalize_email
from .get_customer import customer_not_found
from .dtos import UpdateCustomerCommandDTO, CustomerResponseDTO

logger = logging.getLogger(__name__)

_UPDATABLE_FIELDS = (
    "name",
    "email",
    "phone",
    "street",
    "city",
    "state",
    "zip_code",
    "country",
    "company",
    "notes",
    "status",
)

# Columns that are NOT NULL; an explicit null leaves them unchanged
_REQUIRED_FIELDS = {"name", "email", "street", "city", "state", "zip_code", "country", "status"}


class UpdateCustomer:
    """
    Use Case: Partially update a customer

    Existing invoices keep the customer name they were issued with.
    """

    def __init__(self, uow: UnitOfWork, customer_repo: CustomerRepository):
        self.uow = uow
        self.customer_repo = customer_repo

    async def execute(self, command: UpdateCustomerCommandDTO) -> Result[CustomerResponseDTO]:
        try:
            customer = await self.customer_repo.get_by_id(command.tenant_id, command.customer_id)
            if not customer:
                return Return.err(customer_not_found(command.customer_id))

            for field in _UPDATABLE_FIELDS:
                if field not in command.model_fields_set:
                    continue
                value = getattr(command, field)
                if value is None and field in _REQUIRED_FIELDS:
                    continue
                if field == "email":
                    value = normalize_email(value)
                setattr(customer, field, value)

            updated_customer = await self.customer_repo.update(customer)
            await self.uow.commit()

            return Return.ok(CustomerResponseDTO.from_entity(updated_customer))

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to update customer: {e}")
            return Return.err(
                Error(
                    code="UPDATE_CUSTOMER_FAILED",
                    message="Failed to update customer",
                    reason=str(e),
                )
            )
