"""CreateCustomer Use Case"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.customer_repository import CustomerRepository
from src.domain.customer import Customer
from .dtos import CreateCustomerCommandDTO, CustomerResponseDTO

logger = logging.getLogger(__name__)


def normalize_email(email: str) -> str:
    return email.strip().lower()


class CreateCustomer:
    """
    Use Case: Register a billing contact for a tenant

    Business Rules:
    1. Email is stored lowercase
    2. Name and address fields are trimmed
    """

    def __init__(self, uow: UnitOfWork, customer_repo: CustomerRepository):
        self.uow = uow
        self.customer_repo = customer_repo

    async def execute(self, command: CreateCustomerCommandDTO) -> Result[CustomerResponseDTO]:
        try:
            customer = Customer(
                tenant_id=command.tenant_id,
                name=command.name.strip(),
                email=normalize_email(command.email),
                phone=command.phone,
                street=command.street.strip(),
                city=command.city.strip(),
                state=command.state.strip(),
                zip_code=command.zip_code.strip(),
                country=command.country,
                company=command.company,
                notes=command.notes,
                status=command.status,
            )

            created_customer = await self.customer_repo.create(customer)
            await self.uow.commit()

            logger.info(
                f"Created customer {created_customer.id} for tenant {command.tenant_id}"
            )
            return Return.ok(CustomerResponseDTO.from_entity(created_customer))

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to create customer: {e}")
            return Return.err(
                Error(
                    code="CREATE_CUSTOMER_FAILED",
                    message="Failed to create customer",
                    reason=str(e),
                )
            )
