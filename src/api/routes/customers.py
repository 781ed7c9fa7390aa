"""Customer API Routes

FastAPI routes for customer management and a customer's invoices.
"""

from typing import Optional
from fastapi import APIRouter, Depends, Query, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.api.schemas.customer_request import CreateCustomerRequestSchema, UpdateCustomerRequestSchema
from src.api.dependencies import get_tenant_id
from src.api.error import raise_client_error
from src.app.use_cases.customers import (
    CreateCustomer,
    GetCustomer,
    ListCustomers,
    UpdateCustomer,
    DeleteCustomer,
    CreateCustomerCommandDTO,
    UpdateCustomerCommandDTO,
    CustomerResponseDTO,
    CustomerListResponseDTO,
    DeleteCustomerResponseDTO,
)
from src.app.use_cases.invoicing import ListInvoices, InvoiceListResponseDTO
from src.adapter.repositories import SqlAlchemyCustomerRepository, SqlAlchemyInvoiceRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_session
from src.domain.customer import CustomerStatus

router = APIRouter(prefix="/customers", tags=["Customers"])

NOT_FOUND_RESPONSE = {
    404: {
        "description": "Customer not found",
        "content": {
            "application/json": {
                "example": {
                    "error": {
                        "code": "CUSTOMER_NOT_FOUND",
                        "message": "Customer with ID 7 not found"
                    }
                }
            }
        }
    }
}


@router.post(
    "",
    response_model=CustomerResponseDTO,
    status_code=status.HTTP_201_CREATED,
)
async def create_customer(
    request: CreateCustomerRequestSchema,
    tenant_id: str = Depends(get_tenant_id),
    session: AsyncSession = Depends(get_session),
):
    """Register a billing contact for the tenant. Email is stored lowercase."""
    command = CreateCustomerCommandDTO(tenant_id=tenant_id, **request.model_dump())

    use_case = CreateCustomer(SqlAlchemyUnitOfWork(session), SqlAlchemyCustomerRepository(session))
    result = await use_case.execute(command)

    if result.is_err():
        raise_client_error(result.error)

    return result.value


@router.get(
    "",
    response_model=CustomerListResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def list_customers(
    status_filter: Optional[CustomerStatus] = Query(default=None, alias="status"),
    search: Optional[str] = Query(default=None, max_length=100),
    limit: int = Query(default=50, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
    tenant_id: str = Depends(get_tenant_id),
    session: AsyncSession = Depends(get_session),
):
    """
    List the tenant's customers, newest first.

    **Query parameters:**
    - `status` (optional): active or inactive
    - `search` (optional): Matches name, email or company
    """
    use_case = ListCustomers(SqlAlchemyCustomerRepository(session))
    result = await use_case.execute(
        tenant_id, status=status_filter, search=search, limit=limit, offset=offset
    )

    if result.is_err():
        raise_client_error(result.error)

    return result.value


@router.get(
    "/{customer_id}",
    response_model=CustomerResponseDTO,
    status_code=status.HTTP_200_OK,
    responses=NOT_FOUND_RESPONSE,
)
async def get_customer(
    customer_id: int,
    tenant_id: str = Depends(get_tenant_id),
    session: AsyncSession = Depends(get_session),
):
    use_case = GetCustomer(SqlAlchemyCustomerRepository(session))
    result = await use_case.execute(tenant_id, customer_id)

    if result.is_err():
        raise_client_error(result.error)

    return result.value


@router.put(
    "/{customer_id}",
    response_model=CustomerResponseDTO,
    status_code=status.HTTP_200_OK,
    responses=NOT_FOUND_RESPONSE,
)
async def update_customer(
    customer_id: int,
    request: UpdateCustomerRequestSchema,
    tenant_id: str = Depends(get_tenant_id),
    session: AsyncSession = Depends(get_session),
):
    command = UpdateCustomerCommandDTO(
        tenant_id=tenant_id,
        customer_id=customer_id,
        **request.model_dump(exclude_unset=True),
    )

    use_case = UpdateCustomer(SqlAlchemyUnitOfWork(session), SqlAlchemyCustomerRepository(session))
    result = await use_case.execute(command)

    if result.is_err():
        raise_client_error(result.error)

    return result.value


@router.delete(
    "/{customer_id}",
    response_model=DeleteCustomerResponseDTO,
    status_code=status.HTTP_200_OK,
    responses=NOT_FOUND_RESPONSE,
)
async def delete_customer(
    customer_id: int,
    tenant_id: str = Depends(get_tenant_id),
    session: AsyncSession = Depends(get_session),
):
    """Delete a customer. Invoices already issued to the customer are kept."""
    use_case = DeleteCustomer(SqlAlchemyUnitOfWork(session), SqlAlchemyCustomerRepository(session))
    result = await use_case.execute(tenant_id, customer_id)

    if result.is_err():
        raise_client_error(result.error)

    return result.value


@router.get(
    "/{customer_id}/invoices",
    response_model=InvoiceListResponseDTO,
    status_code=status.HTTP_200_OK,
    responses=NOT_FOUND_RESPONSE,
)
async def list_customer_invoices(
    customer_id: int,
    limit: int = Query(default=50, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
    tenant_id: str = Depends(get_tenant_id),
    session: AsyncSession = Depends(get_session),
):
    """Invoices billed to one customer, newest first."""
    customer_result = await GetCustomer(SqlAlchemyCustomerRepository(session)).execute(
        tenant_id, customer_id
    )
    if customer_result.is_err():
        raise_client_error(customer_result.error)

    use_case = ListInvoices(SqlAlchemyInvoiceRepository(session))
    result = await use_case.execute(
        tenant_id, customer_id=customer_id, limit=limit, offset=offset
    )

    if result.is_err():
        raise_client_error(result.error)

    return result.value
