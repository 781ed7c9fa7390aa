"""Invoice API Routes

FastAPI routes for invoice CRUD, statistics and PDF download.
"""

from decimal import Decimal
from typing import Optional
from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import Response
from sqlmodel.ext.asyncio.session import AsyncSession

from src.api.schemas.invoice_request import CreateInvoiceRequestSchema, UpdateInvoiceRequestSchema
from src.api.dependencies import get_tenant_id
from src.api.error import raise_client_error
from src.app.services.invoice_numbering import InvoiceNumberAllocator
from src.app.services.logo_storage import LogoStorage
from src.app.services.pdf_service import PdfService
from src.app.use_cases.invoicing import (
    CreateInvoice,
    UpdateInvoice,
    GetInvoice,
    ListInvoices,
    DeleteInvoice,
    GetInvoiceStats,
    RenderInvoicePdf,
    CreateInvoiceCommandDTO,
    UpdateInvoiceCommandDTO,
    InvoiceResponseDTO,
    InvoiceListResponseDTO,
    InvoiceStatsResponseDTO,
    DeleteInvoiceResponseDTO,
)
from src.adapter.repositories import (
    SqlAlchemyInvoiceRepository,
    SqlAlchemyInvoiceLineRepository,
    SqlAlchemyCustomerRepository,
    SqlAlchemyBusinessProfileRepository,
)
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import (
    get_session,
    get_default_tax_rate,
    get_pdf_service,
    get_logo_storage,
    build_counter_repository,
)
from src.domain.invoice import InvoiceStatus

router = APIRouter(tags=["Invoices"])

NOT_FOUND_RESPONSE = {
    404: {
        "description": "Invoice not found",
        "content": {
            "application/json": {
                "example": {
                    "error": {
                        "code": "INVOICE_NOT_FOUND",
                        "message": "Invoice with ID 123 not found"
                    }
                }
            }
        }
    }
}


@router.post(
    "/invoices",
    response_model=InvoiceResponseDTO,
    status_code=status.HTTP_201_CREATED,
    responses={
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
        },
        500: {
            "description": "Invoice number could not be allocated",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "NUMBERING_FAILED",
                            "message": "Invoice not created: invoice number could not be allocated"
                        }
                    }
                }
            }
        }
    }
)
async def create_invoice(
    request: CreateInvoiceRequestSchema,
    tenant_id: str = Depends(get_tenant_id),
    session: AsyncSession = Depends(get_session),
    default_tax_rate: Decimal = Depends(get_default_tax_rate),
):
    """
    Create an invoice for one of the tenant's customers.

    The invoice number (PREFIX-YEAR-NNN) and all totals are computed by the
    server; line totals are derived from quantity and unit price.

    **Returns:**
    - 201: Invoice created
    - 404: Customer not found
    - 422: Invalid items or dates
    - 500: Invoice number could not be allocated
    """
    uow = SqlAlchemyUnitOfWork(session)
    allocator = InvoiceNumberAllocator(build_counter_repository(session))

    command = CreateInvoiceCommandDTO(
        tenant_id=tenant_id,
        **request.model_dump(exclude_unset=True),
    )

    use_case = CreateInvoice(
        uow,
        SqlAlchemyInvoiceRepository(session),
        SqlAlchemyInvoiceLineRepository(session),
        SqlAlchemyCustomerRepository(session),
        SqlAlchemyBusinessProfileRepository(session),
        allocator,
        default_tax_rate=default_tax_rate,
    )
    result = await use_case.execute(command)

    if result.is_err():
        raise_client_error(result.error)

    return result.value


@router.get(
    "/invoices",
    response_model=InvoiceListResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def list_invoices(
    status_filter: Optional[InvoiceStatus] = Query(default=None, alias="status"),
    customer_id: Optional[int] = Query(default=None),
    limit: int = Query(default=50, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
    tenant_id: str = Depends(get_tenant_id),
    session: AsyncSession = Depends(get_session),
):
    """
    List the tenant's invoices, newest first.

    **Query parameters:**
    - `status` (optional): pending, paid, overdue or cancelled
    - `customer_id` (optional): Only invoices of this customer
    - `limit` / `offset`: Pagination
    """
    use_case = ListInvoices(SqlAlchemyInvoiceRepository(session))
    result = await use_case.execute(
        tenant_id,
        status=status_filter,
        customer_id=customer_id,
        limit=limit,
        offset=offset,
    )

    if result.is_err():
        raise_client_error(result.error)

    return result.value


@router.get(
    "/invoices/stats",
    response_model=InvoiceStatsResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def get_invoice_stats(
    tenant_id: str = Depends(get_tenant_id),
    session: AsyncSession = Depends(get_session),
):
    """Overview figures and monthly totals for the last 12 months."""
    use_case = GetInvoiceStats(SqlAlchemyInvoiceRepository(session))
    result = await use_case.execute(tenant_id)

    if result.is_err():
        raise_client_error(result.error)

    return result.value


@router.get(
    "/invoices/{invoice_id}",
    response_model=InvoiceResponseDTO,
    status_code=status.HTTP_200_OK,
    responses=NOT_FOUND_RESPONSE,
)
async def get_invoice(
    invoice_id: int,
    tenant_id: str = Depends(get_tenant_id),
    session: AsyncSession = Depends(get_session),
):
    use_case = GetInvoice(
        SqlAlchemyInvoiceRepository(session),
        SqlAlchemyInvoiceLineRepository(session),
    )
    result = await use_case.execute(tenant_id, invoice_id)

    if result.is_err():
        raise_client_error(result.error)

    return result.value


@router.put(
    "/invoices/{invoice_id}",
    response_model=InvoiceResponseDTO,
    status_code=status.HTTP_200_OK,
    responses=NOT_FOUND_RESPONSE,
)
async def update_invoice(
    invoice_id: int,
    request: UpdateInvoiceRequestSchema,
    tenant_id: str = Depends(get_tenant_id),
    session: AsyncSession = Depends(get_session),
):
    """
    Partially update an invoice.

    Supplying `items` replaces all line items; totals are recomputed when
    `items` or `tax_rate` is supplied. The invoice number never changes.
    """
    command = UpdateInvoiceCommandDTO(
        tenant_id=tenant_id,
        invoice_id=invoice_id,
        **request.model_dump(exclude_unset=True),
    )

    use_case = UpdateInvoice(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyInvoiceRepository(session),
        SqlAlchemyInvoiceLineRepository(session),
    )
    result = await use_case.execute(command)

    if result.is_err():
        raise_client_error(result.error)

    return result.value


@router.delete(
    "/invoices/{invoice_id}",
    response_model=DeleteInvoiceResponseDTO,
    status_code=status.HTTP_200_OK,
    responses=NOT_FOUND_RESPONSE,
)
async def delete_invoice(
    invoice_id: int,
    tenant_id: str = Depends(get_tenant_id),
    session: AsyncSession = Depends(get_session),
):
    use_case = DeleteInvoice(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyInvoiceRepository(session),
        SqlAlchemyInvoiceLineRepository(session),
    )
    result = await use_case.execute(tenant_id, invoice_id)

    if result.is_err():
        raise_client_error(result.error)

    return result.value


@router.get(
    "/invoices/{invoice_id}/pdf",
    responses={
        200: {
            "content": {"application/pdf": {}},
            "description": "PDF document"
        },
        **NOT_FOUND_RESPONSE,
        500: {
            "description": "PDF could not be generated",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "RENDER_FAILED",
                            "message": "PDF not available"
                        }
                    }
                }
            }
        }
    }
)
async def download_invoice_pdf(
    invoice_id: int,
    tenant_id: str = Depends(get_tenant_id),
    session: AsyncSession = Depends(get_session),
    pdf_service: PdfService = Depends(get_pdf_service),
    logo_storage: LogoStorage = Depends(get_logo_storage),
):
    """
    Download the invoice as a PDF file.

    **Returns:**
    - 200: PDF file as binary response
    - 404: Invoice not found
    - 500: PDF could not be generated
    """
    use_case = RenderInvoicePdf(
        SqlAlchemyInvoiceRepository(session),
        SqlAlchemyInvoiceLineRepository(session),
        SqlAlchemyCustomerRepository(session),
        SqlAlchemyBusinessProfileRepository(session),
        pdf_service,
        logo_storage,
    )
    result = await use_case.execute(tenant_id, invoice_id)

    if result.is_err():
        raise_client_error(result.error)

    return Response(
        content=result.value.content,
        media_type="application/pdf",
        headers={
            "Content-Disposition": f'attachment; filename="{result.value.filename}"'
        }
    )
