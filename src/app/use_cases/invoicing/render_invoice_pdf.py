"""RenderInvoicePdf Use Case

Produces the PDF document of an invoice for download.
"""

import asyncio
import logging
from datetime import datetime
from libs.result import Result, Return, Error
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.repositories.invoice_line_repository import InvoiceLineRepository
from src.app.repositories.customer_repository import CustomerRepository
from src.app.repositories.business_profile_repository import BusinessProfileRepository
from src.app.services.errors import RenderFailed
from src.app.services.logo_storage import LogoStorage
from src.app.services.pdf_service import PdfService, PdfRenderOptions
from .dtos import InvoicePdfDTO

logger = logging.getLogger(__name__)


def pdf_filename(invoice_number: str) -> str:
    return f"invoice-{invoice_number}.pdf"


class RenderInvoicePdf:
    """
    Use Case: Render an invoice as PDF

    Business Rules:
    1. Invoice must belong to the tenant
    2. The customer and business profile are optional; the document falls
       back to the invoice snapshots and placeholders
    3. Rendering runs in a worker thread so the event loop is not blocked
    4. Either the complete document is returned or RENDER_FAILED

    Flow:
    1. Load invoice and line items
    2. Load customer and business profile
    3. Resolve logo path
    4. Render PDF off the event loop
    5. Return document
    """

    def __init__(
        self,
        invoice_repo: InvoiceRepository,
        invoice_line_repo: InvoiceLineRepository,
        customer_repo: CustomerRepository,
        profile_repo: BusinessProfileRepository,
        pdf_service: PdfService,
        logo_storage: LogoStorage,
    ):
        self.invoice_repo = invoice_repo
        self.invoice_line_repo = invoice_line_repo
        self.customer_repo = customer_repo
        self.profile_repo = profile_repo
        self.pdf_service = pdf_service
        self.logo_storage = logo_storage

    async def execute(self, tenant_id: str, invoice_id: int) -> Result[InvoicePdfDTO]:
        try:
            # Step 1: Load invoice and line items
            invoice = await self.invoice_repo.get_by_id(tenant_id, invoice_id)
            if not invoice:
                return Return.err(
                    Error(
                        code="INVOICE_NOT_FOUND",
                        message=f"Invoice with ID {invoice_id} not found",
                        reason="Invoice does not exist",
                    )
                )
            invoice_lines = await self.invoice_line_repo.get_by_invoice_id(invoice.id)

            # Step 2: Load customer and business profile
            customer = await self.customer_repo.get_by_id(tenant_id, invoice.customer_id)
            profile = await self.profile_repo.get_by_tenant_id(tenant_id)

            # Step 3: Resolve logo path
            logo_path = self.logo_storage.resolve(profile.logo_path) if profile else None

            # Step 4: Render PDF off the event loop
            content = await asyncio.to_thread(
                self.pdf_service.render,
                invoice,
                invoice_lines,
                customer,
                profile,
                PdfRenderOptions(logo_path=logo_path),
            )

            # Step 5: Return document
            return Return.ok(
                InvoicePdfDTO(
                    invoice_id=invoice.id,
                    invoice_number=invoice.invoice_number,
                    filename=pdf_filename(invoice.invoice_number),
                    content=content,
                    generated_at=datetime.utcnow(),
                )
            )

        except RenderFailed as e:
            return Return.err(
                Error(
                    code=e.code,
                    message="PDF not available",
                    reason=e.reason,
                )
            )

        except Exception as e:
            logger.error(f"Failed to render invoice {invoice_id}: {e}")
            return Return.err(
                Error(
                    code="RENDER_FAILED",
                    message="PDF not available",
                    reason=str(e),
                )
            )
