"""ListInvoices Use Case"""

import logging
from typing import Optional
from libs.result import Result, Return, Error
from src.app.repositories.invoice_repository import InvoiceRepository
from src.domain.invoice import InvoiceStatus
from .dtos import InvoiceListResponseDTO, InvoiceSummaryDTO

logger = logging.getLogger(__name__)


class ListInvoices:
    """
    Use Case: List a tenant's invoices, newest first

    Optional filters: status, customer.
    """

    def __init__(self, invoice_repo: InvoiceRepository):
        self.invoice_repo = invoice_repo

    async def execute(
        self,
        tenant_id: str,
        status: Optional[InvoiceStatus] = None,
        customer_id: Optional[int] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> Result[InvoiceListResponseDTO]:
        try:
            invoices = await self.invoice_repo.list_by_tenant(
                tenant_id=tenant_id,
                status=status,
                customer_id=customer_id,
                limit=limit,
                offset=offset,
            )

            summaries = [InvoiceSummaryDTO.from_entity(invoice) for invoice in invoices]
            return Return.ok(
                InvoiceListResponseDTO(
                    invoices=summaries,
                    count=len(summaries),
                    limit=limit,
                    offset=offset,
                )
            )

        except Exception as e:
            logger.error(f"Failed to retrieve invoices: {e}")
            return Return.err(
                Error(
                    code="LIST_INVOICES_FAILED",
                    message="Failed to retrieve invoices",
                    reason=str(e),
                )
            )
