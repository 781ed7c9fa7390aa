"""GetInvoiceStats Use Case"""

import logging
from libs.result import Result, Return, Error
from src.app.repositories.invoice_repository import InvoiceRepository
from .dtos import InvoiceStatsResponseDTO, InvoiceOverviewDTO, MonthlyInvoiceTotalsDTO

logger = logging.getLogger(__name__)

MONTHS_OF_HISTORY = 12


class GetInvoiceStats:
    """
    Use Case: Invoice dashboard figures

    Returns an overview over all invoices of the tenant plus per-month
    totals for the last 12 months with activity.
    """

    def __init__(self, invoice_repo: InvoiceRepository):
        self.invoice_repo = invoice_repo

    async def execute(self, tenant_id: str) -> Result[InvoiceStatsResponseDTO]:
        try:
            overview = await self.invoice_repo.get_overview(tenant_id)
            monthly = await self.invoice_repo.get_monthly_totals(
                tenant_id, months=MONTHS_OF_HISTORY
            )

            return Return.ok(
                InvoiceStatsResponseDTO(
                    overview=InvoiceOverviewDTO(**overview),
                    monthly=[MonthlyInvoiceTotalsDTO(**row) for row in monthly],
                )
            )

        except Exception as e:
            logger.error(f"Failed to retrieve invoice statistics: {e}")
            return Return.err(
                Error(
                    code="INVOICE_STATS_FAILED",
                    message="Failed to retrieve invoice statistics",
                    reason=str(e),
                )
            )
