"""DeleteInvoice Use Case"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.repositories.invoice_line_repository import InvoiceLineRepository
from .dtos import DeleteInvoiceResponseDTO

logger = logging.getLogger(__name__)


class DeleteInvoice:
    """
    Use Case: Hard delete an invoice and its line items

    The invoice number is not reused.
    """

    def __init__(
        self,
        uow: UnitOfWork,
        invoice_repo: InvoiceRepository,
        invoice_line_repo: InvoiceLineRepository,
    ):
        self.uow = uow
        self.invoice_repo = invoice_repo
        self.invoice_line_repo = invoice_line_repo

    async def execute(self, tenant_id: str, invoice_id: int) -> Result[DeleteInvoiceResponseDTO]:
        try:
            invoice = await self.invoice_repo.get_by_id(tenant_id, invoice_id)
            if not invoice:
                return Return.err(
                    Error(
                        code="INVOICE_NOT_FOUND",
                        message=f"Invoice with ID {invoice_id} not found",
                        reason="Invoice does not exist",
                    )
                )

            invoice_number = invoice.invoice_number
            await self.invoice_line_repo.delete_by_invoice_id(invoice.id)
            await self.invoice_repo.delete(invoice)
            await self.uow.commit()

            logger.info(f"Deleted invoice {invoice_number} for tenant {tenant_id}")
            return Return.ok(
                DeleteInvoiceResponseDTO(invoice_id=invoice_id, invoice_number=invoice_number)
            )

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to delete invoice: {e}")
            return Return.err(
                Error(
                    code="DELETE_INVOICE_FAILED",
                    message="Failed to delete invoice",
                    reason=str(e),
                )
            )
