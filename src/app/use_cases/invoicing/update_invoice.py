"""UpdateInvoice Use Case

Applies a partial update to an invoice, recomputing totals when the
items or the tax rate change.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.repositories.invoice_line_repository import InvoiceLineRepository
from src.domain.invoice_totals import compute_invoice_totals, to_rate
from .dtos import UpdateInvoiceCommandDTO, InvoiceResponseDTO
from .line_items import build_invoice_lines

logger = logging.getLogger(__name__)

# Fields copied verbatim when present in the command
_PLAIN_FIELDS = (
    "issue_date",
    "due_date",
    "status",
    "notes",
    "sender_name",
    "sender_address",
    "sender_phone",
    "sender_email",
    "bill_to_name",
    "bill_to_address",
    "bill_to_phone",
    "bill_to_email",
)

# Fields that may not be cleared by an explicit null
_REQUIRED_FIELDS = {"issue_date", "due_date", "status"}


class UpdateInvoice:
    """
    Use Case: Update an invoice

    Business Rules:
    1. Invoice must belong to the tenant
    2. invoice_number is immutable
    3. Supplied items replace the existing line items
    4. Totals are recomputed when items or tax_rate are supplied, and
       left untouched otherwise

    Flow:
    1. Load invoice
    2. Apply plain field changes
    3. Replace items / recompute totals if needed
    4. Persist and commit
    5. Return response
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

    async def execute(self, command: UpdateInvoiceCommandDTO) -> Result[InvoiceResponseDTO]:
        try:
            # Step 1: Load invoice
            invoice = await self.invoice_repo.get_by_id(command.tenant_id, command.invoice_id)
            if not invoice:
                return Return.err(
                    Error(
                        code="INVOICE_NOT_FOUND",
                        message=f"Invoice with ID {command.invoice_id} not found",
                        reason="Invoice does not exist",
                    )
                )

            supplied = command.model_fields_set

            # Step 2: Apply plain field changes
            for field in _PLAIN_FIELDS:
                if field not in supplied:
                    continue
                value = getattr(command, field)
                if value is None and field in _REQUIRED_FIELDS:
                    continue
                setattr(invoice, field, value)

            # Step 3: Replace items / recompute totals
            items_supplied = "items" in supplied and command.items is not None
            rate_supplied = "tax_rate" in supplied and command.tax_rate is not None

            lines = None
            if items_supplied:
                await self.invoice_line_repo.delete_by_invoice_id(invoice.id)
                lines = await self.invoice_line_repo.create_many(
                    build_invoice_lines(invoice.id, command.items)
                )

            if items_supplied or rate_supplied:
                if rate_supplied:
                    invoice.tax_rate = to_rate(command.tax_rate)
                if lines is None:
                    lines = await self.invoice_line_repo.get_by_invoice_id(invoice.id)
                totals = compute_invoice_totals(lines, invoice.tax_rate)
                invoice.subtotal = totals.subtotal
                invoice.tax = totals.tax
                invoice.total = totals.total

            # Step 4: Persist and commit
            updated_invoice = await self.invoice_repo.update(invoice)
            await self.uow.commit()

            if lines is None:
                lines = await self.invoice_line_repo.get_by_invoice_id(updated_invoice.id)

            # Step 5: Build response
            return Return.ok(InvoiceResponseDTO.from_entity(updated_invoice, lines))

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to update invoice {command.invoice_id} for tenant {command.tenant_id}: {e}")
            return Return.err(
                Error(
                    code="UPDATE_INVOICE_FAILED",
                    message="Failed to update invoice",
                    reason=str(e),
                )
            )
