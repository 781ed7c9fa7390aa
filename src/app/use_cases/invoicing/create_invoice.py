"""CreateInvoice Use Case

Creates an invoice for a tenant's customer with an allocated number,
derived totals and sender/bill-to snapshots.
"""

import logging
from datetime import datetime, timedelta
from decimal import Decimal
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.errors import NumberingFailed
from src.app.services.invoice_numbering import InvoiceNumberAllocator, DEFAULT_PREFIX
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.repositories.invoice_line_repository import InvoiceLineRepository
from src.app.repositories.customer_repository import CustomerRepository
from src.app.repositories.business_profile_repository import BusinessProfileRepository
from src.domain.business_profile import DEFAULT_TAX_RATE
from src.domain.invoice import Invoice
from src.domain.invoice_totals import compute_invoice_totals, to_rate
from .dtos import CreateInvoiceCommandDTO, InvoiceResponseDTO
from .line_items import build_invoice_lines

logger = logging.getLogger(__name__)

DEFAULT_PAYMENT_DAYS = 30


class CreateInvoice:
    """
    Use Case: Create an invoice

    Business Rules:
    1. Customer must belong to the tenant
    2. Tax rate: command value, else the tenant's default_tax_rate, else 10%
    3. Invoice number is allocated atomically (PREFIX-YEAR-NNN); if that
       fails nothing is persisted
    4. Line totals and subtotal/tax/total are always derived from items
    5. Sender and bill-to details are snapshotted from the business profile
       and customer unless given explicitly

    Flow:
    1. Load customer and business profile
    2. Resolve tax rate, dates and prefix
    3. Allocate invoice number
    4. Compute totals
    5. Persist invoice and line items
    6. Commit transaction
    7. Return response
    """

    def __init__(
        self,
        uow: UnitOfWork,
        invoice_repo: InvoiceRepository,
        invoice_line_repo: InvoiceLineRepository,
        customer_repo: CustomerRepository,
        profile_repo: BusinessProfileRepository,
        number_allocator: InvoiceNumberAllocator,
        default_tax_rate: Decimal = DEFAULT_TAX_RATE,
    ):
        self.uow = uow
        self.invoice_repo = invoice_repo
        self.invoice_line_repo = invoice_line_repo
        self.customer_repo = customer_repo
        self.profile_repo = profile_repo
        self.number_allocator = number_allocator
        self.default_tax_rate = default_tax_rate

    async def execute(self, command: CreateInvoiceCommandDTO) -> Result[InvoiceResponseDTO]:
        """
        Execute invoice creation

        Args:
            command: CreateInvoiceCommandDTO with customer, dates and items

        Returns:
            Result[InvoiceResponseDTO]: Success with invoice details or error
        """
        try:
            # Step 1: Load customer and business profile
            customer = await self.customer_repo.get_by_id(command.tenant_id, command.customer_id)
            if not customer:
                return Return.err(
                    Error(
                        code="CUSTOMER_NOT_FOUND",
                        message=f"Customer with ID {command.customer_id} not found",
                        reason="Customer does not exist for this tenant",
                    )
                )

            profile = await self.profile_repo.get_by_tenant_id(command.tenant_id)

            # Step 2: Resolve tax rate, dates and prefix
            if command.tax_rate is not None:
                tax_rate = to_rate(command.tax_rate)
            elif profile is not None:
                tax_rate = to_rate(profile.default_tax_rate)
            else:
                tax_rate = to_rate(self.default_tax_rate)

            issue_date = command.issue_date or datetime.utcnow().date()
            payment_days = profile.payment_term_days if profile else DEFAULT_PAYMENT_DAYS
            due_date = command.due_date or issue_date + timedelta(days=payment_days)
            prefix = profile.invoice_prefix if profile and profile.invoice_prefix else DEFAULT_PREFIX

            # Step 3: Allocate invoice number
            invoice_number = await self.number_allocator.allocate(issue_date.year, prefix)

            # Step 4: Compute totals from the stored-scale line values
            lines = build_invoice_lines(None, command.items)
            totals = compute_invoice_totals(lines, tax_rate)

            # Step 5: Persist invoice and line items
            invoice = Invoice(
                tenant_id=command.tenant_id,
                invoice_number=invoice_number,
                customer_id=customer.id,
                customer_name=customer.name,
                issue_date=issue_date,
                due_date=due_date,
                status=command.status,
                subtotal=totals.subtotal,
                tax_rate=tax_rate,
                tax=totals.tax,
                total=totals.total,
                notes=command.notes,
                sender_name=command.sender_name or (profile.business_name if profile else None),
                sender_address=command.sender_address or (profile.full_business_address if profile else None),
                sender_phone=command.sender_phone or (profile.business_phone if profile else None),
                sender_email=command.sender_email or (profile.business_email if profile else None),
                bill_to_name=command.bill_to_name or customer.name,
                bill_to_address=command.bill_to_address or customer.full_address,
                bill_to_phone=command.bill_to_phone or customer.phone,
                bill_to_email=command.bill_to_email or customer.email,
            )

            created_invoice = await self.invoice_repo.create(invoice)
            for line in lines:
                line.invoice_id = created_invoice.id
            created_lines = await self.invoice_line_repo.create_many(lines)

            # Step 6: Commit transaction
            await self.uow.commit()

            logger.info(
                f"Created invoice {created_invoice.invoice_number} for tenant "
                f"{command.tenant_id}, total={created_invoice.total}"
            )

            # Step 7: Build response
            return Return.ok(InvoiceResponseDTO.from_entity(created_invoice, created_lines))

        except NumberingFailed as e:
            await self.uow.rollback()
            return Return.err(
                Error(
                    code=e.code,
                    message="Invoice not created: invoice number could not be allocated",
                    reason=e.reason,
                )
            )

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to create invoice for tenant {command.tenant_id}: {e}")
            return Return.err(
                Error(
                    code="CREATE_INVOICE_FAILED",
                    message="Failed to create invoice",
                    reason=str(e),
                )
            )
