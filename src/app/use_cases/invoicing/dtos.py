"""Data Transfer Objects for Invoicing Use Cases

Pydantic models for command inputs and response outputs.
"""

from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, Field
from src.domain.invoice import Invoice, InvoiceStatus
from src.domain.invoice_line import InvoiceLine


class LineItemCommandDTO(BaseModel):
    """
    One line item as supplied by the caller

    No total is accepted; it is always derived from quantity and unit_price.
    """

    description: str = Field(..., description="Line item description")
    quantity: Decimal = Field(..., description="Quantity")
    unit_price: Decimal = Field(..., description="Price per unit")


class CreateInvoiceCommandDTO(BaseModel):
    """
    Command DTO for creating an invoice

    Used as input to CreateInvoice use case.
    """

    tenant_id: str = Field(..., description="Tenant identifier")
    customer_id: int = Field(..., description="Customer to bill")
    issue_date: Optional[date] = Field(
        default=None,
        description="Invoice date (defaults to today)"
    )
    due_date: Optional[date] = Field(
        default=None,
        description="Payment due date (defaults from the tenant's payment terms)"
    )
    status: InvoiceStatus = Field(default=InvoiceStatus.PENDING)
    items: List[LineItemCommandDTO] = Field(default_factory=list)
    notes: Optional[str] = None
    tax_rate: Optional[Decimal] = Field(
        default=None,
        description="Tax rate fraction (defaults to the tenant's default_tax_rate)"
    )

    sender_name: Optional[str] = None
    sender_address: Optional[str] = None
    sender_phone: Optional[str] = None
    sender_email: Optional[str] = None
    bill_to_name: Optional[str] = None
    bill_to_address: Optional[str] = None
    bill_to_phone: Optional[str] = None
    bill_to_email: Optional[str] = None

    class Config:
        json_schema_extra = {
            "example": {
                "tenant_id": "tenant_xyz789",
                "customer_id": 7,
                "issue_date": "2025-03-01",
                "due_date": "2025-03-31",
                "items": [
                    {"description": "A", "quantity": "2", "unit_price": "10.00"},
                    {"description": "B", "quantity": "1", "unit_price": "5.50"},
                ],
                "notes": "Thanks!",
            }
        }


class UpdateInvoiceCommandDTO(BaseModel):
    """
    Command DTO for a partial invoice update

    Only fields explicitly set are applied. invoice_number can never be
    changed; totals are recomputed when items or tax_rate are supplied.
    """

    tenant_id: str
    invoice_id: int
    issue_date: Optional[date] = None
    due_date: Optional[date] = None
    status: Optional[InvoiceStatus] = None
    items: Optional[List[LineItemCommandDTO]] = None
    notes: Optional[str] = None
    tax_rate: Optional[Decimal] = None

    sender_name: Optional[str] = None
    sender_address: Optional[str] = None
    sender_phone: Optional[str] = None
    sender_email: Optional[str] = None
    bill_to_name: Optional[str] = None
    bill_to_address: Optional[str] = None
    bill_to_phone: Optional[str] = None
    bill_to_email: Optional[str] = None


class InvoiceLineDTO(BaseModel):
    """Line item DTO for invoice responses"""

    id: int
    position: int
    description: str
    quantity: Decimal
    unit_price: Decimal
    total_price: Decimal

    @classmethod
    def from_entity(cls, line: InvoiceLine) -> "InvoiceLineDTO":
        return cls(
            id=line.id,
            position=line.position,
            description=line.description,
            quantity=line.quantity,
            unit_price=line.unit_price,
            total_price=line.total_price,
        )


class InvoiceSummaryDTO(BaseModel):
    """Invoice without line items, used in listings"""

    invoice_id: int
    tenant_id: str
    invoice_number: str
    customer_id: int
    customer_name: str
    issue_date: date
    due_date: date
    status: str
    subtotal: Decimal
    tax_rate: Decimal
    tax: Decimal
    total: Decimal
    created_at: datetime

    @classmethod
    def from_entity(cls, invoice: Invoice) -> "InvoiceSummaryDTO":
        return cls(
            invoice_id=invoice.id,
            tenant_id=invoice.tenant_id,
            invoice_number=invoice.invoice_number,
            customer_id=invoice.customer_id,
            customer_name=invoice.customer_name,
            issue_date=invoice.issue_date,
            due_date=invoice.due_date,
            status=InvoiceStatus(invoice.status).value,
            subtotal=invoice.subtotal,
            tax_rate=invoice.tax_rate,
            tax=invoice.tax,
            total=invoice.total,
            created_at=invoice.created_at,
        )


class InvoiceResponseDTO(InvoiceSummaryDTO):
    """
    Full invoice response

    Returned by CreateInvoice, UpdateInvoice and GetInvoice.
    """

    notes: Optional[str] = None
    sender_name: Optional[str] = None
    sender_address: Optional[str] = None
    sender_phone: Optional[str] = None
    sender_email: Optional[str] = None
    bill_to_name: Optional[str] = None
    bill_to_address: Optional[str] = None
    bill_to_phone: Optional[str] = None
    bill_to_email: Optional[str] = None
    items: List[InvoiceLineDTO] = Field(default_factory=list)
    updated_at: datetime

    @classmethod
    def from_entity(
        cls, invoice: Invoice, lines: Optional[List[InvoiceLine]] = None
    ) -> "InvoiceResponseDTO":
        summary = InvoiceSummaryDTO.from_entity(invoice)
        return cls(
            **summary.model_dump(),
            notes=invoice.notes,
            sender_name=invoice.sender_name,
            sender_address=invoice.sender_address,
            sender_phone=invoice.sender_phone,
            sender_email=invoice.sender_email,
            bill_to_name=invoice.bill_to_name,
            bill_to_address=invoice.bill_to_address,
            bill_to_phone=invoice.bill_to_phone,
            bill_to_email=invoice.bill_to_email,
            items=[InvoiceLineDTO.from_entity(line) for line in lines or []],
            updated_at=invoice.updated_at,
        )

    class Config:
        json_schema_extra = {
            "example": {
                "invoice_id": 1,
                "tenant_id": "tenant_xyz789",
                "invoice_number": "INV-2025-001",
                "customer_id": 7,
                "customer_name": "Acme Corp",
                "issue_date": "2025-03-01",
                "due_date": "2025-03-31",
                "status": "pending",
                "subtotal": "25.50",
                "tax_rate": "0.1000",
                "tax": "2.55",
                "total": "28.05",
                "items": [],
                "created_at": "2025-03-01T00:00:00Z",
                "updated_at": "2025-03-01T00:00:00Z",
            }
        }


class InvoiceListResponseDTO(BaseModel):
    """Response DTO for ListInvoices"""

    invoices: List[InvoiceSummaryDTO]
    count: int
    limit: int
    offset: int


class InvoiceOverviewDTO(BaseModel):
    """Aggregate figures over all invoices of a tenant"""

    total_invoices: int = 0
    total_amount: Decimal = Decimal("0.00")
    average_amount: Decimal = Decimal("0.00")
    pending_invoices: int = 0
    paid_invoices: int = 0
    overdue_invoices: int = 0


class MonthlyInvoiceTotalsDTO(BaseModel):
    """Invoice count and amount for one calendar month"""

    year: int
    month: int
    count: int
    total: Decimal


class InvoiceStatsResponseDTO(BaseModel):
    """Response DTO for GetInvoiceStats"""

    overview: InvoiceOverviewDTO
    monthly: List[MonthlyInvoiceTotalsDTO]


class DeleteInvoiceResponseDTO(BaseModel):
    """Response DTO for DeleteInvoice"""

    invoice_id: int
    invoice_number: str
    deleted: bool = True


class InvoicePdfDTO(BaseModel):
    """Rendered invoice document"""

    invoice_id: int
    invoice_number: str
    filename: str
    content: bytes
    generated_at: datetime
