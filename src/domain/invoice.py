"""Invoice Domain Entity

Tracks billing documents issued by a tenant to one of its customers.
"""

from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import BigInteger, CheckConstraint, Numeric, String, Date, Text
from src.domain.base import BaseModel, BigIntegerPK


class InvoiceStatus(str, Enum):
    """Invoice status types"""
    PENDING = "pending"
    PAID = "paid"
    OVERDUE = "overdue"
    CANCELLED = "cancelled"


class Invoice(BaseModel, table=True):
    """
    Invoice - Billing document for one customer

    Domain Rules:
    - invoice_number must be unique and never changes once assigned
    - subtotal = sum of invoice_lines.total_price
    - tax = subtotal * tax_rate, total = subtotal + tax
    - subtotal, tax and total are always derived, never taken from callers
    - sender_* and bill_to_* are snapshots copied at creation time and are
      not refreshed when the customer or business profile changes
    """

    __tablename__ = "invoices"
    __table_args__ = (
        Index('ix_invoices_tenant_id', 'tenant_id'),
        Index('ix_invoices_customer_id', 'customer_id'),
        Index('ix_invoices_status', 'status'),
        Index('ix_invoices_issue_date', 'issue_date'),
        CheckConstraint('subtotal >= 0', name='subtotal_non_negative'),
        CheckConstraint('tax >= 0', name='tax_non_negative'),
        CheckConstraint('total >= 0', name='total_non_negative'),
    )

    id: int = Field(
        sa_column=Column(BigIntegerPK, primary_key=True, autoincrement=True),
        description="Unique invoice identifier (auto-increment)"
    )

    tenant_id: str = Field(
        description="Owning tenant ID"
    )

    invoice_number: str = Field(
        sa_column=Column(String(50), nullable=False, unique=True),
        description="Unique invoice number (e.g., INV-2025-001)"
    )

    customer_id: int = Field(
        sa_column=Column(BigInteger, nullable=False),
        description="Referenced customer (no cascade on customer delete)"
    )

    customer_name: str = Field(
        sa_column=Column(String(200), nullable=False),
        description="Customer name at creation time"
    )

    issue_date: date = Field(
        sa_column=Column(Date, nullable=False),
        description="Invoice date"
    )

    due_date: date = Field(
        sa_column=Column(Date, nullable=False),
        description="Payment due date"
    )

    status: InvoiceStatus = Field(
        default=InvoiceStatus.PENDING,
        description="Invoice status (pending, paid, overdue, cancelled)"
    )

    subtotal: Decimal = Field(
        default=Decimal("0.00"),
        sa_column=Column(Numeric(14, 2), nullable=False, default=0),
        description="Sum of line totals"
    )

    tax_rate: Decimal = Field(
        sa_column=Column(Numeric(5, 4), nullable=False),
        description="Tax rate as a fraction (0.10 = 10%)"
    )

    tax: Decimal = Field(
        default=Decimal("0.00"),
        sa_column=Column(Numeric(14, 2), nullable=False, default=0),
        description="subtotal * tax_rate"
    )

    total: Decimal = Field(
        default=Decimal("0.00"),
        sa_column=Column(Numeric(14, 2), nullable=False, default=0),
        description="subtotal + tax"
    )

    notes: Optional[str] = Field(
        default=None,
        sa_column=Column(Text, nullable=True),
    )

    sender_name: Optional[str] = Field(default=None)
    sender_address: Optional[str] = Field(default=None)
    sender_phone: Optional[str] = Field(default=None)
    sender_email: Optional[str] = Field(default=None)

    bill_to_name: Optional[str] = Field(default=None)
    bill_to_address: Optional[str] = Field(default=None)
    bill_to_phone: Optional[str] = Field(default=None)
    bill_to_email: Optional[str] = Field(default=None)

    created_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="Invoice creation timestamp"
    )

    updated_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="Last update timestamp"
    )

    class Config:
        """SQLModel configuration"""
        json_schema_extra = {
            "example": {
                "id": 1,
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
            }
        }
