"""Invoice Line Domain Entity

Tracks individual line items within an invoice.
"""

from datetime import datetime
from decimal import Decimal
from sqlmodel import Field, Column, Index
from sqlalchemy import BigInteger, ForeignKey, Integer, Numeric, String
from src.domain.base import BaseModel, BigIntegerPK


class InvoiceLine(BaseModel, table=True):
    """
    Invoice Line - Individual line item within an invoice

    Domain Rules:
    - Each line item belongs to exactly one invoice
    - total_price = quantity * unit_price (recomputed, never trusted)
    - position keeps the order in which items were supplied
    """

    __tablename__ = "invoice_lines"
    __table_args__ = (
        Index('ix_invoice_lines_invoice_id', 'invoice_id'),
    )

    id: int = Field(
        sa_column=Column(BigIntegerPK, primary_key=True, autoincrement=True),
        description="Unique invoice line identifier (auto-increment)"
    )

    invoice_id: int = Field(
        sa_column=Column(BigInteger, ForeignKey("invoices.id", ondelete="CASCADE"), nullable=False),
        description="Foreign key to Invoice"
    )

    position: int = Field(
        default=0,
        sa_column=Column(Integer, nullable=False, default=0),
        description="Zero-based display order within the invoice"
    )

    description: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Line item description (e.g., 'Website design')"
    )

    quantity: Decimal = Field(
        sa_column=Column(Numeric(14, 4), nullable=False),
        description="Quantity (e.g., hours, units)"
    )

    unit_price: Decimal = Field(
        sa_column=Column(Numeric(14, 2), nullable=False),
        description="Price per unit"
    )

    total_price: Decimal = Field(
        sa_column=Column(Numeric(14, 2), nullable=False),
        description="Total price (quantity * unit_price)"
    )

    created_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="Line item creation timestamp"
    )

    class Config:
        """SQLModel configuration"""
        json_schema_extra = {
            "example": {
                "id": 1,
                "invoice_id": 1,
                "position": 0,
                "description": "Website design",
                "quantity": "2.0000",
                "unit_price": "10.00",
                "total_price": "20.00",
                "created_at": "2025-03-01T00:00:00Z"
            }
        }
