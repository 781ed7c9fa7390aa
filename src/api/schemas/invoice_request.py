"""Request schemas for Invoice API

Pydantic models for validating incoming HTTP requests.
"""

from datetime import date
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, Field, field_validator, model_validator
from src.domain.invoice import InvoiceStatus


class LineItemSchema(BaseModel):
    """One line item; its total is always computed server-side"""

    description: str = Field(..., min_length=1, max_length=255)
    quantity: Decimal = Field(..., gt=0, description="Quantity (must be > 0)")
    unit_price: Decimal = Field(..., ge=0, description="Price per unit (must be >= 0)")

    @field_validator("description")
    @classmethod
    def validate_description(cls, v):
        if not v.strip():
            raise ValueError("Description must not be blank")
        return v.strip()


class _InvoiceFieldsSchema(BaseModel):
    issue_date: Optional[date] = None
    due_date: Optional[date] = None
    notes: Optional[str] = None
    tax_rate: Optional[Decimal] = Field(
        default=None,
        ge=0,
        le=1,
        description="Tax rate as a fraction (0.10 = 10%)"
    )

    sender_name: Optional[str] = None
    sender_address: Optional[str] = None
    sender_phone: Optional[str] = None
    sender_email: Optional[str] = None
    bill_to_name: Optional[str] = None
    bill_to_address: Optional[str] = None
    bill_to_phone: Optional[str] = None
    bill_to_email: Optional[str] = None

    @model_validator(mode="after")
    def validate_dates(self):
        if self.issue_date and self.due_date and self.due_date < self.issue_date:
            raise ValueError("due_date must not be before issue_date")
        return self


class CreateInvoiceRequestSchema(_InvoiceFieldsSchema):
    """
    Request schema for creating an invoice

    Used for POST /invoices endpoint.
    """

    customer_id: int = Field(..., gt=0)
    status: InvoiceStatus = InvoiceStatus.PENDING
    items: List[LineItemSchema] = Field(default_factory=list)

    class Config:
        json_schema_extra = {
            "example": {
                "customer_id": 7,
                "issue_date": "2025-03-01",
                "due_date": "2025-03-31",
                "items": [
                    {"description": "A", "quantity": "2", "unit_price": "10.00"},
                    {"description": "B", "quantity": "1", "unit_price": "5.50"},
                ],
                "tax_rate": "0.10",
                "notes": "Thanks!",
            }
        }


class UpdateInvoiceRequestSchema(_InvoiceFieldsSchema):
    """
    Request schema for updating an invoice

    Used for PUT /invoices/{id}. Omitted fields are left unchanged;
    invoice_number is not accepted.
    """

    status: Optional[InvoiceStatus] = None
    items: Optional[List[LineItemSchema]] = None
