"""Request schemas for Business Profile API"""

from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, Field
from src.domain.business_profile import Currency, FontFamily, PaymentTerms

HEX_COLOR_PATTERN = r"^#[0-9A-Fa-f]{6}$"


class UpdateBusinessProfileRequestSchema(BaseModel):
    """
    Request schema for PUT /business-profile

    Omitted fields are left unchanged. Logo fields record an upload that
    is already in logo storage; remove_logo clears it.
    """

    business_name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    street: Optional[str] = Field(default=None, min_length=1, max_length=200)
    city: Optional[str] = Field(default=None, min_length=1, max_length=100)
    state: Optional[str] = Field(default=None, min_length=1, max_length=50)
    zip_code: Optional[str] = Field(default=None, min_length=1, max_length=20)
    country: Optional[str] = Field(default=None, max_length=50)
    business_phone: Optional[str] = Field(default=None, max_length=20)
    business_email: Optional[str] = Field(default=None, max_length=100)
    tax_id: Optional[str] = Field(default=None, max_length=50)
    website: Optional[str] = Field(default=None, max_length=200)

    default_tax_rate: Optional[Decimal] = Field(
        default=None,
        ge=0,
        le=1,
        description="Default tax rate as a fraction (0.10 = 10%)"
    )
    currency: Optional[Currency] = None
    payment_terms: Optional[PaymentTerms] = None
    invoice_prefix: Optional[str] = Field(default=None, min_length=1, max_length=10)

    primary_color: Optional[str] = Field(default=None, pattern=HEX_COLOR_PATTERN)
    secondary_color: Optional[str] = Field(default=None, pattern=HEX_COLOR_PATTERN)
    font_family: Optional[FontFamily] = None

    logo_filename: Optional[str] = None
    logo_original_name: Optional[str] = None
    logo_mime_type: Optional[str] = None
    logo_size: Optional[int] = Field(default=None, ge=0)
    logo_path: Optional[str] = None
    remove_logo: bool = False

    class Config:
        json_schema_extra = {
            "example": {
                "business_name": "Northwind Studio",
                "default_tax_rate": "0.08",
                "payment_terms": "Net 15",
                "invoice_prefix": "NW",
                "font_family": "Georgia",
            }
        }
