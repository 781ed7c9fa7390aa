"""Data Transfer Objects for Business Profile Use Cases"""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from pydantic import BaseModel
from src.domain.business_profile import (
    BusinessProfile,
    Currency,
    FontFamily,
    PaymentTerms,
)


class UpdateBusinessProfileCommandDTO(BaseModel):
    """
    Command DTO for a partial business profile update

    Only fields explicitly set are applied. remove_logo clears all logo
    metadata; logo_* fields record an already stored upload.
    """

    tenant_id: str

    # General
    business_name: Optional[str] = None
    street: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    country: Optional[str] = None
    business_phone: Optional[str] = None
    business_email: Optional[str] = None
    tax_id: Optional[str] = None
    website: Optional[str] = None

    # Invoice settings
    default_tax_rate: Optional[Decimal] = None
    currency: Optional[Currency] = None
    payment_terms: Optional[PaymentTerms] = None
    invoice_prefix: Optional[str] = None

    # Branding
    primary_color: Optional[str] = None
    secondary_color: Optional[str] = None
    font_family: Optional[FontFamily] = None

    # Logo
    logo_filename: Optional[str] = None
    logo_original_name: Optional[str] = None
    logo_mime_type: Optional[str] = None
    logo_size: Optional[int] = None
    logo_path: Optional[str] = None
    remove_logo: bool = False


class LogoDTO(BaseModel):
    filename: Optional[str] = None
    original_name: Optional[str] = None
    mime_type: Optional[str] = None
    size: Optional[int] = None
    path: Optional[str] = None


class BusinessProfileResponseDTO(BaseModel):
    """Business profile as returned to callers"""

    profile_id: int
    tenant_id: str
    business_name: str
    street: str
    city: str
    state: str
    zip_code: str
    country: str
    full_business_address: str
    business_phone: Optional[str] = None
    business_email: Optional[str] = None
    tax_id: Optional[str] = None
    website: Optional[str] = None
    logo: Optional[LogoDTO] = None
    default_tax_rate: Decimal
    currency: str
    payment_terms: str
    invoice_prefix: str
    next_invoice_number: int
    primary_color: str
    secondary_color: str
    font_family: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, profile: BusinessProfile) -> "BusinessProfileResponseDTO":
        logo = None
        if profile.has_logo:
            logo = LogoDTO(
                filename=profile.logo_filename,
                original_name=profile.logo_original_name,
                mime_type=profile.logo_mime_type,
                size=profile.logo_size,
                path=profile.logo_path,
            )

        return cls(
            profile_id=profile.id,
            tenant_id=profile.tenant_id,
            business_name=profile.business_name,
            street=profile.street,
            city=profile.city,
            state=profile.state,
            zip_code=profile.zip_code,
            country=profile.country,
            full_business_address=profile.full_business_address,
            business_phone=profile.business_phone,
            business_email=profile.business_email,
            tax_id=profile.tax_id,
            website=profile.website,
            logo=logo,
            default_tax_rate=profile.default_tax_rate,
            currency=Currency(profile.currency).value,
            payment_terms=PaymentTerms(profile.payment_terms).value,
            invoice_prefix=profile.invoice_prefix,
            next_invoice_number=profile.next_invoice_number,
            primary_color=profile.primary_color,
            secondary_color=profile.secondary_color,
            font_family=FontFamily(profile.font_family).value,
            created_at=profile.created_at,
            updated_at=profile.updated_at,
        )
