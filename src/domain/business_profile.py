"""Business Profile Domain Entity

Per-tenant issuer details, invoice settings and branding.
"""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional
from sqlmodel import Field, Column
from sqlalchemy import CheckConstraint, Integer, Numeric, String
from src.domain.base import BaseModel, BigIntegerPK


DEFAULT_TAX_RATE = Decimal("0.10")
DEFAULT_PRIMARY_COLOR = "#F97316"
DEFAULT_SECONDARY_COLOR = "#1e293b"


class Currency(str, Enum):
    """Supported invoice currencies"""
    USD = "USD"
    EUR = "EUR"
    GBP = "GBP"
    CAD = "CAD"
    AUD = "AUD"


class PaymentTerms(str, Enum):
    """Supported payment terms"""
    NET_15 = "Net 15"
    NET_30 = "Net 30"
    NET_45 = "Net 45"
    NET_60 = "Net 60"
    DUE_ON_RECEIPT = "Due on Receipt"


PAYMENT_TERM_DAYS = {
    PaymentTerms.NET_15: 15,
    PaymentTerms.NET_30: 30,
    PaymentTerms.NET_45: 45,
    PaymentTerms.NET_60: 60,
    PaymentTerms.DUE_ON_RECEIPT: 0,
}


class FontFamily(str, Enum):
    """Font families a tenant can pick for its documents"""
    HELVETICA = "Helvetica"
    ARIAL = "Arial"
    TIMES_NEW_ROMAN = "Times New Roman"
    GEORGIA = "Georgia"
    VERDANA = "Verdana"


class BusinessProfile(BaseModel, table=True):
    """
    Business Profile - Issuer identity and invoice configuration of a tenant

    Domain Rules:
    - Exactly one profile per tenant (tenant_id is unique)
    - Created lazily with placeholder values on first access
    - default_tax_rate is a fraction between 0 and 1 (0.10 = 10%)
    - logo_path is a storage locator, resolved by LogoStorage
    """

    __tablename__ = "business_profiles"
    __table_args__ = (
        CheckConstraint(
            'default_tax_rate >= 0 AND default_tax_rate <= 1',
            name='default_tax_rate_range',
        ),
    )

    id: int = Field(
        sa_column=Column(BigIntegerPK, primary_key=True, autoincrement=True),
        description="Unique profile identifier (auto-increment)"
    )

    tenant_id: str = Field(
        index=True,
        unique=True,
        description="Tenant ID (unique - one profile per tenant)"
    )

    business_name: str = Field(
        sa_column=Column(String(100), nullable=False),
    )

    street: str = Field(sa_column=Column(String(200), nullable=False))
    city: str = Field(sa_column=Column(String(100), nullable=False))
    state: str = Field(sa_column=Column(String(50), nullable=False))
    zip_code: str = Field(sa_column=Column(String(20), nullable=False))
    country: str = Field(
        default="USA",
        sa_column=Column(String(50), nullable=False, default="USA"),
    )

    business_phone: Optional[str] = Field(
        default=None, sa_column=Column(String(20), nullable=True)
    )
    business_email: Optional[str] = Field(
        default=None, sa_column=Column(String(100), nullable=True)
    )
    tax_id: Optional[str] = Field(
        default=None, sa_column=Column(String(50), nullable=True)
    )
    website: Optional[str] = Field(
        default=None, sa_column=Column(String(200), nullable=True)
    )

    # Logo metadata
    logo_filename: Optional[str] = Field(default=None)
    logo_original_name: Optional[str] = Field(default=None)
    logo_mime_type: Optional[str] = Field(default=None)
    logo_size: Optional[int] = Field(default=None)
    logo_path: Optional[str] = Field(
        default=None,
        description="Storage locator of the uploaded logo"
    )

    # Invoice settings
    default_tax_rate: Decimal = Field(
        default=DEFAULT_TAX_RATE,
        sa_column=Column(Numeric(5, 4), nullable=False, default=DEFAULT_TAX_RATE),
        description="Default tax rate as a fraction (0.10 = 10%)"
    )
    currency: Currency = Field(default=Currency.USD)
    payment_terms: PaymentTerms = Field(default=PaymentTerms.NET_30)
    invoice_prefix: str = Field(
        default="INV",
        sa_column=Column(String(10), nullable=False, default="INV"),
    )
    next_invoice_number: int = Field(
        default=1,
        sa_column=Column(Integer, nullable=False, default=1),
        description="Sequence number the current year's counter hands out next"
    )

    # Branding
    primary_color: str = Field(
        default=DEFAULT_PRIMARY_COLOR,
        sa_column=Column(String(20), nullable=False, default=DEFAULT_PRIMARY_COLOR),
    )
    secondary_color: str = Field(
        default=DEFAULT_SECONDARY_COLOR,
        sa_column=Column(String(20), nullable=False, default=DEFAULT_SECONDARY_COLOR),
    )
    font_family: FontFamily = Field(default=FontFamily.HELVETICA)

    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

    @classmethod
    def with_defaults(
        cls, tenant_id: str, default_tax_rate: Decimal = DEFAULT_TAX_RATE
    ) -> "BusinessProfile":
        """Build the placeholder profile created on first access"""
        return cls(
            tenant_id=tenant_id,
            business_name="Your Business Name",
            street="Your Business Address",
            city="City",
            state="State",
            zip_code="12345",
            country="USA",
            default_tax_rate=default_tax_rate,
        )

    @property
    def full_business_address(self) -> str:
        if not self.street:
            return ""
        return (
            f"{self.street}, {self.city}, {self.state} "
            f"{self.zip_code}, {self.country}"
        )

    @property
    def payment_term_days(self) -> int:
        """Days between invoice date and due date under the payment terms"""
        return PAYMENT_TERM_DAYS.get(PaymentTerms(self.payment_terms), 30)

    @property
    def has_logo(self) -> bool:
        return bool(self.logo_path)

    def clear_logo(self) -> None:
        self.logo_filename = None
        self.logo_original_name = None
        self.logo_mime_type = None
        self.logo_size = None
        self.logo_path = None
