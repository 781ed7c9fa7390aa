"""Customer Domain Entity

Tenant-scoped contact record that invoices are billed to.
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import String, Text
from src.domain.base import BaseModel, BigIntegerPK


class CustomerStatus(str, Enum):
    """Customer status types"""
    ACTIVE = "active"
    INACTIVE = "inactive"


class Customer(BaseModel, table=True):
    """
    Customer - Billing contact owned by a tenant

    Domain Rules:
    - Every customer belongs to exactly one tenant
    - Address is stored as flat street/city/state/zip_code/country fields
    - full_address is derived, never stored
    """

    __tablename__ = "customers"
    __table_args__ = (
        Index('ix_customers_tenant_id_name', 'tenant_id', 'name'),
        Index('ix_customers_email', 'email'),
    )

    id: int = Field(
        sa_column=Column(BigIntegerPK, primary_key=True, autoincrement=True),
        description="Unique customer identifier (auto-increment)"
    )

    tenant_id: str = Field(
        description="Owning tenant ID"
    )

    name: str = Field(
        sa_column=Column(String(200), nullable=False),
        description="Customer display name"
    )

    email: str = Field(
        sa_column=Column(String(200), nullable=False),
        description="Contact email (stored lowercase)"
    )

    phone: Optional[str] = Field(
        default=None,
        sa_column=Column(String(50), nullable=True),
        description="Contact phone number"
    )

    street: str = Field(sa_column=Column(String(200), nullable=False))
    city: str = Field(sa_column=Column(String(100), nullable=False))
    state: str = Field(sa_column=Column(String(50), nullable=False))
    zip_code: str = Field(sa_column=Column(String(20), nullable=False))
    country: str = Field(
        default="USA",
        sa_column=Column(String(50), nullable=False, default="USA"),
    )

    company: Optional[str] = Field(
        default=None,
        sa_column=Column(String(200), nullable=True),
    )

    notes: Optional[str] = Field(
        default=None,
        sa_column=Column(Text, nullable=True),
    )

    status: CustomerStatus = Field(
        default=CustomerStatus.ACTIVE,
        description="Customer status (active, inactive)"
    )

    created_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="Customer creation timestamp"
    )

    updated_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="Last update timestamp"
    )

    @property
    def full_address(self) -> str:
        """Single-line address, e.g. '1 Main St, Springfield, IL 62701'"""
        if not self.street:
            return ""
        return f"{self.street}, {self.city}, {self.state} {self.zip_code}"

    class Config:
        """SQLModel configuration"""
        json_schema_extra = {
            "example": {
                "id": 1,
                "tenant_id": "tenant_xyz789",
                "name": "Acme Corp",
                "email": "billing@acme.example",
                "phone": "+1 555 0100",
                "street": "1 Main St",
                "city": "Springfield",
                "state": "IL",
                "zip_code": "62701",
                "country": "USA",
                "company": "Acme Corporation",
                "status": "active",
            }
        }
