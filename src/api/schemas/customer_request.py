"""Request schemas for Customer API"""

from typing import Optional
from pydantic import BaseModel, Field, field_validator
from src.domain.customer import CustomerStatus


def _validate_email(v: Optional[str]) -> Optional[str]:
    if v is None:
        return v
    v = v.strip()
    local, _, domain = v.partition("@")
    if not local or "." not in domain:
        raise ValueError("Invalid email address")
    return v


class CreateCustomerRequestSchema(BaseModel):
    """
    Request schema for creating a customer

    Used for POST /customers endpoint.
    """

    name: str = Field(..., min_length=1, max_length=200)
    email: str = Field(..., min_length=3, max_length=200)
    phone: Optional[str] = Field(default=None, max_length=50)
    street: str = Field(..., min_length=1, max_length=200)
    city: str = Field(..., min_length=1, max_length=100)
    state: str = Field(..., min_length=1, max_length=50)
    zip_code: str = Field(..., min_length=1, max_length=20)
    country: str = Field(default="USA", max_length=50)
    company: Optional[str] = Field(default=None, max_length=200)
    notes: Optional[str] = None
    status: CustomerStatus = CustomerStatus.ACTIVE

    @field_validator("email")
    @classmethod
    def validate_email(cls, v):
        return _validate_email(v)

    class Config:
        json_schema_extra = {
            "example": {
                "name": "Acme Corp",
                "email": "billing@acme.example",
                "street": "1 Main St",
                "city": "Springfield",
                "state": "IL",
                "zip_code": "62701",
            }
        }


class UpdateCustomerRequestSchema(BaseModel):
    """Request schema for PUT /customers/{id}; omitted fields are unchanged"""

    name: Optional[str] = Field(default=None, min_length=1, max_length=200)
    email: Optional[str] = Field(default=None, min_length=3, max_length=200)
    phone: Optional[str] = Field(default=None, max_length=50)
    street: Optional[str] = Field(default=None, min_length=1, max_length=200)
    city: Optional[str] = Field(default=None, min_length=1, max_length=100)
    state: Optional[str] = Field(default=None, min_length=1, max_length=50)
    zip_code: Optional[str] = Field(default=None, min_length=1, max_length=20)
    country: Optional[str] = Field(default=None, max_length=50)
    company: Optional[str] = Field(default=None, max_length=200)
    notes: Optional[str] = None
    status: Optional[CustomerStatus] = None

    @field_validator("email")
    @classmethod
    def validate_email(cls, v):
        return _validate_email(v)
