"""Data Transfer Objects for Customer Use Cases"""

from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field
from src.domain.customer import Customer, CustomerStatus


class CreateCustomerCommandDTO(BaseModel):
    """Command DTO for creating a customer"""

    tenant_id: str
    name: str
    email: str
    phone: Optional[str] = None
    street: str
    city: str
    state: str
    zip_code: str
    country: str = "USA"
    company: Optional[str] = None
    notes: Optional[str] = None
    status: CustomerStatus = CustomerStatus.ACTIVE


class UpdateCustomerCommandDTO(BaseModel):
    """
    Command DTO for a partial customer update

    Only fields explicitly set are applied.
    """

    tenant_id: str
    customer_id: int
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    street: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    country: Optional[str] = None
    company: Optional[str] = None
    notes: Optional[str] = None
    status: Optional[CustomerStatus] = None


class CustomerResponseDTO(BaseModel):
    """Customer as returned to callers"""

    customer_id: int
    tenant_id: str
    name: str
    email: str
    phone: Optional[str] = None
    street: str
    city: str
    state: str
    zip_code: str
    country: str
    full_address: str
    company: Optional[str] = None
    notes: Optional[str] = None
    status: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, customer: Customer) -> "CustomerResponseDTO":
        return cls(
            customer_id=customer.id,
            tenant_id=customer.tenant_id,
            name=customer.name,
            email=customer.email,
            phone=customer.phone,
            street=customer.street,
            city=customer.city,
            state=customer.state,
            zip_code=customer.zip_code,
            country=customer.country,
            full_address=customer.full_address,
            company=customer.company,
            notes=customer.notes,
            status=CustomerStatus(customer.status).value,
            created_at=customer.created_at,
            updated_at=customer.updated_at,
        )


class CustomerListResponseDTO(BaseModel):
    """Response DTO for ListCustomers"""

    customers: List[CustomerResponseDTO] = Field(default_factory=list)
    count: int
    limit: int
    offset: int


class DeleteCustomerResponseDTO(BaseModel):
    customer_id: int
    deleted: bool = True
