"""Customer use cases"""
from .create_customer import CreateCustomer
from .get_customer import GetCustomer
from .list_customers import ListCustomers
from .update_customer import UpdateCustomer
from .delete_customer import DeleteCustomer
from .dtos import (
    CreateCustomerCommandDTO,
    UpdateCustomerCommandDTO,
    CustomerResponseDTO,
    CustomerListResponseDTO,
    DeleteCustomerResponseDTO,
)

__all__ = [
    "CreateCustomer",
    "GetCustomer",
    "ListCustomers",
    "UpdateCustomer",
    "DeleteCustomer",
    "CreateCustomerCommandDTO",
    "UpdateCustomerCommandDTO",
    "CustomerResponseDTO",
    "CustomerListResponseDTO",
    "DeleteCustomerResponseDTO",
]
