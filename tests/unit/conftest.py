import pytest
from datetime import date, datetime
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

from src.domain.business_profile import BusinessProfile
from src.domain.customer import Customer


@pytest.fixture
def mock_uow():
    """Mock unit of work"""
    uow = MagicMock()
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()
    return uow


@pytest.fixture
def sample_customer():
    return Customer(
        id=7,
        tenant_id="tenant_123",
        name="Acme Corp",
        email="billing@acme.example",
        phone="+1 555 0100",
        street="1 Main St",
        city="Springfield",
        state="IL",
        zip_code="62701",
        country="USA",
        created_at=datetime(2025, 3, 1, 9, 0, 0),
        updated_at=datetime(2025, 3, 1, 9, 0, 0),
    )


@pytest.fixture
def sample_profile():
    return BusinessProfile(
        id=1,
        tenant_id="tenant_123",
        business_name="Northwind Studio",
        street="9 Harbor Rd",
        city="Portland",
        state="OR",
        zip_code="97201",
        country="USA",
        business_phone="+1 555 0199",
        business_email="hello@northwind.example",
        default_tax_rate=Decimal("0.08"),
        invoice_prefix="NW",
        created_at=datetime(2025, 1, 1, 0, 0, 0),
        updated_at=datetime(2025, 1, 1, 0, 0, 0),
    )


@pytest.fixture
def fixed_issue_date():
    return date(2025, 3, 1)
