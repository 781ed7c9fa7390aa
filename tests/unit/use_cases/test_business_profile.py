"""Unit tests for business profile use cases

Tests cover:
- Lazy creation of the placeholder profile
- Partial updates of settings and branding
- Logo metadata and removal
- Tax rate range and rounding
- next_invoice_number from the current year counter
"""

import pytest
from datetime import datetime
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

from src.app.use_cases.profile import (
    GetBusinessProfile,
    UpdateBusinessProfile,
    UpdateBusinessProfileCommandDTO,
)
from src.domain.business_profile import FontFamily, PaymentTerms


def persist(profile):
    profile.id = 1
    return profile


@pytest.fixture
def mock_profile_repo():
    repo = MagicMock()
    repo.get_by_tenant_id = AsyncMock(return_value=None)
    repo.create = AsyncMock(side_effect=persist)
    repo.update = AsyncMock(side_effect=lambda profile: profile)
    return repo


@pytest.mark.asyncio
class TestGetBusinessProfile:
    async def test_creates_default_profile_on_first_access(self, mock_uow, mock_profile_repo):
        result = await GetBusinessProfile(mock_uow, mock_profile_repo).execute("tenant_123")

        assert result.is_ok()
        profile = result.value
        assert profile.business_name == "Your Business Name"
        assert profile.full_business_address == "Your Business Address, City, State 12345, USA"
        assert profile.default_tax_rate == Decimal("0.10")
        assert profile.payment_terms == "Net 30"
        assert profile.logo is None
        mock_profile_repo.create.assert_awaited_once()
        mock_uow.commit.assert_awaited_once()

    async def test_configured_default_tax_rate_seeds_new_profile(self, mock_uow, mock_profile_repo):
        use_case = GetBusinessProfile(mock_uow, mock_profile_repo, default_tax_rate=Decimal("0.2"))

        result = await use_case.execute("tenant_123")

        assert result.value.default_tax_rate == Decimal("0.2")

    async def test_returns_existing_profile(self, mock_uow, mock_profile_repo, sample_profile):
        mock_profile_repo.get_by_tenant_id = AsyncMock(return_value=sample_profile)

        result = await GetBusinessProfile(mock_uow, mock_profile_repo).execute("tenant_123")

        assert result.value.business_name == "Northwind Studio"
        mock_profile_repo.create.assert_not_called()

    async def test_next_invoice_number_follows_current_year_counter(
        self, mock_uow, mock_profile_repo, sample_profile
    ):
        mock_profile_repo.get_by_tenant_id = AsyncMock(return_value=sample_profile)
        counter_repo = MagicMock()
        counter_repo.current = AsyncMock(return_value=4)
        use_case = GetBusinessProfile(mock_uow, mock_profile_repo, counter_repo=counter_repo)

        result = await use_case.execute("tenant_123")

        assert result.value.next_invoice_number == 5
        counter_repo.current.assert_awaited_once_with(f"invoice-{datetime.utcnow().year}")


@pytest.mark.asyncio
class TestUpdateBusinessProfile:
    async def test_partial_update(self, mock_uow, mock_profile_repo, sample_profile):
        mock_profile_repo.get_by_tenant_id = AsyncMock(return_value=sample_profile)
        command = UpdateBusinessProfileCommandDTO(
            tenant_id="tenant_123",
            default_tax_rate=Decimal("0.15"),
            payment_terms=PaymentTerms.NET_60,
            font_family=FontFamily.GEORGIA,
            invoice_prefix="NWS",
            website=None,
        )

        result = await UpdateBusinessProfile(mock_uow, mock_profile_repo).execute(command)

        assert result.is_ok()
        profile = result.value
        assert profile.default_tax_rate == Decimal("0.15")
        assert profile.payment_terms == "Net 60"
        assert profile.font_family == "Georgia"
        assert profile.invoice_prefix == "NWS"
        assert profile.business_name == "Northwind Studio"
        mock_uow.commit.assert_awaited_once()

    async def test_creates_profile_when_missing(self, mock_uow, mock_profile_repo):
        command = UpdateBusinessProfileCommandDTO(tenant_id="tenant_123", business_name="New Co")

        result = await UpdateBusinessProfile(mock_uow, mock_profile_repo).execute(command)

        assert result.value.business_name == "New Co"
        assert result.value.city == "City"
        mock_profile_repo.create.assert_awaited_once()

    async def test_logo_metadata_and_removal(self, mock_uow, mock_profile_repo, sample_profile):
        mock_profile_repo.get_by_tenant_id = AsyncMock(return_value=sample_profile)
        use_case = UpdateBusinessProfile(mock_uow, mock_profile_repo)

        uploaded = await use_case.execute(UpdateBusinessProfileCommandDTO(
            tenant_id="tenant_123",
            logo_filename="logo-1.png",
            logo_original_name="logo.png",
            logo_mime_type="image/png",
            logo_size=2048,
            logo_path="logo-1.png",
        ))
        assert uploaded.value.logo.path == "logo-1.png"
        assert uploaded.value.logo.size == 2048

        removed = await use_case.execute(
            UpdateBusinessProfileCommandDTO(tenant_id="tenant_123", remove_logo=True)
        )
        assert removed.value.logo is None
        assert sample_profile.logo_filename is None

    async def test_tax_rate_out_of_range(self, mock_uow, mock_profile_repo):
        command = UpdateBusinessProfileCommandDTO(
            tenant_id="tenant_123", default_tax_rate=Decimal("10")
        )

        result = await UpdateBusinessProfile(mock_uow, mock_profile_repo).execute(command)

        assert result.is_err()
        assert result.error.code == "INVALID_TAX_RATE"
        mock_profile_repo.update.assert_not_called()

    async def test_tax_rate_rounded_to_four_places(self, mock_uow, mock_profile_repo, sample_profile):
        mock_profile_repo.get_by_tenant_id = AsyncMock(return_value=sample_profile)
        command = UpdateBusinessProfileCommandDTO(
            tenant_id="tenant_123", default_tax_rate=Decimal("0.08875")
        )

        result = await UpdateBusinessProfile(mock_uow, mock_profile_repo).execute(command)

        assert result.value.default_tax_rate == Decimal("0.0888")
        assert sample_profile.default_tax_rate == Decimal("0.0888")
