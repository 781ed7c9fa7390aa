"""Unit tests for BusinessProfile and Customer derived values"""

from decimal import Decimal

from src.domain.business_profile import (
    BusinessProfile,
    Currency,
    FontFamily,
    PaymentTerms,
    DEFAULT_PRIMARY_COLOR,
    DEFAULT_SECONDARY_COLOR,
)
from src.domain.customer import Customer, CustomerStatus


class TestBusinessProfileDefaults:
    def test_with_defaults_uses_placeholders(self):
        profile = BusinessProfile.with_defaults("tenant_123")

        assert profile.tenant_id == "tenant_123"
        assert profile.business_name == "Your Business Name"
        assert profile.street == "Your Business Address"
        assert profile.city == "City"
        assert profile.state == "State"
        assert profile.zip_code == "12345"
        assert profile.country == "USA"

    def test_with_defaults_invoice_settings(self):
        profile = BusinessProfile.with_defaults("tenant_123")

        assert profile.default_tax_rate == Decimal("0.10")
        assert profile.currency == Currency.USD
        assert profile.payment_terms == PaymentTerms.NET_30
        assert profile.invoice_prefix == "INV"
        assert profile.primary_color == DEFAULT_PRIMARY_COLOR
        assert profile.secondary_color == DEFAULT_SECONDARY_COLOR
        assert profile.font_family == FontFamily.HELVETICA
        assert not profile.has_logo

    def test_with_defaults_custom_tax_rate(self):
        profile = BusinessProfile.with_defaults("tenant_123", Decimal("0.2"))

        assert profile.default_tax_rate == Decimal("0.2")

    def test_full_business_address(self):
        profile = BusinessProfile.with_defaults("tenant_123")

        assert profile.full_business_address == (
            "Your Business Address, City, State 12345, USA"
        )


class TestPaymentTermDays:
    def test_each_term(self):
        profile = BusinessProfile.with_defaults("tenant_123")
        expected = {
            PaymentTerms.NET_15: 15,
            PaymentTerms.NET_30: 30,
            PaymentTerms.NET_45: 45,
            PaymentTerms.NET_60: 60,
            PaymentTerms.DUE_ON_RECEIPT: 0,
        }
        for terms, days in expected.items():
            profile.payment_terms = terms
            assert profile.payment_term_days == days

    def test_plain_string_value(self):
        profile = BusinessProfile.with_defaults("tenant_123")
        profile.payment_terms = "Net 45"

        assert profile.payment_term_days == 45


def test_clear_logo_resets_all_logo_fields():
    profile = BusinessProfile.with_defaults("tenant_123")
    profile.logo_filename = "logo-1.png"
    profile.logo_original_name = "logo.png"
    profile.logo_mime_type = "image/png"
    profile.logo_size = 2048
    profile.logo_path = "logo-1.png"
    assert profile.has_logo

    profile.clear_logo()

    assert not profile.has_logo
    assert profile.logo_filename is None
    assert profile.logo_original_name is None
    assert profile.logo_mime_type is None
    assert profile.logo_size is None


class TestCustomer:
    def test_full_address(self, sample_customer):
        assert sample_customer.full_address == "1 Main St, Springfield, IL 62701"

    def test_full_address_empty_without_street(self):
        customer = Customer(
            tenant_id="tenant_123",
            name="No Address",
            email="x@example.com",
            street="",
            city="",
            state="",
            zip_code="",
        )

        assert customer.full_address == ""

    def test_defaults(self):
        customer = Customer(
            tenant_id="tenant_123",
            name="Acme",
            email="a@acme.example",
            street="1 Main St",
            city="Springfield",
            state="IL",
            zip_code="62701",
        )

        assert customer.status == CustomerStatus.ACTIVE
        assert customer.country == "USA"
