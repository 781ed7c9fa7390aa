"""Invoice Totals

Pure functions deriving line totals and invoice totals from line items.
Amounts are Decimal and rounded half-up to cents so sums are reproducible.
"""

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Protocol


CENTS = Decimal("0.01")
ZERO = Decimal("0.00")

# Column scales: quantity Numeric(14, 4), tax rate Numeric(5, 4)
QUANTITY_STEP = Decimal("0.0001")
RATE_STEP = Decimal("0.0001")


class PricedItem(Protocol):
    """Anything carrying a quantity and a unit price"""

    quantity: Decimal
    unit_price: Decimal


@dataclass(frozen=True)
class InvoiceTotals:
    """Derived amounts of an invoice"""

    subtotal: Decimal
    tax: Decimal
    total: Decimal


def to_money(value) -> Decimal:
    """Round a numeric value to cents (half-up)"""
    return Decimal(str(value)).quantize(CENTS, rounding=ROUND_HALF_UP)


def to_quantity(value) -> Decimal:
    return Decimal(str(value)).quantize(QUANTITY_STEP, rounding=ROUND_HALF_UP)


def to_rate(value) -> Decimal:
    """Round a tax rate fraction to the four places it is stored with"""
    return Decimal(str(value)).quantize(RATE_STEP, rounding=ROUND_HALF_UP)


def compute_line_item_total(quantity, unit_price) -> Decimal:
    """
    Compute quantity * unit_price rounded to cents

    Zero or negative inputs are not rejected; callers validate first.
    """
    return to_money(Decimal(str(quantity)) * Decimal(str(unit_price)))


def compute_invoice_totals(items: Iterable[PricedItem], tax_rate) -> InvoiceTotals:
    """
    Derive subtotal, tax and total from line items

    Each item total is recomputed from quantity and unit price, so any
    total carried by the item itself is ignored.

    Args:
        items: Line items in display order
        tax_rate: Tax rate as a fraction (0.10 = 10%)

    Returns:
        InvoiceTotals with subtotal, tax and total
    """
    subtotal = sum(
        (compute_line_item_total(item.quantity, item.unit_price) for item in items),
        ZERO,
    )
    tax = to_money(subtotal * Decimal(str(tax_rate)))
    return InvoiceTotals(subtotal=subtotal, tax=tax, total=subtotal + tax)
