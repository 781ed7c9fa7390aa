"""Line item construction

Turns caller-supplied items into InvoiceLine entities with derived totals.
Quantity and unit price are rounded to the scale they are stored with
before the total is derived, so a reloaded line still satisfies
total_price == quantity * unit_price.
"""

from typing import Iterable, List, Optional
from src.domain.invoice_line import InvoiceLine
from src.domain.invoice_totals import compute_line_item_total, to_money, to_quantity
from .dtos import LineItemCommandDTO


def build_invoice_lines(
    invoice_id: Optional[int], items: Iterable[LineItemCommandDTO]
) -> List[InvoiceLine]:
    """Build InvoiceLine entities in the given order, totals recomputed"""
    lines = []
    for position, item in enumerate(items):
        quantity = to_quantity(item.quantity)
        unit_price = to_money(item.unit_price)
        lines.append(
            InvoiceLine(
                invoice_id=invoice_id,
                position=position,
                description=item.description.strip(),
                quantity=quantity,
                unit_price=unit_price,
                total_price=compute_line_item_total(quantity, unit_price),
            )
        )
    return lines
