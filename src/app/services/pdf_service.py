"""PDF Generation Service Interface

Defines the contract for rendering invoices as PDF documents.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from typing import List, Optional
from src.domain.business_profile import BusinessProfile
from src.domain.customer import Customer
from src.domain.invoice import Invoice
from src.domain.invoice_line import InvoiceLine


@dataclass(frozen=True)
class PdfRenderOptions:
    """
    Optional render inputs

    logo_path: already resolved path of the logo image
    discount: amount shown as a Discount line when positive
    """

    logo_path: Optional[str] = None
    discount: Optional[Decimal] = None


class PdfService(ABC):
    """
    Service interface for PDF generation

    Rendering is synchronous and CPU bound; async callers should run it
    in a worker thread.
    """

    @abstractmethod
    def render(
        self,
        invoice: Invoice,
        invoice_lines: List[InvoiceLine],
        customer: Optional[Customer],
        business_profile: Optional[BusinessProfile] = None,
        options: Optional[PdfRenderOptions] = None,
    ) -> bytes:
        """
        Render an invoice PDF

        Missing optional data (profile, logo, notes, items, customer) is
        replaced by placeholders and never raises.

        Args:
            invoice: Invoice entity
            invoice_lines: Line items in display order
            customer: Billed customer, if it still exists
            business_profile: Tenant profile for issuer details and branding
            options: Logo path and discount

        Returns:
            PDF document as bytes

        Raises:
            RenderFailed: If the document could not be produced
        """
        pass
