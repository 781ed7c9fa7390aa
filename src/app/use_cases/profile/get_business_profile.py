"""GetBusinessProfile Use Case"""

import logging
from datetime import datetime
from decimal import Decimal
from typing import Optional
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.counter_repository import CounterRepository
from src.app.repositories.business_profile_repository import BusinessProfileRepository
from src.domain.business_profile import BusinessProfile, DEFAULT_TAX_RATE
from src.app.services.invoice_numbering import counter_key
from src.domain.invoice_totals import to_rate
from .dtos import BusinessProfileResponseDTO

logger = logging.getLogger(__name__)


async def load_or_create_profile(
    profile_repo: BusinessProfileRepository,
    tenant_id: str,
    default_tax_rate: Decimal = DEFAULT_TAX_RATE,
) -> BusinessProfile:
    """Return the tenant's profile, creating the placeholder profile if missing"""
    profile = await profile_repo.get_by_tenant_id(tenant_id)
    if profile:
        return profile

    logger.info(f"Creating default business profile for tenant {tenant_id}")
    return await profile_repo.create(
        BusinessProfile.with_defaults(tenant_id, to_rate(default_tax_rate))
    )


async def refresh_next_invoice_number(
    profile: BusinessProfile, counter_repo: CounterRepository
) -> None:
    """Set next_invoice_number to the sequence number the current year hands out next"""
    year = datetime.utcnow().year
    profile.next_invoice_number = await counter_repo.current(counter_key(year)) + 1


class GetBusinessProfile:
    """
    Use Case: Retrieve the tenant's business profile

    A profile with placeholder values is created on first access.
    """

    def __init__(
        self,
        uow: UnitOfWork,
        profile_repo: BusinessProfileRepository,
        default_tax_rate: Decimal = DEFAULT_TAX_RATE,
        counter_repo: Optional[CounterRepository] = None,
    ):
        self.uow = uow
        self.profile_repo = profile_repo
        self.default_tax_rate = default_tax_rate
        self.counter_repo = counter_repo

    async def execute(self, tenant_id: str) -> Result[BusinessProfileResponseDTO]:
        try:
            profile = await load_or_create_profile(
                self.profile_repo, tenant_id, self.default_tax_rate
            )
            if self.counter_repo is not None:
                await refresh_next_invoice_number(profile, self.counter_repo)
            await self.uow.commit()

            return Return.ok(BusinessProfileResponseDTO.from_entity(profile))

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to retrieve business profile: {e}")
            return Return.err(
                Error(
                    code="GET_PROFILE_FAILED",
                    message="Failed to retrieve business profile",
                    reason=str(e),
                )
            )
