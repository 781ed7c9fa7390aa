"""UpdateBusinessProfile Use Case"""

import logging
from decimal import Decimal
from typing import Optional
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.counter_repository import CounterRepository
from src.app.repositories.business_profile_repository import BusinessProfileRepository
from src.domain.business_profile import DEFAULT_TAX_RATE
from src.domain.invoice_totals import to_rate
from .dtos import UpdateBusinessProfileCommandDTO, BusinessProfileResponseDTO
from .get_business_profile import load_or_create_profile, refresh_next_invoice_number

logger = logging.getLogger(__name__)

_GENERAL_FIELDS = (
    "business_name",
    "street",
    "city",
    "state",
    "zip_code",
    "country",
    "business_phone",
    "business_email",
    "tax_id",
    "website",
)

_SETTINGS_FIELDS = (
    "default_tax_rate",
    "currency",
    "payment_terms",
    "invoice_prefix",
    "primary_color",
    "secondary_color",
    "font_family",
)

_LOGO_FIELDS = (
    "logo_filename",
    "logo_original_name",
    "logo_mime_type",
    "logo_size",
    "logo_path",
)

# Optional columns; every other field ignores an explicit null
_NULLABLE_FIELDS = {"business_phone", "business_email", "tax_id", "website"}


class UpdateBusinessProfile:
    """
    Use Case: Partially update the tenant's business profile

    Business Rules:
    1. The profile is created with placeholder values if missing
    2. default_tax_rate stays within [0, 1]
    3. remove_logo clears all logo metadata before new logo fields apply
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

    async def execute(
        self, command: UpdateBusinessProfileCommandDTO
    ) -> Result[BusinessProfileResponseDTO]:
        try:
            if command.default_tax_rate is not None and not (
                Decimal("0") <= command.default_tax_rate <= Decimal("1")
            ):
                return Return.err(
                    Error(
                        code="INVALID_TAX_RATE",
                        message="Default tax rate must be between 0 and 1",
                        reason=f"Got {command.default_tax_rate}",
                    )
                )

            profile = await load_or_create_profile(
                self.profile_repo, command.tenant_id, self.default_tax_rate
            )

            supplied = command.model_fields_set

            for field in _GENERAL_FIELDS + _SETTINGS_FIELDS:
                if field not in supplied:
                    continue
                value = getattr(command, field)
                if value is None and field not in _NULLABLE_FIELDS:
                    continue
                if field == "default_tax_rate":
                    value = to_rate(value)
                setattr(profile, field, value)

            if command.remove_logo:
                profile.clear_logo()

            for field in _LOGO_FIELDS:
                if field in supplied and getattr(command, field) is not None:
                    setattr(profile, field, getattr(command, field))

            if self.counter_repo is not None:
                await refresh_next_invoice_number(profile, self.counter_repo)

            updated_profile = await self.profile_repo.update(profile)
            await self.uow.commit()

            return Return.ok(BusinessProfileResponseDTO.from_entity(updated_profile))

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to update business profile: {e}")
            return Return.err(
                Error(
                    code="UPDATE_PROFILE_FAILED",
                    message="Failed to update business profile",
                    reason=str(e),
                )
            )
