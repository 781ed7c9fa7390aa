"""Business Profile API Routes"""

from decimal import Decimal
from fastapi import APIRouter, Depends, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.api.schemas.business_profile_request import UpdateBusinessProfileRequestSchema
from src.api.dependencies import get_tenant_id
from src.api.error import raise_client_error
from src.app.use_cases.profile import (
    GetBusinessProfile,
    UpdateBusinessProfile,
    UpdateBusinessProfileCommandDTO,
    BusinessProfileResponseDTO,
)
from src.adapter.repositories import SqlAlchemyBusinessProfileRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_session, get_default_tax_rate, build_counter_repository

router = APIRouter(prefix="/business-profile", tags=["Business Profile"])


@router.get(
    "",
    response_model=BusinessProfileResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def get_business_profile(
    tenant_id: str = Depends(get_tenant_id),
    session: AsyncSession = Depends(get_session),
    default_tax_rate: Decimal = Depends(get_default_tax_rate),
):
    """
    Get the tenant's business profile.

    A profile with placeholder values is created on first access.
    """
    use_case = GetBusinessProfile(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyBusinessProfileRepository(session),
        default_tax_rate=default_tax_rate,
        counter_repo=build_counter_repository(session),
    )
    result = await use_case.execute(tenant_id)

    if result.is_err():
        raise_client_error(result.error)

    return result.value


@router.put(
    "",
    response_model=BusinessProfileResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def update_business_profile(
    request: UpdateBusinessProfileRequestSchema,
    tenant_id: str = Depends(get_tenant_id),
    session: AsyncSession = Depends(get_session),
    default_tax_rate: Decimal = Depends(get_default_tax_rate),
):
    """
    Update general details, invoice settings, branding or logo.

    `default_tax_rate` is a fraction between 0 and 1 and is applied to
    invoices created afterwards.
    """
    command = UpdateBusinessProfileCommandDTO(
        tenant_id=tenant_id,
        **request.model_dump(exclude_unset=True),
    )

    use_case = UpdateBusinessProfile(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyBusinessProfileRepository(session),
        default_tax_rate=default_tax_rate,
        counter_repo=build_counter_repository(session),
    )
    result = await use_case.execute(command)

    if result.is_err():
        raise_client_error(result.error)

    return result.value
