"""SQLAlchemy Business Profile Repository Implementation"""

from typing import Optional
from datetime import datetime
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.business_profile_repository import BusinessProfileRepository
from src.domain.business_profile import BusinessProfile


class SqlAlchemyBusinessProfileRepository(BusinessProfileRepository):
    """SQLAlchemy implementation of BusinessProfileRepository"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_tenant_id(self, tenant_id: str) -> Optional[BusinessProfile]:
        statement = select(BusinessProfile).where(BusinessProfile.tenant_id == tenant_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def create(self, profile: BusinessProfile) -> BusinessProfile:
        self.session.add(profile)
        await self.session.flush()
        await self.session.refresh(profile)
        return profile

    async def update(self, profile: BusinessProfile) -> BusinessProfile:
        profile.updated_at = datetime.utcnow()
        self.session.add(profile)
        await self.session.flush()
        await self.session.refresh(profile)
        return profile
