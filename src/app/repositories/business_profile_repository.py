"""Business Profile Repository Interface

Defines the contract for per-tenant business profile persistence.
"""

from abc import ABC, abstractmethod
from typing import Optional
from src.domain.business_profile import BusinessProfile


class BusinessProfileRepository(ABC):
    """Repository interface for BusinessProfile persistence"""

    @abstractmethod
    async def get_by_tenant_id(self, tenant_id: str) -> Optional[BusinessProfile]:
        """
        Retrieve the tenant's profile

        Args:
            tenant_id: Tenant identifier

        Returns:
            BusinessProfile if found, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, profile: BusinessProfile) -> BusinessProfile:
        """
        Create a new profile

        Args:
            profile: BusinessProfile entity to persist

        Returns:
            Created BusinessProfile with generated ID
        """
        pass

    @abstractmethod
    async def update(self, profile: BusinessProfile) -> BusinessProfile:
        """
        Update an existing profile

        Args:
            profile: BusinessProfile entity with updated values

        Returns:
            Updated BusinessProfile
        """
        pass
