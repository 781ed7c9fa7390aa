"""Logo Storage Interface

Resolves stored logo locators to readable image paths.
"""

from abc import ABC, abstractmethod
from typing import Optional


class LogoStorage(ABC):
    """Read access to tenant logo files"""

    @abstractmethod
    def resolve(self, locator: Optional[str]) -> Optional[str]:
        """
        Resolve a logo locator to an existing file path

        Args:
            locator: Locator stored on the business profile

        Returns:
            Path of an existing file, or None when there is nothing to read
        """
        pass
