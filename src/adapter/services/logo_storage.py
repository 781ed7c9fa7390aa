"""Local filesystem logo storage"""

import logging
import os
from typing import Optional
from src.app.services.logo_storage import LogoStorage

logger = logging.getLogger(__name__)


class LocalLogoStorage(LogoStorage):
    """
    Resolves logo locators against a local directory

    Absolute locators are used as-is; relative locators are joined to
    base_dir and must stay inside it.
    """

    def __init__(self, base_dir: str):
        self.base_dir = os.path.abspath(base_dir)

    def resolve(self, locator: Optional[str]) -> Optional[str]:
        if not locator:
            return None

        if os.path.isabs(locator):
            path = os.path.normpath(locator)
        else:
            path = os.path.normpath(os.path.join(self.base_dir, locator))
            if os.path.commonpath([self.base_dir, path]) != self.base_dir:
                logger.warning(f"Logo locator escapes storage directory: {locator}")
                return None

        if not os.path.isfile(path):
            logger.info(f"Logo file not found: {path}")
            return None
        return path
