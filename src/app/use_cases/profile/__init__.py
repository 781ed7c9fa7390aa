"""Business profile use cases"""
from .get_business_profile import GetBusinessProfile, load_or_create_profile
from .update_business_profile import UpdateBusinessProfile
from .dtos import UpdateBusinessProfileCommandDTO, BusinessProfileResponseDTO, LogoDTO

__all__ = [
    "GetBusinessProfile",
    "UpdateBusinessProfile",
    "load_or_create_profile",
    "UpdateBusinessProfileCommandDTO",
    "BusinessProfileResponseDTO",
    "LogoDTO",
]
