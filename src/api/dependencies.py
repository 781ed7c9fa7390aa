"""Request-level dependencies shared by routes"""

from fastapi import Header


async def get_tenant_id(
    tenant_id: str = Header(..., alias="X-Tenant-ID", min_length=1),
) -> str:
    """Tenant the request acts for; requests without it are rejected (422)"""
    return tenant_id
