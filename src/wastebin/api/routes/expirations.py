"""Paste expiration choices."""

from __future__ import annotations

from fastapi import APIRouter

from wastebin.api.dependencies import SettingsDep
from wastebin.api.schemas import ExpirationsResponse

router = APIRouter(prefix="/expirations", tags=["expirations"])


@router.get(
    "",
    response_model=ExpirationsResponse,
    response_model_by_alias=True,
    operation_id="listExpirations",
    summary="List paste expirations",
    description="Paste lifetimes in the configured order, with the default flagged.",
)
async def list_expirations(settings: SettingsDep) -> ExpirationsResponse:
    """Return the configured expiration choices."""
    return ExpirationsResponse.from_set(settings.expirations)
