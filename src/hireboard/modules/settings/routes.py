"""Site settings API routes."""

from typing import Any

from fastapi import Body

from hireboard.api.dependencies import DBSession
from hireboard.core.auth.dependencies import CurrentUser
from hireboard.core.permissions import require_permission
from hireboard.modules.settings import router
from hireboard.modules.settings.schemas import (
    CareersSettingsResponse,
    CurrencyResponse,
    SettingListResponse,
    SmtpConfigView,
)
from hireboard.modules.settings.services import SettingSvc
from hireboard.modules.settings.smtp import mask


# ============================================================
# Public Routes
# ============================================================


@router.get(
    "/public/currency",
    response_model=CurrencyResponse,
    summary="Get display currency",
)
async def get_currency(service: SettingSvc) -> CurrencyResponse:
    """Currency symbol used on the careers page."""
    return CurrencyResponse(currency=await service.currency())


@router.get(
    "/public/careers",
    response_model=CareersSettingsResponse,
    summary="Get careers page settings",
)
async def get_careers_settings(service: SettingSvc) -> CareersSettingsResponse:
    """Careers page appearance, with defaults for anything unset."""
    return CareersSettingsResponse(settings=await service.careers())


# ============================================================
# Admin Routes
# ============================================================


@router.get("", response_model=SettingListResponse, summary="List settings")
@require_permission("settings", "read")
async def list_settings(
    service: SettingSvc,
    current_user: CurrentUser,  # noqa: ARG001 - required for permission check
    db: DBSession,  # noqa: ARG001 - required for permission check
) -> SettingListResponse:
    """List every stored setting; SMTP passwords are masked."""
    return SettingListResponse(items=await service.list_settings())


@router.put(
    "",
    response_model=SettingListResponse,
    summary="Update settings",
    description="Creates or overwrites each key in the body; the type is inferred from the value.",
)
@require_permission("settings", "update")
async def update_settings(
    service: SettingSvc,
    current_user: CurrentUser,  # noqa: ARG001 - required for permission check
    db: DBSession,  # noqa: ARG001 - required for permission check
    values: dict[str, Any] = Body(...),
) -> SettingListResponse:
    """Upsert settings."""
    return SettingListResponse(items=await service.upsert_many(values))


@router.get("/smtp", response_model=SmtpConfigView, summary="Get SMTP configuration")
@require_permission("settings", "read")
async def get_smtp_config(
    service: SettingSvc,
    current_user: CurrentUser,  # noqa: ARG001 - required for permission check
    db: DBSession,  # noqa: ARG001 - required for permission check
) -> SmtpConfigView:
    """The effective SMTP configuration with the password masked."""
    return mask(await service.smtp_config())
