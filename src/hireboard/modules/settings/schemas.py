"""Pydantic schemas for site settings."""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from hireboard.modules.settings.models import SettingType


class SettingResponse(BaseModel):
    id: UUID
    key: str
    value: str
    type: SettingType
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class SettingListResponse(BaseModel):
    items: list[SettingResponse]


class SmtpConfig(BaseModel):
    """Resolved outgoing mail configuration."""

    host: str
    port: int = 587
    user: str
    password: str | None = None
    from_email: str | None = None
    from_name: str | None = None
    secure: bool = False
    source: str = "database"


class SmtpConfigView(BaseModel):
    """SMTP configuration safe to show in the admin UI."""

    configured: bool
    host: str | None = None
    port: int | None = None
    user: str | None = None
    password: str | None = None
    from_email: str | None = None
    from_name: str | None = None
    secure: bool = False
    source: str | None = None


class CurrencyResponse(BaseModel):
    currency: str


class CareersSettingsResponse(BaseModel):
    settings: dict[str, Any]
