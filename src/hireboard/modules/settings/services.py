"""Site settings service."""

import json
from typing import Annotated, Any

import structlog
from fastapi import Depends

from hireboard.config import settings
from hireboard.core.constants import MAX_SETTING_KEY_LENGTH
from hireboard.core.errors import ValidationError
from hireboard.modules.settings.models import SettingType
from hireboard.modules.settings.repos import SettingRepo
from hireboard.modules.settings.schemas import SettingResponse, SmtpConfig
from hireboard.modules.settings.smtp import mask_setting, resolve_smtp_config, smtp_setting_keys


logger = structlog.get_logger()

CURRENCY_KEY = "default_currency"
CAREERS_PREFIX = "careers_"
CAREERS_MENU_ITEMS = "menu_items"

CAREERS_DEFAULTS: dict[str, Any] = {
    "banner_title": "Careers at JV",
    "banner_subtitle": "Explore Our Job Openings and Start Your Exciting Career with Us",
    "banner_description": (
        "We are a fast-growing creative marketing agency looking for talented "
        "and passionate individuals to join our team."
    ),
    "banner_overlay": (
        "linear-gradient(135deg, rgba(99, 102, 241, 0.9) 0%, "
        "rgba(139, 92, 246, 0.9) 100%)"
    ),
    "banner_height": "400px",
    "banner_width": "100%",
    "banner_border_radius": "0px",
    "title_color": "#ffffff",
    "title_font_size": "48px",
    "subtitle_color": "#ffffff",
    "subtitle_font_size": "24px",
    "description_color": "#f3f4f6",
    "description_font_size": "16px",
    "logo_height": "40px",
    "logo_width": "40px",
    "company_name": "Job Portal",
    CAREERS_MENU_ITEMS: [],
}


def encode_value(value: Any) -> tuple[str, SettingType]:
    """Serialize a JSON value for storage and infer its type."""
    if isinstance(value, bool):
        return ("true" if value else "false"), SettingType.BOOLEAN
    if isinstance(value, int | float):
        return str(value), SettingType.NUMBER
    if isinstance(value, dict | list):
        return json.dumps(value), SettingType.JSON
    if value is None:
        return "", SettingType.TEXT
    return str(value), SettingType.TEXT


def careers_settings(stored: dict[str, str]) -> dict[str, Any]:
    """Merge stored ``careers_*`` values over the careers page defaults."""
    merged = dict(CAREERS_DEFAULTS)
    for key, value in stored.items():
        if not key.startswith(CAREERS_PREFIX):
            continue
        name = key.removeprefix(CAREERS_PREFIX)
        if name == CAREERS_MENU_ITEMS:
            try:
                decoded = json.loads(value)
            except json.JSONDecodeError:
                decoded = []
            merged[name] = decoded if isinstance(decoded, list) else []
        else:
            merged[name] = value
    return merged


class SettingService:
    """Service for the key/value site settings."""

    def __init__(self, repo: SettingRepo) -> None:
        self.repo = repo

    async def list_settings(self) -> list[SettingResponse]:
        """Every stored setting, with SMTP passwords masked."""
        return [mask_setting(s) for s in await self.repo.list_all()]

    async def upsert_many(self, values: dict[str, Any]) -> list[SettingResponse]:
        """Create or overwrite each ``key: value`` pair.

        The saved rows are returned the way ``list_settings`` presents them.

        Raises:
            ValidationError: If a key is empty or too long
        """
        bad = [k for k in values if not k or len(k) > MAX_SETTING_KEY_LENGTH]
        if bad:
            raise ValidationError(
                "Invalid setting keys",
                errors=[{"field": k, "message": "Invalid setting key"} for k in bad],
            )

        saved = []
        for key, value in values.items():
            encoded, type_ = encode_value(value)
            saved.append(await self.repo.upsert(key, encoded, type_.value))
        logger.info("settings_updated", keys=sorted(values))
        return [mask_setting(s) for s in saved]

    async def smtp_config(self) -> SmtpConfig | None:
        stored = await self.repo.values_for(smtp_setting_keys())
        return resolve_smtp_config(stored)

    async def currency(self) -> str:
        setting = await self.repo.get_by_key(CURRENCY_KEY)
        return setting.value if setting and setting.value else settings.default_currency

    async def careers(self) -> dict[str, Any]:
        return careers_settings(await self.repo.values_with_prefix(CAREERS_PREFIX))


# Type alias for dependency injection
SettingSvc = Annotated[SettingService, Depends(SettingService)]
