"""Resolution of the outgoing mail configuration.

Admins can store SMTP details in the settings table under either the
form-builder's camelCase keys or the older snake_case keys. Stored values win
when they name both a host and a user; otherwise the environment is used.
"""

from hireboard.config import Settings, settings
from hireboard.modules.settings.models import Setting
from hireboard.modules.settings.schemas import SettingResponse, SmtpConfig, SmtpConfigView


DEFAULT_SMTP_PORT = 587
MASKED_PASSWORD = "********"

# field -> (camelCase key, snake_case key), in lookup order
SMTP_KEYS: dict[str, tuple[str, str]] = {
    "host": ("emailHost", "smtp_host"),
    "port": ("emailPort", "smtp_port"),
    "user": ("emailUser", "smtp_user"),
    "password": ("emailPassword", "smtp_pass"),
    "from_email": ("emailFrom", "from_email"),
    "from_name": ("emailFromName", "from_name"),
    "secure": ("emailSecure", "smtp_secure"),
}


def smtp_setting_keys() -> list[str]:
    return [key for pair in SMTP_KEYS.values() for key in pair]


def _lookup(stored: dict[str, str], field: str) -> str | None:
    for key in SMTP_KEYS[field]:
        value = stored.get(key)
        if value:
            return value
    return None


def _parse_port(value: str | None) -> int:
    try:
        return int(value) if value else DEFAULT_SMTP_PORT
    except ValueError:
        return DEFAULT_SMTP_PORT


def resolve_smtp_config(
    stored: dict[str, str],
    env: Settings | None = None,
) -> SmtpConfig | None:
    """Work out which SMTP server to send through.

    Args:
        stored: Setting values by key
        env: Environment settings to fall back on

    Returns:
        The configuration, or None when neither source names a host and user
    """
    env = env or settings

    host = _lookup(stored, "host")
    user = _lookup(stored, "user")
    if host and user:
        return SmtpConfig(
            host=host,
            port=_parse_port(_lookup(stored, "port")),
            user=user,
            password=_lookup(stored, "password"),
            from_email=_lookup(stored, "from_email") or user,
            from_name=_lookup(stored, "from_name"),
            secure=_lookup(stored, "secure") == "true",
            source="database",
        )

    if env.smtp_host and env.smtp_user:
        return SmtpConfig(
            host=env.smtp_host,
            port=env.smtp_port,
            user=env.smtp_user,
            password=env.smtp_password,
            from_email=env.smtp_from_email or env.smtp_user,
            from_name=env.smtp_from_name,
            secure=env.smtp_secure,
            source="environment",
        )

    return None


def mask_setting(setting: Setting) -> SettingResponse:
    """Present a stored setting, hiding the value of the SMTP password keys."""
    view = SettingResponse.model_validate(setting)
    if view.key in SMTP_KEYS["password"] and view.value:
        view.value = MASKED_PASSWORD
    return view


def mask(config: SmtpConfig | None) -> SmtpConfigView:
    if config is None:
        return SmtpConfigView(configured=False)
    return SmtpConfigView(
        configured=True,
        **config.model_dump(exclude={"password"}),
        password=MASKED_PASSWORD if config.password else None,
    )
