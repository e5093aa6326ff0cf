"""Setting repository for database operations."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy import select

from hireboard.api.dependencies import DBSession
from hireboard.modules.settings.models import Setting


class SettingRepository:
    """Repository for Setting database operations."""

    def __init__(self, session: DBSession) -> None:
        self.session = session

    async def list_all(self) -> list[Setting]:
        stmt = select(Setting).order_by(Setting.key)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_by_key(self, key: str) -> Setting | None:
        stmt = select(Setting).where(Setting.key == key)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def values_for(self, keys: list[str]) -> dict[str, str]:
        """Return stored values for the given keys; missing keys are absent."""
        stmt = select(Setting.key, Setting.value).where(Setting.key.in_(keys))
        result = await self.session.execute(stmt)
        return {key: value for key, value in result.all()}

    async def values_with_prefix(self, prefix: str) -> dict[str, str]:
        stmt = select(Setting.key, Setting.value).where(Setting.key.startswith(prefix))
        result = await self.session.execute(stmt)
        return {key: value for key, value in result.all()}

    async def upsert(self, key: str, value: str, type_: str) -> Setting:
        """Create or overwrite a setting."""
        setting = await self.get_by_key(key)
        if setting is None:
            setting = Setting(key=key, value=value, type=type_)
            self.session.add(setting)
        else:
            setting.value = value
            setting.type = type_
        await self.session.flush()
        await self.session.refresh(setting)
        return setting


# Type alias for dependency injection
SettingRepo = Annotated[SettingRepository, Depends(SettingRepository)]
