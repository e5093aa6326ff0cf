"""Site settings database model."""

from enum import StrEnum

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from hireboard.core.constants import MAX_SETTING_KEY_LENGTH
from hireboard.core.database.base import Base, TimestampMixin, UUIDMixin


class SettingType(StrEnum):
    TEXT = "text"
    NUMBER = "number"
    BOOLEAN = "boolean"
    JSON = "json"


class Setting(Base, UUIDMixin, TimestampMixin):
    """A key/value site setting.

    Values are stored as strings; ``type`` records how to read them back.
    """

    __tablename__ = "settings"

    key: Mapped[str] = mapped_column(
        String(MAX_SETTING_KEY_LENGTH),
        nullable=False,
        unique=True,
        index=True,
    )
    value: Mapped[str] = mapped_column(Text, nullable=False, default="")
    type: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default=SettingType.TEXT.value,
    )

    def __repr__(self) -> str:
        return f"<Setting(key={self.key}, type={self.type})>"
