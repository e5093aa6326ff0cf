"""Pydantic schemas for the dashboard."""

from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel


class ActivityType(StrEnum):
    APPLICATION = "application"
    JOB = "job"
    USER = "user"


class ActivityItem(BaseModel):
    """One line in the activity feed.

    ``id`` is prefixed with the source (``app-``, ``job-``, ``user-``) so
    items from different tables never collide.
    """

    id: str
    type: ActivityType
    title: str
    description: str
    timestamp: datetime


class ActivityResponse(BaseModel):
    activities: list[ActivityItem]
