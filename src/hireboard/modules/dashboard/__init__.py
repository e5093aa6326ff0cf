"""Dashboard module: the admin home page's recent activity feed."""

from fastapi import APIRouter


router = APIRouter(prefix="/dashboard", tags=["dashboard"])

# Import routes to register them (must be after router is defined)
from hireboard.modules.dashboard import routes  # noqa: F401, E402
