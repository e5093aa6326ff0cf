"""Settings module: key/value site settings and SMTP configuration."""

from fastapi import APIRouter


router = APIRouter(prefix="/settings", tags=["settings"])

# Import routes to register them (must be after router is defined)
from hireboard.modules.settings import routes  # noqa: F401, E402
