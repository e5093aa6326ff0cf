"""Applications module: candidate submissions and the review pipeline."""

from fastapi import APIRouter


router = APIRouter(prefix="/applications", tags=["applications"])

# Import routes to register them (must be after router is defined)
from hireboard.modules.applications import routes  # noqa: F401, E402
