"""Forms module: the application form builder."""

from fastapi import APIRouter


router = APIRouter(prefix="/forms", tags=["forms"])

# Import routes to register them (must be after router is defined)
from hireboard.modules.forms import routes  # noqa: F401, E402
