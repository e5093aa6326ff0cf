"""Roles module: role management and the permission catalog."""

from fastapi import APIRouter


router = APIRouter(tags=["roles"])

# Import routes to register them (must be after router is defined)
from hireboard.modules.roles import routes  # noqa: F401, E402
