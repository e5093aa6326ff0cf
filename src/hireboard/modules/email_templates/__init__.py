"""Email templates module: candidate and staff notification templates."""

from fastapi import APIRouter


router = APIRouter(prefix="/email-templates", tags=["email-templates"])

# Import routes to register them (must be after router is defined)
from hireboard.modules.email_templates import routes  # noqa: F401, E402
