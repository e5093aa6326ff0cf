"""Jobs module: job postings and the public careers feed."""

from fastapi import APIRouter


router = APIRouter(prefix="/jobs", tags=["jobs"])

# Import routes to register them (must be after router is defined)
from hireboard.modules.jobs import routes  # noqa: F401, E402
