"""CSV export of applications for spreadsheets and ATS imports."""

import csv
from collections.abc import Iterable
from io import StringIO

from hireboard.modules.applications.models import Application


EXPORT_COLUMNS = (
    "id",
    "job_title",
    "candidate_name",
    "candidate_email",
    "candidate_phone",
    "status",
    "remarks",
    "is_archived",
    "source_domain",
    "resume_file_name",
    "submitted_at",
)


def _row(application: Application) -> list[str]:
    return [
        str(application.id),
        application.job_title or "",
        application.candidate_name or "",
        application.candidate_email or "",
        application.candidate_phone or "",
        application.status,
        # One record per line keeps the file friendly to line-based tools
        (application.remarks or "").replace("\r", " ").replace("\n", " ").strip(),
        "yes" if application.is_archived else "no",
        application.source_domain or "",
        application.resume_file_name or "",
        application.created_at.isoformat(),
    ]


def applications_csv(applications: Iterable[Application]) -> str:
    """Render applications as CSV text with a header row."""
    buf = StringIO()
    writer = csv.writer(buf)
    writer.writerow(EXPORT_COLUMNS)
    for application in applications:
        writer.writerow(_row(application))
    return buf.getvalue()
