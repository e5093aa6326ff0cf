"""Helpers for turning a public form submission into an application.

Submissions arrive keyed by field id. They are stored keyed by the label the
candidate saw, and the candidate's contact details are picked out of the
labelled answers.
"""

import json
import re
from dataclasses import dataclass
from typing import Any
from urllib.parse import urlsplit


PORTFOLIO_LINKS_KEY = "portfolioLinks"
PORTFOLIO_LINKS_LABEL = "Portfolio Links"
COVER_LETTER_LABEL = "Cover Letter"
ANONYMOUS_CANDIDATE = "Anonymous"

PHONE_PATTERN = re.compile(r"^\+?[\d\s\-()]{10,}$")

_NAME_HINTS = ("name",)
_EMAIL_HINTS = ("email",)
_PHONE_HINTS = ("phone", "mobile", "contact")
_RESUME_HINTS = ("resume", "cv", "upload")


@dataclass(frozen=True, slots=True)
class CandidateInfo:
    name: str = ANONYMOUS_CANDIDATE
    email: str | None = None
    phone: str | None = None
    resume_file_name: str | None = None
    resume_path: str | None = None
    cover_letter: str | None = None


def relabel_form_data(
    form_data: dict[str, Any],
    form_labels: dict[str, str],
    field_labels: dict[str, str] | None = None,
) -> dict[str, Any]:
    """Re-key submitted answers by label.

    The label comes from the job's form, then the caller's ``field_labels``,
    then the raw key.
    """
    field_labels = field_labels or {}
    labelled: dict[str, Any] = {}
    for key, value in form_data.items():
        if key == PORTFOLIO_LINKS_KEY:
            labelled[PORTFOLIO_LINKS_LABEL] = value
            continue
        label = form_labels.get(key) or field_labels.get(key) or key
        labelled[label] = value
    return labelled


def is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, list | dict):
        return not value
    return False


def missing_required(labelled: dict[str, Any], required_labels: list[str]) -> list[str]:
    """Return the required labels with no usable answer, in form order."""
    return [label for label in required_labels if is_blank(labelled.get(label))]


def _parse_file_reference(value: Any) -> tuple[str, str] | None:
    if isinstance(value, str):
        if not value.startswith("{") or "fileName" not in value:
            return None
        try:
            value = json.loads(value)
        except json.JSONDecodeError:
            return None
    if not isinstance(value, dict):
        return None
    file_name, path = value.get("fileName"), value.get("path")
    if file_name and path:
        return str(file_name), str(path)
    return None


def extract_candidate(labelled: dict[str, Any]) -> CandidateInfo:
    """Pick the candidate's contact details out of labelled answers.

    Each answer fills at most one slot, checked in order name, email, phone,
    resume; the first answer to fill a slot wins.
    """
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    resume: tuple[str, str] | None = None

    for label, value in labelled.items():
        lowered = label.lower()
        if isinstance(value, str):
            if name is None and any(h in lowered for h in _NAME_HINTS):
                name = value
                continue
            if email is None and (any(h in lowered for h in _EMAIL_HINTS) or "@" in value):
                email = value
                continue
            if (
                phone is None
                and any(h in lowered for h in _PHONE_HINTS)
                and PHONE_PATTERN.match(value)
            ):
                phone = value
                continue
        if resume is None and any(h in lowered for h in _RESUME_HINTS):
            resume = _parse_file_reference(value)

    cover_letter = labelled.get(COVER_LETTER_LABEL)
    return CandidateInfo(
        name=name or ANONYMOUS_CANDIDATE,
        email=email or None,
        phone=phone,
        resume_file_name=resume[0] if resume else None,
        resume_path=resume[1] if resume else None,
        cover_letter=cover_letter if isinstance(cover_letter, str) and cover_letter else None,
    )


def resolve_source(referer: str | None, origin: str | None) -> tuple[str | None, str | None]:
    """Return ``(domain, url)`` of the page a submission came from.

    ``Referer`` is preferred; ``Origin`` is used when the referer is missing
    or unparseable.
    """
    for candidate in (referer, origin):
        if not candidate:
            continue
        hostname = urlsplit(candidate).hostname
        if hostname:
            return hostname, candidate
    return None, None
