"""Query helpers shared by the module repositories."""

LIKE_ESCAPE = "\\"


def contains_pattern(term: str) -> str:
    """Build a lower-cased ``%term%`` pattern with LIKE wildcards escaped.

    Use together with ``column.like(pattern, escape=LIKE_ESCAPE)`` so that
    ``%`` and ``_`` typed into a search box match literally.
    """
    escaped = (
        term.lower()
        .replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", f"{LIKE_ESCAPE}%")
        .replace("_", f"{LIKE_ESCAPE}_")
    )
    return f"%{escaped}%"
