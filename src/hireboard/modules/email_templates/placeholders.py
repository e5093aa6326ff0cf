"""Placeholder handling for email templates.

Templates use ``{{name}}`` for values and ``{{#if name}}...{{/if}}`` for
blocks shown only when ``name`` has a non-empty value. Blocks do not nest.
"""

import re
from collections.abc import Mapping


_NAME = r"[A-Za-z_][A-Za-z0-9_]*"
_PLACEHOLDER = re.compile(r"\{\{\s*(?:#if\s+)?(" + _NAME + r")\s*\}\}")
_VALUE = re.compile(r"\{\{\s*(" + _NAME + r")\s*\}\}")
_IF_BLOCK = re.compile(r"\{\{\s*#if\s+(" + _NAME + r")\s*\}\}(.*?)\{\{\s*/if\s*\}\}", re.DOTALL)


def extract_variables(*texts: str) -> list[str]:
    """Placeholder names in order of first appearance, without repeats."""
    seen: dict[str, None] = {}
    for text in texts:
        for match in _PLACEHOLDER.finditer(text):
            seen.setdefault(match.group(1), None)
    return list(seen)


def render(text: str, values: Mapping[str, str]) -> str:
    """Fill in placeholders; ones without a value are left as written."""

    def _block(match: re.Match[str]) -> str:
        return match.group(2) if values.get(match.group(1)) else ""

    def _value(match: re.Match[str]) -> str:
        name = match.group(1)
        return values[name] if name in values else match.group(0)

    return _VALUE.sub(_value, _IF_BLOCK.sub(_block, text))
