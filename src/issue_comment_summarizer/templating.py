"""Prompt template rendering."""

from __future__ import annotations

import re
from collections.abc import Mapping

_PLACEHOLDER = re.compile(r"\{\{\s*([A-Za-z_][A-Za-z0-9_]*)\s*\}\}")


def render_prompt(template: str, values: Mapping[str, str | None]) -> str:
    """Substitute `{{ name }}` placeholders with values.

    Placeholders whose name is not in `values` are left untouched; None renders
    as an empty string.
    """

    def _replace(match: re.Match[str]) -> str:
        name = match.group(1)
        if name not in values:
            return match.group(0)
        return values[name] or ""

    return _PLACEHOLDER.sub(_replace, template)
