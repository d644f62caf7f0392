"""Provider type slug normalization."""

from __future__ import annotations

import re

_SEPARATOR_RE = re.compile(r"[\s_]+")
_INVALID_RE = re.compile(r"[^a-z0-9-]")
_MULTIDASH_RE = re.compile(r"-{2,}")


def normalize_type_slug(raw_name: str | None) -> str:
    """Lower-case, hyphenate separators and drop anything outside ``[a-z0-9-]``."""

    if not raw_name:
        return ""
    collapsed = _SEPARATOR_RE.sub("-", raw_name.strip().lower())
    cleaned = _INVALID_RE.sub("", collapsed)
    return _MULTIDASH_RE.sub("-", cleaned).strip("-")
