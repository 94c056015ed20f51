from __future__ import annotations

import re

_DISALLOWED_CHARS = re.compile(r"[^a-zA-Z0-9\s-]")


def normalize_skill(skill_name: str) -> str:
    return skill_name.strip().lower()


def clean_skill_name(raw: str) -> str:
    """Strip everything but letters, digits, whitespace and hyphens.

    Applied to model-produced skill names before they are resolved. Returns an
    empty string when nothing usable is left; callers drop those entries.
    """
    return _DISALLOWED_CHARS.sub("", raw.strip()).strip()
