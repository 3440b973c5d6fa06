"\"\"\"Text helpers shared by skill extraction.\"\"\""

from __future__ import annotations

import re

_REGEX_SPECIALS = re.compile(r"[.*+?^${}()|\[\]\\]")

CONTEXT_WINDOW = 50


def escape_regexp(value: str) -> str:
    """Escape regex metacharacters so ``value`` matches literally."""
    return _REGEX_SPECIALS.sub(lambda match: "\\" + match.group(0), value)


def get_skill_context(text: str, skill: str, *, window: int = CONTEXT_WINDOW) -> str:
    """Return the lowercased text around every mention of ``skill``.

    Each mention contributes up to ``window`` characters on both sides; the
    snippets are joined with a single space. Returns an empty string when the
    skill is not mentioned.
    """
    pattern = re.compile(
        rf".{{0,{window}}}{escape_regexp(skill)}.{{0,{window}}}",
        re.IGNORECASE,
    )
    snippets = [match.group(0) for match in pattern.finditer(text)]
    return " ".join(snippets).lower()
