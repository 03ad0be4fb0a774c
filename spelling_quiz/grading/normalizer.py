from __future__ import annotations

import re

WHITESPACE_RE = re.compile(r"\s+")
ALNUM_RE = re.compile(r"[a-z0-9]")


def strip_whitespace(raw: str | None) -> str:
    """Remove whitespace only; case and punctuation stay."""
    return WHITESPACE_RE.sub("", str(raw or ""))


def to_comparable(raw: str | None) -> str:
    return strip_whitespace(str(raw or "").lower())


def alnum_chars(raw: str | None) -> set[str]:
    return set(ALNUM_RE.findall(str(raw or "").lower()))


def alnum_overlap_exists(a: str | None, b: str | None) -> bool:
    """True when both strings share at least one ASCII letter or digit.

    A string without any letter or digit never overlaps, so empty or
    punctuation-only answers are always rejected.
    """
    left = alnum_chars(a)
    right = alnum_chars(b)
    if not left or not right:
        return False
    return not left.isdisjoint(right)
