from __future__ import annotations

from html import escape
from typing import NamedTuple

from spelling_quiz.grading.alignment import mismatch_marks
from spelling_quiz.grading.normalizer import strip_whitespace


class MarkedChar(NamedTuple):
    char: str
    mismatched: bool


def highlight_mismatches(correct_raw: str | None, user_raw: str | None) -> list[MarkedChar]:
    """Mark each character of the correct answer that the user's answer got wrong.

    Alignment runs on the whitespace-free, lower-cased strings; whitespace in
    the correct answer passes through unmarked and consumes no mark.
    """
    correct_chars = list(str(correct_raw or ""))
    correct_no_space = "".join(ch for ch in correct_chars if not ch.isspace())
    if not correct_no_space:
        return [MarkedChar(ch, False) for ch in correct_chars]

    marks = mismatch_marks(correct_no_space.lower(), strip_whitespace(user_raw).lower())

    marked: list[MarkedChar] = []
    k = 0
    for ch in correct_chars:
        if ch.isspace():
            marked.append(MarkedChar(ch, False))
            continue
        marked.append(MarkedChar(ch, marks[k] if k < len(marks) else False))
        k += 1
    return marked


def render_highlight_html(marked: list[MarkedChar]) -> str:
    parts: list[str] = []
    for ch, mismatched in marked:
        text = escape(ch)
        parts.append(f'<span class="mistake">{text}</span>' if mismatched else text)
    return "".join(parts)
