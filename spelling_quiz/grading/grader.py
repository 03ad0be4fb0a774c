from __future__ import annotations

from dataclasses import dataclass

from spelling_quiz.grading.alignment import edit_distance
from spelling_quiz.grading.normalizer import alnum_overlap_exists, to_comparable

MAX_MISTAKES = 5
DIE_FACES = 6


@dataclass(frozen=True)
class GradingResult:
    mistakes: int
    roll: int


def compute_mistakes(correct_raw: str | None, user_raw: str | None) -> int:
    """Mistake count in [0, 5].

    Whitespace and case never count, punctuation does. Answers sharing no
    letter or digit with the correct spelling score the maximum outright.
    """
    if not alnum_overlap_exists(correct_raw, user_raw):
        return MAX_MISTAKES
    distance = edit_distance(to_comparable(correct_raw), to_comparable(user_raw))
    return min(MAX_MISTAKES, distance)


def roll_for(mistakes: int) -> int:
    return DIE_FACES - mistakes


def grade_answer(correct_raw: str | None, user_raw: str | None) -> GradingResult:
    mistakes = compute_mistakes(correct_raw, user_raw)
    return GradingResult(mistakes=mistakes, roll=roll_for(mistakes))
