from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_INPUT_ASSIST_SCRIPT = "./VNKeys.patched.js"


@dataclass(frozen=True)
class QuizSettings:
    bank_url: str | None = None
    fetch_timeout: float = 15.0
    default_questions: int = 5
    input_assist_script: str = DEFAULT_INPUT_ASSIST_SCRIPT


def load_settings() -> QuizSettings:
    bank_url = (os.getenv("SPELLING_QUIZ_BANK_URL") or "").strip() or None
    return QuizSettings(
        bank_url=bank_url,
        fetch_timeout=_env_number("SPELLING_QUIZ_FETCH_TIMEOUT", 15.0, float),
        default_questions=max(1, _env_number("SPELLING_QUIZ_DEFAULT_QUESTIONS", 5, int)),
        input_assist_script=os.getenv("SPELLING_QUIZ_INPUT_ASSIST_SCRIPT", DEFAULT_INPUT_ASSIST_SCRIPT),
    )


def _env_number(name: str, default, cast):
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return cast(raw.strip())
    except ValueError:
        return default
