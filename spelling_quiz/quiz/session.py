from __future__ import annotations

import random
from collections.abc import Sequence
from dataclasses import dataclass, field

from spelling_quiz.bank.store import QuestionBank, QuestionRecord
from spelling_quiz.grading.grader import DIE_FACES, grade_answer
from spelling_quiz.grading.highlighter import MarkedChar, highlight_mismatches, render_highlight_html

BASE_TITLE = "Spelling Quiz"
INPUT_ASSIST_FIELD_ATTRIBUTE = "data-vnkeys"


@dataclass(frozen=True)
class InputAssist:
    """What a renderer needs to attach the optional typing helper to answer fields."""

    requested: bool = False
    script: str | None = None
    load_error: str | None = None
    field_attribute: str = INPUT_ASSIST_FIELD_ATTRIBUTE


@dataclass
class QuizRow:
    clue: str
    action: str | None
    correct_answer: str
    user_answer: str | None = None
    mistakes: int | None = None
    roll: int = DIE_FACES
    marks: list[MarkedChar] = field(default_factory=list)
    highlight_html: str | None = None


@dataclass
class QuizReport:
    rows: list[QuizRow]
    total_mistakes: int
    rolls: list[int]


@dataclass
class QuizSession:
    questions: list[QuestionRecord]
    actions: list[str] | None = None
    input_assist: InputAssist = field(default_factory=InputAssist)
    report: QuizReport | None = None

    @property
    def title(self) -> str:
        if self.input_assist.requested:
            return f"{BASE_TITLE} - VNKeys in effect"
        return BASE_TITLE

    @property
    def graded(self) -> bool:
        return self.report is not None

    def rolls(self) -> list[int]:
        if self.report is not None:
            return list(self.report.rolls)
        return [DIE_FACES] * len(self.questions)

    def submit(self, answers: Sequence[str | None]) -> QuizReport:
        """Grade every row once; later calls hand back the first report."""
        if self.report is not None:
            return self.report

        rows: list[QuizRow] = []
        for idx, question in enumerate(self.questions):
            user_answer = answers[idx] if idx < len(answers) else None
            user_answer = "" if user_answer is None else str(user_answer)
            result = grade_answer(question.answer, user_answer)
            marks = highlight_mismatches(question.answer, user_answer)
            rows.append(
                QuizRow(
                    clue=question.clue,
                    action=self.action_for(idx),
                    correct_answer=question.answer,
                    user_answer=user_answer,
                    mistakes=result.mistakes,
                    roll=result.roll,
                    marks=marks,
                    highlight_html=render_highlight_html(marks),
                )
            )

        self.report = QuizReport(
            rows=rows,
            total_mistakes=sum(row.mistakes or 0 for row in rows),
            rolls=[row.roll for row in rows],
        )
        return self.report

    def action_for(self, idx: int) -> str | None:
        if self.actions is None:
            return None
        if idx < len(self.actions) and self.actions[idx] is not None:
            return str(self.actions[idx])
        return ""


def start_quiz(
    bank: QuestionBank,
    num_questions: object,
    *,
    actions: Sequence[str] | None = None,
    input_assist: InputAssist | None = None,
    rng: random.Random | None = None,
) -> QuizSession:
    questions = bank.sample(num_questions, rng=rng)
    return QuizSession(
        questions=questions,
        actions=list(actions) if actions is not None else None,
        input_assist=input_assist or InputAssist(),
    )
