from __future__ import annotations

from pydantic import BaseModel, Field


class QuestionIn(BaseModel):
    clue: str | None = None
    answer: str | None = None


class BankReplaceRequest(BaseModel):
    records: list[QuestionIn] = Field(default_factory=list)


class BankTextRequest(BaseModel):
    text: str


class BankLoadRequest(BaseModel):
    url: str | None = None


class QuizStartRequest(BaseModel):
    count: int | None = Field(default=None)
    actions: list[str] | None = None
    input_assist: bool = False
    input_assist_error: str | None = None


class QuizSubmitRequest(BaseModel):
    answers: list[str | None] = Field(default_factory=list)


class GradeRequest(BaseModel):
    correct: str
    user_input: str = ""
