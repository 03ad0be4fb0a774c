from __future__ import annotations

import logging
import uuid
from collections import OrderedDict
from contextlib import asynccontextmanager
from dataclasses import asdict

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from spelling_quiz.api.schemas import (
    BankLoadRequest,
    BankReplaceRequest,
    BankTextRequest,
    GradeRequest,
    QuizStartRequest,
    QuizSubmitRequest,
)
from spelling_quiz.bank.loader import BankLoadError, EmptyBankError, load_bank_from_url
from spelling_quiz.bank.parser import parse_delimited_text
from spelling_quiz.bank.store import QuestionBank
from spelling_quiz.config import load_settings
from spelling_quiz.grading.grader import grade_answer
from spelling_quiz.grading.highlighter import highlight_mismatches, render_highlight_html
from spelling_quiz.quiz.session import InputAssist, QuizReport, QuizSession, start_quiz

logger = logging.getLogger(__name__)

MAX_OPEN_QUIZZES = 200

settings = load_settings()
bank = QuestionBank()
sessions: OrderedDict[str, QuizSession] = OrderedDict()


@asynccontextmanager
async def lifespan(_app: FastAPI):
    if settings.bank_url:
        try:
            await load_bank_from_url(bank, settings.bank_url, timeout=settings.fetch_timeout)
        except (BankLoadError, EmptyBankError) as exc:
            logger.warning("Auto-load from %s failed, keeping built-in questions: %s", settings.bank_url, exc)
    yield


app = FastAPI(title="Spelling Quiz", version="0.1.0", lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


@app.get("/api/bank")
def get_bank() -> dict:
    records = bank.records
    return {"ok": True, "size": len(records), "items": [asdict(r) for r in records]}


@app.put("/api/bank")
def replace_bank(req: BankReplaceRequest) -> dict:
    loaded = bank.replace([item.model_dump() for item in req.records])
    if not loaded:
        raise HTTPException(status_code=400, detail="no valid clue/answer records")
    return {"ok": True, "loaded": loaded}


@app.post("/api/bank/text")
def import_bank_text(req: BankTextRequest) -> dict:
    parsed = parse_delimited_text(req.text)
    if not parsed:
        raise HTTPException(status_code=400, detail="Parsed 0 valid lines (needs answer<TAB>clue).")
    return {"ok": True, "loaded": bank.replace(parsed)}


@app.post("/api/bank/load")
async def load_bank(req: BankLoadRequest) -> dict:
    url = (req.url or settings.bank_url or "").strip()
    if not url:
        raise HTTPException(status_code=400, detail="url is empty")
    try:
        loaded = await load_bank_from_url(bank, url, timeout=settings.fetch_timeout)
    except EmptyBankError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except BankLoadError as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc
    return {"ok": True, "loaded": loaded}


@app.post("/api/quiz")
def create_quiz(req: QuizStartRequest) -> dict:
    input_assist = InputAssist(
        requested=req.input_assist,
        script=settings.input_assist_script if req.input_assist else None,
        load_error=req.input_assist_error if req.input_assist else None,
    )
    session = start_quiz(
        bank,
        req.count if req.count is not None else settings.default_questions,
        actions=req.actions,
        input_assist=input_assist,
    )
    quiz_id = uuid.uuid4().hex
    _remember_session(quiz_id, session)
    return {
        "ok": True,
        "quiz_id": quiz_id,
        "title": session.title,
        "input_assist": asdict(session.input_assist),
        "questions": [
            {"index": idx, "clue": q.clue, "action": session.action_for(idx)}
            for idx, q in enumerate(session.questions)
        ],
    }


@app.post("/api/quiz/{quiz_id}/submit")
def submit_quiz(quiz_id: str, req: QuizSubmitRequest) -> dict:
    session = sessions.get(quiz_id)
    if session is None:
        raise HTTPException(status_code=404, detail="quiz not found")
    if session.graded:
        # Second confirmation closes the quiz and hands back the rolls.
        sessions.pop(quiz_id, None)
        return {"ok": True, "closed": True, "rolls": session.rolls()}
    report = session.submit(req.answers)
    return {"ok": True, "closed": False, **_report_payload(report)}


@app.post("/api/grade")
def grade(req: GradeRequest) -> dict:
    result = grade_answer(req.correct, req.user_input)
    marks = highlight_mismatches(req.correct, req.user_input)
    return {
        "ok": True,
        "mistakes": result.mistakes,
        "roll": result.roll,
        "marks": [{"char": m.char, "mismatched": m.mismatched} for m in marks],
        "highlight_html": render_highlight_html(marks),
    }


def _remember_session(quiz_id: str, session: QuizSession) -> None:
    # Oldest open quizzes are dropped first.
    sessions[quiz_id] = session
    while len(sessions) > MAX_OPEN_QUIZZES:
        sessions.popitem(last=False)


def _report_payload(report: QuizReport) -> dict:
    return {
        "total_mistakes": report.total_mistakes,
        "rolls": report.rolls,
        "rows": [
            {
                "clue": row.clue,
                "action": row.action,
                "correct_answer": row.correct_answer,
                "user_answer": row.user_answer,
                "mistakes": row.mistakes,
                "roll": row.roll,
                "highlight_html": row.highlight_html,
            }
            for row in report.rows
        ],
    }
