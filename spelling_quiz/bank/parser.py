from __future__ import annotations

import re

from spelling_quiz.bank.store import QuestionRecord, trim_field

LINE_SPLIT_RE = re.compile(r"\r?\n")


def parse_delimited_text(text: str | None) -> list[QuestionRecord]:
    """Parse ``answer<TAB>clue`` lines.

    The answer comes first, the reverse of how the built-in bank reads.
    Blank lines, lines with fewer than two fields and lines with an empty
    field are skipped.
    """
    records: list[QuestionRecord] = []
    for line in LINE_SPLIT_RE.split(str(text or "").lstrip("\ufeff")):
        if not line.strip():
            continue
        parts = line.split("\t")
        if len(parts) < 2:
            continue
        answer = trim_field(parts[0])
        clue = trim_field(parts[1])
        if not answer or not clue:
            continue
        records.append(QuestionRecord(clue=clue, answer=answer))
    return records
