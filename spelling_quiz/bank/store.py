from __future__ import annotations

import math
import random
import sys
from collections.abc import Iterable, Mapping
from dataclasses import dataclass


@dataclass(frozen=True)
class QuestionRecord:
    clue: str
    answer: str


DEFAULT_QUESTIONS: tuple[QuestionRecord, ...] = (
    QuestionRecord(clue="Feline pet", answer="cat"),
    QuestionRecord(clue="Opposite of cold", answer="hot"),
    QuestionRecord(clue="Baby dog", answer="puppy"),
    QuestionRecord(clue="Color of grass", answer="green"),
    QuestionRecord(clue="Star at the center of our solar system", answer="sun"),
    QuestionRecord(clue="Day after Monday", answer="tuesday"),
    QuestionRecord(clue="Frozen water", answer="ice"),
    QuestionRecord(clue="Not old", answer="new"),
    QuestionRecord(clue="Large body of water", answer="ocean"),
    QuestionRecord(clue="Man's best friend", answer="dog"),
    QuestionRecord(clue="To sleep lightly", answer="nap"),
    QuestionRecord(clue="First month of the year", answer="january"),
)


class QuestionBank:
    """Active set of clue/answer pairs.

    The records live in an immutable tuple that ``replace`` swaps in one
    assignment, so a reader either sees the old set or the new one.
    """

    def __init__(
        self,
        records: Iterable[QuestionRecord] = DEFAULT_QUESTIONS,
        *,
        rng: random.Random | None = None,
    ) -> None:
        self._records: tuple[QuestionRecord, ...] = tuple(records)
        self._rng = rng or random.Random()

    def __len__(self) -> int:
        return len(self._records)

    @property
    def records(self) -> tuple[QuestionRecord, ...]:
        return self._records

    def replace(self, records: Iterable[object] | None) -> int:
        """Swap in every valid record and return how many were kept.

        Nothing changes (and 0 is returned) when no record survives trimming.
        """
        cleaned = [record for record in (_coerce_record(item) for item in (records or [])) if record]
        if not cleaned:
            return 0
        self._records = tuple(cleaned)
        return len(cleaned)

    def sample(self, count: object, *, rng: random.Random | None = None) -> list[QuestionRecord]:
        records = self._records
        if not records:
            return []
        n = max(1, min(_coerce_count(count), len(records)))
        indices = list(range(len(records)))
        (rng or self._rng).shuffle(indices)
        return [records[i] for i in indices[:n]]


def _coerce_record(item: object) -> QuestionRecord | None:
    if isinstance(item, Mapping):
        clue = item.get("clue")
        answer = item.get("answer")
    else:
        clue = getattr(item, "clue", None)
        answer = getattr(item, "answer", None)
    clue_text = "" if clue is None else trim_field(str(clue))
    answer_text = "" if answer is None else trim_field(str(answer))
    if not clue_text or not answer_text:
        return None
    return QuestionRecord(clue=clue_text, answer=answer_text)


def trim_field(value: str) -> str:
    """Strip surrounding whitespace and byte-order marks."""
    return value.strip().strip("\ufeff").strip()


def _coerce_count(count: object) -> int:
    try:
        value = float(count)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return 1
    if math.isnan(value):
        return 1
    if math.isinf(value):
        return sys.maxsize if value > 0 else 1
    return int(value) or 1
