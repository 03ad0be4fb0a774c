from __future__ import annotations

import random
import sys
from collections import OrderedDict
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

import spelling_quiz.app as app_module
from spelling_quiz.bank.store import QuestionBank


@pytest.fixture()
def bank():
    return QuestionBank(rng=random.Random(7))


@pytest.fixture()
def client(bank, monkeypatch):
    monkeypatch.setattr(app_module, "bank", bank)
    monkeypatch.setattr(app_module, "sessions", OrderedDict())
    with TestClient(app_module.app) as c:
        yield c
