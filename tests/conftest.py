"""Test configuration helpers."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app import create_app  # noqa: E402
from utils.errors import UpstreamError  # noqa: E402

SCENARIO_CSV = "pl_name,pl_rade,habitability_score\nEarth-2,1.0,0.95\nMars-2,0.5,\nUnknown-1,,\n"


class FakeGemini:
    """Stand-in for the Gemini client that records prompts instead of calling out."""

    def __init__(self, reply: str = "A pale blue world.", error: Exception | None = None) -> None:
        self.reply = reply
        self.error = error
        self.prompts: list[str] = []
        self.configured = True

    def generate_text(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def write_csv(tmp_path: Path) -> Callable[[str, str], Path]:
    def _write(content: str, name: str = "exoplanets.csv") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def scenario_csv(write_csv) -> Path:
    return write_csv(SCENARIO_CSV)


@pytest.fixture
def gemini() -> FakeGemini:
    return FakeGemini()


@pytest.fixture
def failing_gemini() -> FakeGemini:
    return FakeGemini(error=UpstreamError("Failed to generate AI content", details="quota exceeded"))


@pytest.fixture
def make_app(scenario_csv: Path, gemini: FakeGemini):
    def _make(**overrides):
        config = {
            "TESTING": True,
            "SECRET_KEY": "test-secret",
            "SQLALCHEMY_DATABASE_URI": "sqlite:///:memory:",
            "DATA_CSV": str(scenario_csv),
            "GEMINI_CLIENT": gemini,
        }
        config.update(overrides)
        return create_app(config)

    return _make


@pytest.fixture
def app(make_app):
    return make_app()


@pytest.fixture
def client(app):
    return app.test_client()
