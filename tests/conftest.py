"""Pytest configuration.

Puts `src/` on the path so tests run without an editable install, and
provides in-memory doubles for the game's I/O and randomness.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

src_dir = Path(__file__).resolve().parent.parent / "src"
if str(src_dir) not in sys.path:
    sys.path.insert(0, str(src_dir))

from core.domain.errors import InputReadFailure  # noqa: E402
from core.domain.models import Feedback, GameSummary  # noqa: E402


class FixedRandomSource:
    """Always returns the same value; records requested ranges."""

    def __init__(self, value: int) -> None:
        self.value = value
        self.calls: list[tuple[int, int]] = []

    def next_in_range(self, low: int, high: int) -> int:
        self.calls.append((low, high))
        return self.value


class ScriptedReader:
    """Serves lines from a list, then behaves like a closed stdin."""

    def __init__(self, lines: list[str]) -> None:
        self._lines = list(lines)
        self.reads = 0

    def read_line(self) -> str:
        if not self._lines:
            raise InputReadFailure("input stream closed")
        self.reads += 1
        return self._lines.pop(0)


class RecordingWriter:
    """Records writer calls as (kind, payload) tuples."""

    def __init__(self) -> None:
        self.events: list[tuple[str, object]] = []
        self.summary: GameSummary | None = None

    def prompt(self) -> None:
        self.events.append(("prompt", None))

    def echo(self, guess: int) -> None:
        self.events.append(("echo", guess))

    def feedback(self, category: Feedback, summary: GameSummary | None = None) -> None:
        self.events.append(("feedback", category))
        if summary is not None:
            self.summary = summary

    def kinds(self) -> list[str]:
        return [kind for kind, _ in self.events]

    def feedbacks(self) -> list[Feedback]:
        return [payload for kind, payload in self.events if kind == "feedback"]


@pytest.fixture
def writer() -> RecordingWriter:
    return RecordingWriter()


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Keep real env vars and .env files away from AppSettings."""

    for key in list(os.environ):
        if key.upper().startswith("GUESSING_GAME_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.chdir(tmp_path)
