from collections.abc import Iterator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from docgenius.api.app import create_app
from docgenius.config.settings import Settings
from docgenius.generation.base import BaseTextGenerator
from docgenius.storage.memory import MemoryRecordStore


class RecordingGenerator(BaseTextGenerator):
    """Deterministic generator that records every call it receives."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str, str | None]] = []
        self.answer_text = "<h2>Answer</h2><p>The answer.</p>"
        self.error: Exception | None = None

    def summarize(self, content: str, filename: str) -> str:
        return self._record("summary", content, None, f"<h2>Main Summary</h2><p>{content}</p>")

    def answer_question(self, content: str, question: str, filename: str) -> str:
        return self._record("qa", content, question, self.answer_text)

    def solve_math(self, content: str, filename: str) -> str:
        return self._record(
            "math", content, None, f"<h2>Solution</h2><p>Worked solution for {filename}</p>"
        )

    def _record(self, operation: str, content: str, question: str | None, text: str) -> str:
        self.calls.append((operation, content, question))
        if self.error is not None:
            raise self.error
        return text


@pytest.fixture()
def store() -> MemoryRecordStore:
    return MemoryRecordStore()


@pytest.fixture()
def generator() -> RecordingGenerator:
    return RecordingGenerator()


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    return Settings(
        upload_dir=tmp_path / "uploads",
        generation_provider="example",
        cors_allow_origins=["*"],
    )


@pytest.fixture()
def client(
    settings: Settings,
    store: MemoryRecordStore,
    generator: RecordingGenerator,
) -> Iterator[TestClient]:
    app = create_app(settings, store=store, generator=generator)
    with TestClient(app) as test_client:
        yield test_client
