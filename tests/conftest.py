"""Shared fixtures for the schedule parser tests."""
import typing as t

import pytest

from schedule_parser.config import PipelineConfig
from schedule_parser.models import ScheduleUpload


class FakeExtractionService:
    """Scripted extraction service: returns or raises a fixed response per model."""

    def __init__(self, responses: dict[str, t.Union[str, Exception]]) -> None:
        self.responses = responses
        self.calls: list[str] = []

    def extract(self, model: str, upload: ScheduleUpload) -> str:
        self.calls.append(model)
        response = self.responses[model]
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer credentials and overrides out of the tests."""
    for name in ("OPENAI_API_KEY", "SCHEDULE_PARSER_MODELS", "EXTRACTION_TIMEOUT_SECONDS", "OPENAI_BASE_URL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def make_service() -> t.Callable[..., FakeExtractionService]:
    return FakeExtractionService


@pytest.fixture
def configured() -> PipelineConfig:
    return PipelineConfig(api_key="test-key", models=("model-a", "model-b"))


@pytest.fixture
def text_upload() -> dict[str, str]:
    return {
        "fileContent": "CS101 Intro to Programming\nMonday Wednesday Friday\n09:00-10:30\n",
        "fileName": "fall.txt",
    }
