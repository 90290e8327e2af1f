"""Tests for the MCP tool wrapper."""
import pytest

from schedule_parser import server
from schedule_parser.config import PipelineConfig
from schedule_parser.pipeline import NOT_CONFIGURED_WARNING, SchedulePipeline


def test_parse_schedule_tool_returns_plain_dicts(tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = tmp_path / "spring.txt"
    path.write_text("Statistics 101\nThursday\n15:00-16:15\n", encoding="utf-8")
    monkeypatch.setattr(server, "_pipeline", SchedulePipeline(PipelineConfig()))

    result = server._parse_schedule(str(path))

    assert result == {
        "classes": [
            {
                "course_name": "Statistics 101",
                "start_time": "15:00",
                "end_time": "16:15",
                "days_of_week": ["Thursday"],
            }
        ],
        "warnings": [NOT_CONFIGURED_WARNING],
    }


def test_pipeline_is_built_from_the_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(server, "_pipeline", None)

    pipeline = server._get_pipeline()

    assert isinstance(pipeline, SchedulePipeline)
    assert server._get_pipeline() is pipeline
