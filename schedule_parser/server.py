from __future__ import annotations

import typing as t

from fastmcp import FastMCP

from .config import load_config
from .file_utils import load_upload
from .normalizer import class_to_dict
from .pipeline import SchedulePipeline


mcp = FastMCP("ScheduleParser")

_pipeline: t.Optional[SchedulePipeline] = None


def _get_pipeline() -> SchedulePipeline:
    global _pipeline
    if _pipeline is None:
        _pipeline = SchedulePipeline(load_config())
    return _pipeline


def _parse_schedule(path_or_url: str) -> dict[str, t.Any]:
    """
    Parse a schedule file (text, CSV or PDF) from a local path or URL.
    """
    result = _get_pipeline().parse_schedule(load_upload(path_or_url))
    return {
        "classes": [class_to_dict(c) for c in result.classes],
        "warnings": list(result.warnings),
    }


# -----------------------------
# MCP Tool Implementation
# -----------------------------

@mcp.tool()
def parse_schedule(path_or_url: str) -> dict[str, t.Any]:
    """Extract class sessions (name, times, days, location) from a schedule document.

    Uses the configured AI models in order and falls back to a rule-based parser
    when none is available; ``warnings`` says which strategy was used.

    Args:
        path_or_url: Local path or http(s) URL of a .txt, .csv or .pdf schedule

    Returns:
        A dict with ``classes`` and ``warnings``
    """
    return _parse_schedule(path_or_url)


if __name__ == "__main__":
    mcp.run()
