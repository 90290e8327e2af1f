"""
Turns raw extraction model output into ParsedClass records.

Models frequently wrap their JSON in Markdown fences despite being told not
to, and occasionally return records with missing or oddly formatted fields.
Records that cannot satisfy the ParsedClass invariant are dropped rather than
filled in with defaults.
"""
from __future__ import annotations

import json
import logging
import re
import typing as t
from dataclasses import asdict

from .errors import MalformedResponseError
from .models import WEEKDAYS, ParsedClass


logger = logging.getLogger(__name__)

OPTIONAL_FIELDS: tuple[str, ...] = (
    "course_code",
    "professor",
    "room_number",
    "building",
    "floor",
    "notes",
)

_LEADING_FENCE_RE = re.compile(r"^```[\w+-]*[ \t]*\n?")
_TRAILING_FENCE_RE = re.compile(r"\n?```$")
_TIME_RE = re.compile(r"^([01]?\d|2[0-3]):([0-5]\d)$", re.ASCII)

_DAY_LOOKUP: dict[str, str] = {}
for _day in WEEKDAYS:
    _DAY_LOOKUP[_day.lower()] = _day
    _DAY_LOOKUP[_day[:3].lower()] = _day


def strip_code_fences(raw: str) -> str:
    s = raw.strip()
    s = _LEADING_FENCE_RE.sub("", s, count=1)
    s = _TRAILING_FENCE_RE.sub("", s, count=1)
    return s.strip()


def canonical_time(value: t.Any) -> t.Optional[str]:
    """Return ``HH:MM`` for a 24-hour ``H:MM``/``HH:MM`` string, else None."""
    if not isinstance(value, str):
        return None
    match = _TIME_RE.match(value.strip())
    if not match:
        return None
    return f"{int(match.group(1)):02d}:{match.group(2)}"


def canonical_days(values: t.Any) -> list[str]:
    """Map day names to full weekday names, dropping unknowns and duplicates."""
    if not isinstance(values, list):
        return []
    days: list[str] = []
    for value in values:
        if not isinstance(value, str):
            continue
        day = _DAY_LOOKUP.get(value.strip().rstrip(".").lower())
        if day and day not in days:
            days.append(day)
    return days


def _optional_text(value: t.Any) -> t.Optional[str]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def normalize_record(item: t.Any) -> t.Optional[ParsedClass]:
    """Convert one candidate record, or return None if it breaks the invariant."""
    if not isinstance(item, dict):
        return None

    course_name = item.get("course_name")
    if not isinstance(course_name, str) or not course_name.strip():
        return None

    start_time = canonical_time(item.get("start_time"))
    end_time = canonical_time(item.get("end_time"))
    if start_time is None or end_time is None:
        return None

    days = canonical_days(item.get("days_of_week"))
    if not days:
        return None

    optional = {name: _optional_text(item.get(name)) for name in OPTIONAL_FIELDS}
    return ParsedClass(
        course_name=course_name.strip(),
        start_time=start_time,
        end_time=end_time,
        days_of_week=days,
        **optional,
    )


def normalize_records(items: list[t.Any]) -> list[ParsedClass]:
    classes: list[ParsedClass] = []
    for item in items:
        parsed = normalize_record(item)
        if parsed is not None:
            classes.append(parsed)

    dropped = len(items) - len(classes)
    if dropped:
        logger.info("Dropped %d of %d extracted records that were missing required fields", dropped, len(items))
    return classes


def parse_model_output(raw: t.Optional[str], model: str = "") -> list[ParsedClass]:
    """
    Parse the textual payload of one model response.

    Raises:
        MalformedResponseError: If the text is not a JSON array.
    """
    if not raw or not raw.strip():
        raise MalformedResponseError(model, "empty response")

    cleaned = strip_code_fences(raw)
    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError as exc:
        raise MalformedResponseError(model, f"invalid JSON: {exc.msg}") from exc
    except RecursionError as exc:
        raise MalformedResponseError(model, "invalid JSON: nested too deeply") from exc

    if not isinstance(data, list):
        raise MalformedResponseError(model, f"expected a JSON array, got {type(data).__name__}")

    return normalize_records(data)


def class_to_dict(parsed: ParsedClass) -> dict[str, t.Any]:
    """JSON-ready dict for a ParsedClass; absent optional fields are omitted."""
    data = asdict(parsed)
    return {k: v for k, v in data.items() if v is not None}
