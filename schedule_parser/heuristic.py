"""
Model-free fallback extraction.

Groups lines around a time-range anchor: every line that contains
``H:MM-H:MM`` closes one class block made of the lines seen since the
previous block. This is deliberately low fidelity compared to AI extraction;
only name, times and days are recovered.
"""
from __future__ import annotations

import re

from .models import WEEKDAYS, ParsedClass


MAX_BUFFER_LINES = 10
UNTITLED_CLASS_NAME = "Untitled Class"
DEFAULT_DAYS: tuple[str, ...] = WEEKDAYS[:5]

TIME_RANGE_RE = re.compile(
    r"(?<!\d)([01]?\d|2[0-3]):([0-5]\d)\s*-\s*([01]?\d|2[0-3]):([0-5]\d)(?!\d)",
    re.ASCII,
)
_WEEKDAY_RE = re.compile("|".join(WEEKDAYS), re.IGNORECASE | re.ASCII)
_DAY_BY_LOWER = {day.lower(): day for day in WEEKDAYS}


def _days_on_line(line: str) -> list[str]:
    days: list[str] = []
    for match in _WEEKDAY_RE.finditer(line):
        day = _DAY_BY_LOWER[match.group(0).lower()]
        if day not in days:
            days.append(day)
    return days


def _days_from_buffer(buffer: list[str]) -> list[str]:
    for line in buffer:
        days = _days_on_line(line)
        if days:
            return days
    return list(DEFAULT_DAYS)


def _course_name(first_line: str) -> str:
    name = " ".join(TIME_RANGE_RE.sub(" ", first_line).split())
    return name or UNTITLED_CLASS_NAME


def parse_heuristically(text: str) -> list[ParsedClass]:
    """
    Extract class records from plain text without any model.

    Pure and deterministic: the same text always yields the same records.
    Never raises for string input; returns an empty list when nothing
    looks like a class.
    """
    lines = [line.strip() for line in text.splitlines() if line.strip()]

    classes: list[ParsedClass] = []
    buffer: list[str] = []
    for line in lines:
        if len(buffer) >= MAX_BUFFER_LINES:
            # Too long without a time range to be a class block.
            buffer = []
        buffer.append(line)

        match = TIME_RANGE_RE.search(line)
        if not match:
            continue

        start_hour, start_minute, end_hour, end_minute = match.groups()
        classes.append(
            ParsedClass(
                course_name=_course_name(buffer[0]),
                start_time=f"{int(start_hour):02d}:{start_minute}",
                end_time=f"{int(end_hour):02d}:{end_minute}",
                days_of_week=_days_from_buffer(buffer),
            )
        )
        buffer = []

    return classes
