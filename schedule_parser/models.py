"""
Data models for schedule parsing and representation.

This module contains all the dataclasses used to represent uploaded schedules
and the class sessions extracted from them.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple


WEEKDAYS: Tuple[str, ...] = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

PDF_MIME_TYPE = "application/pdf"


@dataclass(frozen=True)
class ParsedClass:
    """
    One recurring class session, e.g.:
    - "CS101 Intro to Programming, MWF 09:00-10:30, Room 301"
    """
    course_name: str
    start_time: str                         # "HH:MM" 24h
    end_time: str                           # "HH:MM" 24h
    days_of_week: List[str] = field(default_factory=list)  # ["Monday", "Wednesday"]
    course_code: Optional[str] = None
    professor: Optional[str] = None
    room_number: Optional[str] = None
    building: Optional[str] = None
    floor: Optional[str] = None
    notes: Optional[str] = None


@dataclass(frozen=True)
class ParseResult:
    """
    Classes extracted from one upload, plus a human-readable trace of which
    strategy produced them.
    """
    classes: List[ParsedClass] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class ScheduleUpload:
    """A request body that passed validation."""
    file_content: str
    file_name: str
    file_type: Optional[str] = None
    file_base64: Optional[str] = None

    @property
    def has_pdf(self) -> bool:
        return self.file_type == PDF_MIME_TYPE and bool(self.file_base64)


@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    upload: Optional[ScheduleUpload] = None
    error: Optional[str] = None


@dataclass(frozen=True)
class CascadeOutcome:
    """First successful model attempt, with the soft failures that preceded it."""
    classes: List[ParsedClass]
    model: str
    failures: List[Tuple[str, str]] = field(default_factory=list)
