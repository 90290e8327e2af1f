"""
Shared Pydantic models for REST API serialization.

This module contains Pydantic equivalents of the schedule_parser dataclasses,
ensuring consistent JSON serialization for the schedule service.
"""
from __future__ import annotations

import typing as t
from pydantic import BaseModel, ConfigDict, Field


Weekday = t.Literal["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]


class ParsedClass(BaseModel):
    """
    One recurring class session, e.g.:
    - "CS101 Intro to Programming, MWF 09:00-10:30, Room 301"
    """
    course_name: str
    course_code: t.Optional[str] = None
    professor: t.Optional[str] = None
    room_number: t.Optional[str] = None
    building: t.Optional[str] = None
    floor: t.Optional[str] = None
    start_time: str             # "HH:MM" 24h
    end_time: str               # "HH:MM" 24h
    days_of_week: list[Weekday] = Field(default_factory=list)
    notes: t.Optional[str] = None


# Request/Response Models for API endpoints
class ParseScheduleRequest(BaseModel):
    """
    Request model for parsing an uploaded schedule.

    Field checks are left to schedule_parser.validation so that every
    rejection carries the same error messages.
    """
    model_config = ConfigDict(populate_by_name=True)

    file_content: t.Any = Field(default=None, alias="fileContent")
    file_name: t.Any = Field(default=None, alias="fileName")
    file_type: t.Any = Field(default=None, alias="fileType")
    file_base64: t.Any = Field(default=None, alias="fileBase64")

    def to_payload(self) -> dict[str, t.Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class ParseScheduleResponse(BaseModel):
    """Response model for a parsed schedule."""
    classes: list[ParsedClass] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    """Body returned for rejected requests and pipeline failures."""
    error: str
