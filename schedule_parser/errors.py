"""Exceptions raised by the schedule parsing pipeline."""
from __future__ import annotations

import typing as t


class ScheduleParseError(Exception):
    """Base class for every pipeline error."""


class InputValidationError(ScheduleParseError):
    """The request was rejected before any extraction was attempted."""


class ExtractionError(ScheduleParseError):
    """Base class for failures talking to the extraction service."""


class SoftExtractionError(ExtractionError):
    """A per-model failure. The cascade records it and moves to the next model."""

    def __init__(self, model: str, reason: str) -> None:
        super().__init__(f"{model}: {reason}")
        self.model = model
        self.reason = reason


class RateLimitedError(SoftExtractionError):
    """The model answered HTTP 429."""


class ModelIncompatibleError(SoftExtractionError):
    """The model answered HTTP 400, usually because it rejects the request shape."""


class ModelTimeoutError(SoftExtractionError):
    """The call did not complete within the configured timeout."""


class MalformedResponseError(SoftExtractionError):
    """The model answered, but not with a JSON array of classes."""


class ExtractionServiceError(ExtractionError):
    """
    Unexpected extraction service failure (auth errors, outages, 5xx).

    Never absorbed by the cascade.
    """

    def __init__(self, message: str, status_code: t.Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code
