"""
Request validation for schedule uploads.

Everything here runs before any extraction call, so oversized or malformed
uploads never reach the AI service. Anything that does not clearly match the
expected shape is rejected.
"""
from __future__ import annotations

import typing as t
from collections.abc import Mapping
import unicodedata

from .errors import InputValidationError
from .models import PDF_MIME_TYPE, ScheduleUpload, ValidationResult


MAX_CONTENT_BYTES = 1024 * 1024
MAX_FILE_NAME_LENGTH = 255
FORBIDDEN_FILE_NAME_CHARS = frozenset('<>:"/\\|?*')


def _invalid(error: str) -> ValidationResult:
    return ValidationResult(valid=False, error=error)


def _file_name_error(file_name: t.Any) -> t.Optional[str]:
    if file_name is None:
        return "fileName is required"
    if not isinstance(file_name, str):
        return "fileName must be a string"
    if not file_name:
        return "fileName must not be empty"
    if len(file_name) > MAX_FILE_NAME_LENGTH:
        return f"fileName must be at most {MAX_FILE_NAME_LENGTH} characters"
    for ch in file_name:
        if unicodedata.category(ch) == "Cc":
            return "fileName must not contain control characters"
        if ch in FORBIDDEN_FILE_NAME_CHARS:
            return f"fileName contains a forbidden character: {ch!r}"
    return None


def validate_upload(payload: t.Any) -> ValidationResult:
    """
    Validate a raw upload request body.

    Args:
        payload: Mapping with ``fileContent``, ``fileName`` and optionally
            ``fileType`` and ``fileBase64``.

    Returns:
        A ValidationResult carrying either the normalized ScheduleUpload or a
        human-readable error.
    """
    if not isinstance(payload, Mapping):
        return _invalid("Request body must be a JSON object")

    file_content = payload.get("fileContent")
    if file_content is None:
        return _invalid("fileContent is required")
    if not isinstance(file_content, str):
        return _invalid("fileContent must be a string")
    if len(file_content.encode("utf-8", errors="surrogatepass")) > MAX_CONTENT_BYTES:
        return _invalid(f"fileContent exceeds the {MAX_CONTENT_BYTES} byte size limit")

    name_error = _file_name_error(payload.get("fileName"))
    if name_error:
        return _invalid(name_error)

    file_type = payload.get("fileType")
    if file_type is not None and not isinstance(file_type, str):
        return _invalid("fileType must be a string")

    # PDF payload size is left to the extraction service's own limits.
    file_base64 = payload.get("fileBase64")
    if file_base64 is not None:
        if not isinstance(file_base64, str):
            return _invalid("fileBase64 must be a string")
        if file_type != PDF_MIME_TYPE:
            return _invalid(f"fileBase64 is only accepted with fileType {PDF_MIME_TYPE}")

    return ValidationResult(
        valid=True,
        upload=ScheduleUpload(
            file_content=file_content,
            file_name=payload["fileName"],
            file_type=file_type or None,
            file_base64=file_base64 or None,
        ),
    )


def require_valid_upload(payload: t.Any) -> ScheduleUpload:
    """Like validate_upload, but raises InputValidationError on rejection."""
    result = validate_upload(payload)
    if not result.valid or result.upload is None:
        raise InputValidationError(result.error or "Invalid request")
    return result.upload
