"""
Schedule ingestion pipeline: validate → model cascade → heuristic fallback.

The pipeline always returns a result for well-formed input. When no model is
configured or every model fails, the heuristic parser supplies a lower
quality result and ``warnings`` says so. Only invalid input and unexpected
extraction service failures raise.
"""
from __future__ import annotations

import logging
import typing as t

from .cascade import ModelCascade
from .config import PipelineConfig, load_config
from .extraction import ExtractionService, OpenAIExtractionService
from .file_utils import pdf_text_from_base64
from .heuristic import parse_heuristically
from .models import ParseResult, ScheduleUpload
from .sink import ClassSink, import_classes
from .validation import require_valid_upload


logger = logging.getLogger(__name__)

NOT_CONFIGURED_WARNING = "AI extraction is not configured; used the heuristic parser (reduced accuracy)"
DEGRADED_WARNING = "All AI models failed; used the heuristic parser (reduced accuracy)"


def success_warning(model: str) -> str:
    return f"Parsed with model {model}"


class SchedulePipeline:
    def __init__(
        self,
        config: PipelineConfig,
        extraction_service: t.Optional[ExtractionService] = None,
        sink: t.Optional[ClassSink] = None,
    ) -> None:
        self.config = config
        self.sink = sink
        self._cascade: t.Optional[ModelCascade] = None
        if config.extraction_configured:
            service = extraction_service or OpenAIExtractionService(config)
            self._cascade = ModelCascade(service, config.models)

    def parse_schedule(self, raw_input: t.Any) -> ParseResult:
        """
        Parse one uploaded schedule.

        Args:
            raw_input: Request body with fileContent, fileName and optionally
                fileType and fileBase64.

        Returns:
            ParseResult with the extracted classes and a warning naming the
            strategy that produced them.

        Raises:
            InputValidationError: If the request is malformed.
            ExtractionServiceError: If the extraction service failed unexpectedly.
        """
        upload = require_valid_upload(raw_input)
        logger.info("Parsing schedule file: %s", upload.file_name)

        if self._cascade is None:
            logger.warning("No extraction credential configured, using heuristic parser")
            return self._fallback(upload, NOT_CONFIGURED_WARNING)

        outcome = self._cascade.run(upload)
        if outcome is None:
            logger.warning("All %d models failed for %s, using heuristic parser",
                           len(self._cascade.models), upload.file_name)
            return self._fallback(upload, DEGRADED_WARNING)

        return ParseResult(classes=outcome.classes, warnings=[success_warning(outcome.model)])

    def import_schedule(self, raw_input: t.Any, schedule_id: str) -> ParseResult:
        """Parse and forward the resulting classes to the configured sink."""
        if self.sink is None:
            raise RuntimeError("SchedulePipeline has no sink configured")
        result = self.parse_schedule(raw_input)
        import_classes(self.sink, schedule_id, result.classes)
        return result

    def _fallback(self, upload: ScheduleUpload, warning: str) -> ParseResult:
        text = upload.file_content
        if not text.strip() and upload.has_pdf:
            text = pdf_text_from_base64(upload.file_base64 or "")
        classes = parse_heuristically(text)
        logger.info("Heuristic parser found %d classes in %s", len(classes), upload.file_name)
        return ParseResult(classes=classes, warnings=[warning])


def parse_schedule(raw_input: t.Any, config: t.Optional[PipelineConfig] = None) -> ParseResult:
    """Parse one upload with a pipeline built from ``config`` or the environment."""
    return SchedulePipeline(config or load_config()).parse_schedule(raw_input)
