"""
Ordered model fallback.

Models are tried strictly one at a time in configured order; the first one
whose output parses into a JSON array wins. Soft failures move on to the next
model without retry or backoff. Hard failures propagate immediately.
"""
from __future__ import annotations

import logging
import typing as t

from .errors import SoftExtractionError
from .extraction import ExtractionService
from .models import CascadeOutcome, ScheduleUpload
from .normalizer import parse_model_output


logger = logging.getLogger(__name__)


class ModelCascade:
    def __init__(self, service: ExtractionService, models: t.Sequence[str]) -> None:
        if not models:
            raise ValueError("ModelCascade needs at least one model")
        self.service = service
        self.models = tuple(models)

    def run(self, upload: ScheduleUpload) -> t.Optional[CascadeOutcome]:
        """
        Try each model in order.

        Returns:
            The first successful outcome, or None when every model failed softly.

        Raises:
            ExtractionServiceError: On an unexpected service failure; remaining
                models are not tried.
        """
        failures: list[tuple[str, str]] = []
        for model in self.models:
            try:
                raw = self.service.extract(model, upload)
                classes = parse_model_output(raw, model)
            except SoftExtractionError as exc:
                logger.warning("Model %s failed for %s: %s", model, upload.file_name, exc.reason)
                failures.append((model, exc.reason))
                continue

            logger.info("Model %s extracted %d classes from %s", model, len(classes), upload.file_name)
            return CascadeOutcome(classes=classes, model=model, failures=failures)

        return None
