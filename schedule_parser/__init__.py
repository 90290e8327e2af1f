"""Turns uploaded schedule documents into normalized class sessions."""
from .config import PipelineConfig, load_config
from .errors import ExtractionServiceError, InputValidationError, ScheduleParseError
from .models import ParsedClass, ParseResult
from .pipeline import SchedulePipeline, parse_schedule

__all__ = [
    "ExtractionServiceError",
    "InputValidationError",
    "ParseResult",
    "ParsedClass",
    "PipelineConfig",
    "ScheduleParseError",
    "SchedulePipeline",
    "load_config",
    "parse_schedule",
]
