"""
OpenAI-backed extraction service.

One call per model; responses are classified into the pipeline's error
taxonomy so the cascade never has to know about OpenAI exception types.
"""
from __future__ import annotations

import logging
import typing as t

import openai
from openai import OpenAI

from prompts import load_prompt
from .config import PipelineConfig
from .errors import (
    ExtractionServiceError,
    MalformedResponseError,
    ModelIncompatibleError,
    ModelTimeoutError,
    RateLimitedError,
)
from .models import ScheduleUpload


logger = logging.getLogger(__name__)

# The field list in this prompt must stay in sync with normalizer.normalize_record.
SYSTEM_PROMPT = load_prompt("schedule_parser_system_prompt")

TEXT_INSTRUCTION = "Parse this schedule and return a JSON array of classes:"
PDF_INSTRUCTION = "Parse the attached schedule PDF and return a JSON array of classes."
TEMPERATURE = 0.3


class ExtractionService(t.Protocol):
    def extract(self, model: str, upload: ScheduleUpload) -> str:
        """Return the raw text produced by ``model`` for ``upload``."""
        ...


def build_messages(upload: ScheduleUpload, system_prompt: str = SYSTEM_PROMPT) -> list[dict[str, t.Any]]:
    """Chat messages for one extraction attempt: PDF inline if present, else raw text."""
    user_content: t.Union[str, list[dict[str, t.Any]]]
    if upload.has_pdf:
        user_content = [
            {"type": "text", "text": PDF_INSTRUCTION},
            {
                "type": "file",
                "file": {
                    "filename": upload.file_name,
                    "file_data": f"data:application/pdf;base64,{upload.file_base64}",
                },
            },
        ]
    else:
        user_content = f"{TEXT_INSTRUCTION}\n\n{upload.file_content}"

    return [
        {"role": "system", "content": system_prompt},
        {"role": "user", "content": user_content},
    ]


class OpenAIExtractionService:
    """Calls the chat completions API once per ``extract`` call, without retries."""

    def __init__(self, config: PipelineConfig, client: t.Optional[OpenAI] = None) -> None:
        self._timeout = config.request_timeout
        self._client = client or OpenAI(
            api_key=config.api_key,
            base_url=config.base_url,
            timeout=config.request_timeout,
            max_retries=0,
        )

    def extract(self, model: str, upload: ScheduleUpload) -> str:
        try:
            completion = self._client.chat.completions.create(
                model=model,
                messages=build_messages(upload),
                temperature=TEMPERATURE,
            )
        except openai.RateLimitError as exc:
            raise RateLimitedError(model, "rate limited (HTTP 429)") from exc
        except openai.BadRequestError as exc:
            raise ModelIncompatibleError(model, f"bad request (HTTP 400): {exc.message}") from exc
        except openai.APIStatusError as exc:
            logger.error("Extraction service error for %s: %s %s", model, exc.status_code, exc.message)
            raise ExtractionServiceError(
                f"Extraction service error: HTTP {exc.status_code}",
                status_code=exc.status_code,
            ) from exc
        except openai.APITimeoutError as exc:
            raise ModelTimeoutError(model, f"timed out after {self._timeout:g}s") from exc
        except openai.APIConnectionError as exc:
            logger.error("Could not reach extraction service: %s", exc)
            raise ExtractionServiceError("Could not reach extraction service") from exc

        if not completion.choices:
            raise MalformedResponseError(model, "response has no choices")
        content = completion.choices[0].message.content
        if not content:
            raise MalformedResponseError(model, "empty response")
        return content
