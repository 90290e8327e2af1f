import logging
import re
import sys
import typing as t

_OPENAI_KEY_RE = re.compile(r"\bsk-[A-Za-z0-9_-]{10,}\b")
_KEY_VALUE_RE = re.compile(
    r"(?i)\b(OPENAI_API_KEY|API_KEY|APIKEY|SECRET|PASSWORD|ACCESS_TOKEN)\s*[:=]\s*([^\s]+)"
)
_BEARER_RE = re.compile(r"(?i)\bBearer\s+([A-Za-z0-9._-]+)")

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def redact(text: str) -> str:
    redacted = _OPENAI_KEY_RE.sub("[REDACTED]", text)
    redacted = _KEY_VALUE_RE.sub(lambda match: f"{match.group(1)}=[REDACTED]", redacted)
    redacted = _BEARER_RE.sub("Bearer [REDACTED]", redacted)
    return redacted


class RedactingFormatter(logging.Formatter):
    def formatException(self, ei):
        return redact(super().formatException(ei))

    def formatStack(self, stack_info):
        return redact(super().formatStack(stack_info))


class RedactingFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        record.msg = redact(message)
        record.args = ()
        return True


def setup_logging(level: int = logging.INFO, stream: t.Optional[t.TextIO] = None) -> None:
    """
    Configures logging for the service and CLI.
    output: stdout unless another stream is given
    level: INFO by default
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    if any(isinstance(h.formatter, RedactingFormatter) for h in root_logger.handlers):
        return

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(RedactingFormatter(LOG_FORMAT))
    handler.addFilter(RedactingFilter())
    root_logger.addHandler(handler)

    # Request-level chatter from the HTTP stack
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("openai").setLevel(logging.WARNING)
