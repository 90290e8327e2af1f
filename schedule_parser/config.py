import os
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple


DEFAULT_MODELS: Tuple[str, ...] = ("gpt-4o", "gpt-4o-mini", "gpt-4.1-mini")
DEFAULT_TIMEOUT_SECONDS = 30.0


@dataclass(frozen=True)
class PipelineConfig:
    """Read-only settings injected into the pipeline at construction time."""
    api_key: Optional[str] = None
    models: Tuple[str, ...] = DEFAULT_MODELS
    request_timeout: float = DEFAULT_TIMEOUT_SECONDS
    base_url: Optional[str] = None

    @property
    def extraction_configured(self) -> bool:
        return bool(self.api_key)


def _split_models(raw: str) -> Tuple[str, ...]:
    return tuple(m.strip() for m in raw.split(",") if m.strip())


def load_config(
    api_key: Optional[str] = None,
    models: Optional[Sequence[str]] = None,
    request_timeout: Optional[float] = None,
    base_url: Optional[str] = None,
) -> PipelineConfig:
    env_models = os.getenv("SCHEDULE_PARSER_MODELS")
    if models is not None:
        model_list = tuple(m.strip() for m in models if m and m.strip())
    elif env_models is not None:
        model_list = _split_models(env_models)
    else:
        model_list = DEFAULT_MODELS

    if not model_list:
        raise ValueError("At least one extraction model must be configured")

    cfg = PipelineConfig(
        api_key=api_key or os.getenv("OPENAI_API_KEY") or None,
        models=model_list,
        request_timeout=float(
            request_timeout if request_timeout is not None
            else os.getenv("EXTRACTION_TIMEOUT_SECONDS", str(DEFAULT_TIMEOUT_SECONDS))
        ),
        base_url=base_url or os.getenv("OPENAI_BASE_URL") or None,
    )
    if cfg.request_timeout <= 0:
        raise ValueError("Extraction request timeout must be positive")
    return cfg
