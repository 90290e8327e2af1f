"""Prompt templates shipped with the schedule parser."""
from functools import lru_cache
from pathlib import Path
import typing as t


PROMPTS_DIR = Path(__file__).resolve().parent


@lru_cache(maxsize=None)
def load_prompt(prompt_name: str, prompts_dir: t.Optional[str] = None) -> str:
    """
    Read ``<prompt_name>.txt`` from the prompts directory.

    Args:
        prompt_name: File name without the .txt extension.
        prompts_dir: Directory to read from instead of this package.

    Raises:
        FileNotFoundError: If the prompt file doesn't exist.
    """
    prompt_file = Path(prompts_dir or PROMPTS_DIR) / f"{prompt_name}.txt"
    if not prompt_file.is_file():
        raise FileNotFoundError(f"Prompt file not found: {prompt_file}")
    return prompt_file.read_text(encoding="utf-8").strip()
