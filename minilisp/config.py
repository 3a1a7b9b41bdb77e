from __future__ import annotations
import os

# Defaults
_DEFAULT_PROMPT = 'minilisp> '


def get_prompt() -> str:
    return os.environ.get('MINILISP_PROMPT', _DEFAULT_PROMPT)


def get_log_level() -> str | None:
    """Level for the `minilisp` logger, or None to leave library logging disabled."""
    raw = os.environ.get('MINILISP_LOG_LEVEL')
    if not raw or not raw.strip():
        return None
    return raw.strip().upper()
