from __future__ import annotations

import logging
import os
from functools import lru_cache
from typing import Optional

from pydantic import BaseModel, field_validator

DEFAULT_LOG_LEVEL = "INFO"


class StyleSettings(BaseModel):
    """Package wide settings, read from WORDSTYLE_* environment variables."""

    strict: bool = False
    log_level: str = DEFAULT_LOG_LEVEL

    model_config = {"frozen": True}

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        value = value.strip().upper()
        # getLevelName returns an int only for registered level names
        if not isinstance(logging.getLevelName(value), int):
            return DEFAULT_LOG_LEVEL
        return value

    @classmethod
    def from_env(cls) -> StyleSettings:
        strict = os.getenv("WORDSTYLE_STRICT", "false").lower() in ("true", "1", "yes")
        return cls(strict=strict, log_level=os.getenv("WORDSTYLE_LOG_LEVEL", DEFAULT_LOG_LEVEL))


@lru_cache(maxsize=1)
def get_settings() -> StyleSettings:
    return StyleSettings.from_env()


def create_logger(name: str = "wordstyle", level: Optional[str] = None, stream: bool = False) -> logging.Logger:
    """Return the package logger.

    Library use only gets a ``NullHandler``; applications such as the CLI pass
    ``stream=True`` to print records to stderr.
    """
    log = logging.getLogger(name)
    if level is None:
        level = get_settings().log_level
    log.setLevel(StyleSettings(log_level=level).log_level)

    if stream:
        if not any(type(h) is logging.StreamHandler for h in log.handlers):
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"))
            log.addHandler(handler)
    elif not log.handlers:
        log.addHandler(logging.NullHandler())

    return log


logger = create_logger()
