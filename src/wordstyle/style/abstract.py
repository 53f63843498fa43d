"""Shared behaviour of all style objects.

Styles are configured either through their fluent ``set_*`` methods or in bulk
from a mapping (``set_style_by_array``). Bulk configuration only reaches the
setters a class lists in its ``_style_setters`` table; any other key is logged
and ignored so that newer producers can pass options older styles do not know.
"""
from __future__ import annotations

import math
import re
from enum import Enum
from typing import Any, Callable, Dict, Mapping, Optional, Sequence

from wordstyle.config import get_settings, logger
from wordstyle.exceptions import StyleValueError

_CAMEL_RE = re.compile(r"(?<!^)(?=[A-Z])")


def normalize_key(key) -> str:
    """Convert ``borderInsideHSize`` style keys to ``border_inside_h_size``."""
    return _CAMEL_RE.sub("_", str(key).strip()).lower()


def to_number(value) -> Optional[float]:
    """Return ``value`` as an int or float, or None when it is not numeric."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            pass
        try:
            number = float(text)
        except ValueError:
            return None
        return number if math.isfinite(number) else None
    return None


class AbstractStyle:
    def __init__(self, strict: bool = None):
        self.style_name: Optional[str] = None
        self.strict = get_settings().strict if strict is None else strict

    def set_style_name(self, value: str = None):
        self.style_name = value
        return self

    def set_style_by_array(self, values: Mapping[str, Any] = None):
        if values is None:
            return self

        for key, value in values.items():
            self.set_style_value(key, value)

        return self

    def set_style_value(self, key: str, value):
        setter = self._style_setters.get(normalize_key(key))
        if setter is None:
            logger.debug(f'{type(self).__name__}: ignoring unknown style key "{key}"')
            return self

        setter(self, value)
        return self

    def _reject(self, key: str, value, reason: str = "invalid value"):
        if self.strict:
            raise StyleValueError(key, value, reason)
        logger.debug(f'{type(self).__name__}: {reason} for "{key}": {value!r}, keeping previous value')

    def _set_numeric_val(self, key: str, value, default):
        if value is None:
            return default

        number = to_number(value)
        if number is None:
            self._reject(key, value, "non-numeric value")
            return default

        return number

    def _set_enum_val(self, key: str, value, enum: Sequence[str], default):
        if isinstance(value, Enum):
            value = value.value
        if value is None or (isinstance(value, str) and value.strip() == ""):
            return default

        if value not in enum:
            self._reject(key, value, f"expected one of {list(enum)}")
            return default

        return value

    def _set_object_val(self, key: str, value, style_cls, current):
        """Merge ``value`` into the owned sub-style, creating it on first use."""
        if value is None:
            return current
        if isinstance(value, style_cls):
            return value
        if isinstance(value, Mapping):
            if current is None:
                return style_cls(value, strict=self.strict)
            return current.set_style_by_array(value)

        self._reject(key, value, f"expected a mapping or {style_cls.__name__}")
        return current

    _style_setters: Dict[str, Callable[[Any, Any], Any]] = {"style_name": set_style_name}
