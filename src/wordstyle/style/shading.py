from __future__ import annotations

from typing import Optional

from docx.shared import RGBColor

from .abstract import AbstractStyle


def _color_value(value):
    if isinstance(value, RGBColor):
        return str(value)
    return value


class Shading(AbstractStyle):
    """Background fill of a table, row or cell.

    ``fill`` is the background color, ``color`` the color of the pattern drawn
    over it. Colors are hex strings such as ``"FF0000"``, ``"auto"``, or
    python-docx ``RGBColor`` values.
    """

    PATTERN_CLEAR = "clear"
    PATTERN_SOLID = "solid"
    PATTERN_HSTRIPE = "horzStripe"
    PATTERN_VSTRIPE = "vertStripe"
    PATTERN_DSTRIPE = "diagStripe"
    PATTERN_REVERSE_DSTRIPE = "reverseDiagStripe"
    PATTERN_HCROSS = "horzCross"
    PATTERN_DCROSS = "diagCross"

    patterns = (
        PATTERN_CLEAR,
        PATTERN_SOLID,
        PATTERN_HSTRIPE,
        PATTERN_VSTRIPE,
        PATTERN_DSTRIPE,
        PATTERN_REVERSE_DSTRIPE,
        PATTERN_HCROSS,
        PATTERN_DCROSS,
    )

    def __init__(self, style: dict = None, strict: bool = None):
        super().__init__(strict=strict)
        self._pattern = self.PATTERN_CLEAR
        self._color: Optional[str] = None
        self._fill: Optional[str] = None
        self.set_style_by_array(style)

    def get_pattern(self) -> str:
        return self._pattern

    def set_pattern(self, value=None):
        self._pattern = self._set_enum_val("pattern", value, self.patterns, self._pattern)
        return self

    def get_color(self) -> Optional[str]:
        return self._color

    def set_color(self, value=None):
        self._color = _color_value(value)
        return self

    def get_fill(self) -> Optional[str]:
        return self._fill

    def set_fill(self, value=None):
        self._fill = _color_value(value)
        return self

    def as_dict(self) -> dict:
        return dict(pattern=self._pattern, color=self._color, fill=self._fill)

    _style_setters = {
        **AbstractStyle._style_setters,
        "pattern": set_pattern,
        "color": set_color,
        "fill": set_fill,
    }
