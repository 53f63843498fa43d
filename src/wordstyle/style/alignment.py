from __future__ import annotations

from typing import Optional

from docx.enum.table import WD_TABLE_ALIGNMENT

from .abstract import AbstractStyle


class Alignment(AbstractStyle):
    """Horizontal justification of a table relative to the text margins."""

    START = "start"
    CENTER = "center"
    END = "end"
    LEFT = "left"
    RIGHT = "right"

    values = (START, CENTER, END, LEFT, RIGHT)

    _from_docx = {
        WD_TABLE_ALIGNMENT.LEFT: LEFT,
        WD_TABLE_ALIGNMENT.CENTER: CENTER,
        WD_TABLE_ALIGNMENT.RIGHT: RIGHT,
    }
    _to_docx = {
        START: WD_TABLE_ALIGNMENT.LEFT,
        LEFT: WD_TABLE_ALIGNMENT.LEFT,
        CENTER: WD_TABLE_ALIGNMENT.CENTER,
        END: WD_TABLE_ALIGNMENT.RIGHT,
        RIGHT: WD_TABLE_ALIGNMENT.RIGHT,
    }

    def __init__(self, style: dict = None, strict: bool = None):
        super().__init__(strict=strict)
        self._value: Optional[str] = None
        self.set_style_by_array(style)

    def get_value(self) -> Optional[str]:
        return self._value

    def set_value(self, value=None):
        if isinstance(value, WD_TABLE_ALIGNMENT):
            value = self._from_docx.get(value, value)
        self._value = self._set_enum_val("alignment", value, self.values, self._value)
        return self

    def to_docx(self) -> Optional[WD_TABLE_ALIGNMENT]:
        """Return the python-docx member matching the current value, if any."""
        if self._value is None:
            return None
        return self._to_docx[self._value]

    _style_setters = {
        **AbstractStyle._style_setters,
        "value": set_value,
        "alignment": set_value,
    }
