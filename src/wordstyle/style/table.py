from __future__ import annotations

import copy
from enum import Enum
from typing import List, Mapping, Optional

from wordstyle.config import logger

from .abstract import AbstractStyle
from .alignment import Alignment
from .border import BorderMixin
from .shading import Shading


class TableWidth(str, Enum):
    """Units of ``TableStyle`` width."""

    AUTO = "auto"  # determined by the consumer, width is ignored
    PERCENT = "pct"  # fiftieths of a percent, 1% = 50
    TWIP = "dxa"  # twentieths of a point


class TableStyle(BorderMixin, AbstractStyle):
    """Borders, cell margins, shading, alignment and width of a table.

    A style may carry a first-row variant for the header row. It starts as a
    copy of the configured table style and is then configured on its own, but
    never holds cell margins, inside borders or a first row of its own.

    Args:
        table_style: Mapping of style keys (``"width"``, ``"bgColor"``, ...) to values
        first_row_style: Mapping applied on top of the table style for the first row
        strict: Raise ``StyleValueError`` on rejected values instead of ignoring them.
            Defaults to the ``WORDSTYLE_STRICT`` setting.
    """

    _border_sides = ("top", "left", "right", "bottom", "inside_h", "inside_v")
    units = tuple(unit.value for unit in TableWidth)

    def __init__(self, table_style: dict = None, first_row_style: dict = None, strict: bool = None):
        super().__init__(strict=strict)
        self._init_borders()
        self._first_row: Optional[TableStyle] = None
        self._cell_margin_top = None
        self._cell_margin_left = None
        self._cell_margin_right = None
        self._cell_margin_bottom = None
        self._shading: Optional[Shading] = None
        self._alignment = Alignment(strict=self.strict)
        self._width = 0
        self._unit = TableWidth.AUTO.value

        if isinstance(table_style, Mapping):
            self.set_style_by_array(table_style)

        if isinstance(first_row_style, Mapping):
            first_row = copy.deepcopy(self)
            first_row._strip_first_row_exclusions()
            first_row.set_style_by_array(first_row_style)
            # the bulk border setters also reach the inside borders
            first_row._strip_first_row_exclusions()
            self._first_row = first_row
            logger.debug(f"Derived first row style from {list(first_row_style)}")

    def _strip_first_row_exclusions(self):
        self._first_row = None
        self._cell_margin_top = None
        self._cell_margin_left = None
        self._cell_margin_right = None
        self._cell_margin_bottom = None
        for side in ("inside_h", "inside_v"):
            self._border_sizes[side] = None
            self._border_colors[side] = None

    def get_first_row(self) -> Optional[TableStyle]:
        return self._first_row

    def get_bg_color(self) -> Optional[str]:
        if self._shading is not None:
            return self._shading.get_fill()
        return None

    def set_bg_color(self, value=None):
        return self.set_shading({"fill": value})

    def get_border_inside_h_size(self):
        return self._get_side_size("inside_h")

    def set_border_inside_h_size(self, value=None):
        return self._set_side_size("inside_h", value)

    def get_border_inside_h_color(self):
        return self._get_side_color("inside_h")

    def set_border_inside_h_color(self, value=None):
        return self._set_side_color("inside_h", value)

    def get_border_inside_v_size(self):
        return self._get_side_size("inside_v")

    def set_border_inside_v_size(self, value=None):
        return self._set_side_size("inside_v", value)

    def get_border_inside_v_color(self):
        return self._get_side_color("inside_v")

    def set_border_inside_v_color(self, value=None):
        return self._set_side_color("inside_v", value)

    def get_cell_margin_top(self):
        return self._cell_margin_top

    def set_cell_margin_top(self, value=None):
        self._cell_margin_top = self._set_numeric_val("cell_margin_top", value, self._cell_margin_top)
        return self

    def get_cell_margin_left(self):
        return self._cell_margin_left

    def set_cell_margin_left(self, value=None):
        self._cell_margin_left = self._set_numeric_val("cell_margin_left", value, self._cell_margin_left)
        return self

    def get_cell_margin_right(self):
        return self._cell_margin_right

    def set_cell_margin_right(self, value=None):
        self._cell_margin_right = self._set_numeric_val("cell_margin_right", value, self._cell_margin_right)
        return self

    def get_cell_margin_bottom(self):
        return self._cell_margin_bottom

    def set_cell_margin_bottom(self, value=None):
        self._cell_margin_bottom = self._set_numeric_val("cell_margin_bottom", value, self._cell_margin_bottom)
        return self

    def get_cell_margin(self) -> List:
        return [self._cell_margin_top, self._cell_margin_left, self._cell_margin_right, self._cell_margin_bottom]

    def set_cell_margin(self, value=None):
        """Set top, left, right and bottom cell margin in twips."""
        self.set_cell_margin_top(value)
        self.set_cell_margin_left(value)
        self.set_cell_margin_right(value)
        self.set_cell_margin_bottom(value)
        return self

    def has_margin(self) -> bool:
        return any(margin is not None for margin in self.get_cell_margin())

    def get_shading(self) -> Optional[Shading]:
        return self._shading

    def set_shading(self, value=None):
        self._shading = self._set_object_val("shading", value, Shading, self._shading)
        return self

    def get_align(self) -> Optional[str]:
        return self._alignment.get_value()

    def set_align(self, value=None):
        self._alignment.set_value(value)
        return self

    def get_alignment(self) -> Alignment:
        return self._alignment

    def get_width(self):
        return self._width

    def set_width(self, value=None):
        self._width = self._set_numeric_val("width", value, self._width)
        return self

    def get_unit(self) -> str:
        return self._unit

    def set_unit(self, value=None):
        self._unit = self._set_enum_val("unit", value, self.units, self._unit)
        return self

    def as_dict(self) -> dict:
        """Snapshot of every attribute, keyed by its snake_case style key."""
        values = dict(
            style_name=self.style_name,
            width=self._width,
            unit=self._unit,
            align=self.get_align(),
            bg_color=self.get_bg_color(),
        )
        for side in self._border_sides:
            values[f"border_{side}_size"] = self._border_sizes[side]
            values[f"border_{side}_color"] = self._border_colors[side]
        values.update(
            cell_margin_top=self._cell_margin_top,
            cell_margin_left=self._cell_margin_left,
            cell_margin_right=self._cell_margin_right,
            cell_margin_bottom=self._cell_margin_bottom,
            shading=self._shading.as_dict() if self._shading is not None else None,
            first_row=self._first_row.as_dict() if self._first_row is not None else None,
        )
        return values

    def __repr__(self):
        return f"TableStyle(width={self._width!r}, unit={self._unit!r}, first_row={self._first_row is not None})"

    _style_setters = {
        **AbstractStyle._style_setters,
        **BorderMixin._border_setters,
        "border_inside_h_size": set_border_inside_h_size,
        "border_inside_h_color": set_border_inside_h_color,
        "border_inside_v_size": set_border_inside_v_size,
        "border_inside_v_color": set_border_inside_v_color,
        "cell_margin": set_cell_margin,
        "cell_margin_top": set_cell_margin_top,
        "cell_margin_left": set_cell_margin_left,
        "cell_margin_right": set_cell_margin_right,
        "cell_margin_bottom": set_cell_margin_bottom,
        "bg_color": set_bg_color,
        "shading": set_shading,
        "align": set_align,
        "alignment": set_align,
        "width": set_width,
        "unit": set_unit,
    }
