"""Border capability shared by styles that draw borders."""
from __future__ import annotations

from typing import List, Optional


class BorderMixin:
    """Size and color per border side.

    Sizes are in eighths of a point and follow the numeric validation policy of
    ``AbstractStyle``; colors are stored verbatim. Classes widen
    ``_border_sides`` to style additional borders with the bulk setters.
    """

    _border_sides = ("top", "left", "right", "bottom")

    def _init_borders(self):
        self._border_sizes = dict.fromkeys(self._border_sides)
        self._border_colors = dict.fromkeys(self._border_sides)

    def _get_side_size(self, side: str):
        return self._border_sizes[side]

    def _set_side_size(self, side: str, value):
        self._border_sizes[side] = self._set_numeric_val(f"border_{side}_size", value, self._border_sizes[side])
        return self

    def _get_side_color(self, side: str) -> Optional[str]:
        return self._border_colors[side]

    def _set_side_color(self, side: str, value):
        self._border_colors[side] = value
        return self

    def get_border_size(self) -> List:
        return [self._border_sizes[side] for side in self._border_sides]

    def set_border_size(self, value=None):
        for side in self._border_sides:
            self._set_side_size(side, value)
        return self

    def get_border_color(self) -> List:
        return [self._border_colors[side] for side in self._border_sides]

    def set_border_color(self, value=None):
        for side in self._border_sides:
            self._set_side_color(side, value)
        return self

    def has_borders(self) -> bool:
        return any(size is not None for size in self.get_border_size())

    def get_border_top_size(self):
        return self._get_side_size("top")

    def set_border_top_size(self, value=None):
        return self._set_side_size("top", value)

    def get_border_left_size(self):
        return self._get_side_size("left")

    def set_border_left_size(self, value=None):
        return self._set_side_size("left", value)

    def get_border_right_size(self):
        return self._get_side_size("right")

    def set_border_right_size(self, value=None):
        return self._set_side_size("right", value)

    def get_border_bottom_size(self):
        return self._get_side_size("bottom")

    def set_border_bottom_size(self, value=None):
        return self._set_side_size("bottom", value)

    def get_border_top_color(self):
        return self._get_side_color("top")

    def set_border_top_color(self, value=None):
        return self._set_side_color("top", value)

    def get_border_left_color(self):
        return self._get_side_color("left")

    def set_border_left_color(self, value=None):
        return self._set_side_color("left", value)

    def get_border_right_color(self):
        return self._get_side_color("right")

    def set_border_right_color(self, value=None):
        return self._set_side_color("right", value)

    def get_border_bottom_color(self):
        return self._get_side_color("bottom")

    def set_border_bottom_color(self, value=None):
        return self._set_side_color("bottom", value)

    _border_setters = {
        "border_size": set_border_size,
        "border_color": set_border_color,
        "border_top_size": set_border_top_size,
        "border_left_size": set_border_left_size,
        "border_right_size": set_border_right_size,
        "border_bottom_size": set_border_bottom_size,
        "border_top_color": set_border_top_color,
        "border_left_color": set_border_left_color,
        "border_right_color": set_border_right_color,
        "border_bottom_color": set_border_bottom_color,
    }
