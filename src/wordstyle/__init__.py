from .exceptions import StyleValueError
from .style import Alignment, Shading, TableStyle, TableWidth

__all__ = ["Alignment", "Shading", "StyleValueError", "TableStyle", "TableWidth"]
