from .abstract import AbstractStyle
from .alignment import Alignment
from .border import BorderMixin
from .shading import Shading
from .table import TableStyle, TableWidth

__all__ = ["AbstractStyle", "Alignment", "BorderMixin", "Shading", "TableStyle", "TableWidth"]
