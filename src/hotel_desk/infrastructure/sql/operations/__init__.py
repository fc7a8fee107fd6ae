"""Statement builders per SQL operation."""

from .insert import Dialect, InsertBuilder
from .select import SelectBuilder

__all__ = ["Dialect", "InsertBuilder", "SelectBuilder"]
