"""README dialect parsers."""

from .base import DialectParser
from .flat import FlatHeadingParser
from .nested import NestedHeadingParser
from .numbered import NumberedBlockParser

__all__ = ["DialectParser", "FlatHeadingParser", "NestedHeadingParser", "NumberedBlockParser"]
