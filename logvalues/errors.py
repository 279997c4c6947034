"""
logvalues error types
"""

from typing import Optional


class LogValuesError(Exception):
    """Base class for all logvalues failures"""


class TemplateFormatError(LogValuesError, ValueError):
    """Raised when a canonical template cannot be rendered with the given arguments"""

    def __init__(self, msg: str, canonical: str, index: Optional[int] = None):
        self.msg = msg
        self.canonical = canonical
        self.index = index
        super().__init__(self.format_message())

    def format_message(self) -> str:
        return f"{self.msg} (template: {self.canonical!r})"


class ValueIndexError(LogValuesError, IndexError):
    """Raised when a structured value is requested outside the valid range"""

    def __init__(self, index: int, count: int, msg: Optional[str] = None):
        self.index = index
        self.count = count
        super().__init__(
            msg or f"index {index} is out of range; valid indices are 0..{count}"
        )
