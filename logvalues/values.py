"""
Message template bundled with its arguments.

``FormattedLogValues`` is a read-only sequence of ``LogValue`` pairs whose
``str()`` is the rendered message, so it can be handed to the standard
``logging`` module as a message object:

    logger.info(FormattedLogValues("User {UserId} logged in", 42))
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Dict, Optional

from logvalues.formatter import ORIGINAL_FORMAT_KEY, LogValue, LogValuesFormatter

NULL_FORMAT = "[null]"


class FormattedLogValues(Sequence):
    """Structured view of one log message and its arguments"""

    def __init__(self, format: Optional[str], *values: Any):
        self._formatter = LogValuesFormatter(format) if format is not None else None
        self._values = values
        self._message: Optional[str] = None

    @property
    def formatter(self) -> Optional[LogValuesFormatter]:
        return self._formatter

    @property
    def values(self) -> tuple:
        return self._values

    def __len__(self) -> int:
        if self._formatter is None:
            return 1
        return len(self._formatter.value_names) + 1

    def __getitem__(self, index):
        if isinstance(index, slice):
            return [self[i] for i in range(*index.indices(len(self)))]
        if index < 0:
            index += len(self)
        if self._formatter is None:
            if index != 0:
                raise IndexError(index)
            return LogValue(ORIGINAL_FORMAT_KEY, NULL_FORMAT)
        return self._formatter.get_value(self._values, index)

    def __iter__(self):
        for index in range(len(self)):
            yield self[index]

    def as_dict(self) -> Dict[str, Any]:
        """Pairs keyed by name; a repeated name keeps its last value"""
        return {pair.name: pair.value for pair in self}

    def __str__(self) -> str:
        if self._message is None:
            if self._formatter is None:
                self._message = NULL_FORMAT
            else:
                self._message = self._formatter.format(self._values)
        return self._message

    def __repr__(self) -> str:
        template = self._formatter.original_format if self._formatter else None
        return f"FormattedLogValues({template!r}, *{self._values!r})"


__all__ = ["NULL_FORMAT", "FormattedLogValues"]
