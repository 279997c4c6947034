"""
Formatter converting named format items like ``{UserId}`` to positional ones.

One instance wraps one template. The template is parsed lazily, exactly once,
on first use of ``value_names``, ``format``, ``get_value`` or ``get_values``.
"""

from __future__ import annotations

import threading
from typing import Any, List, NamedTuple, Optional, Sequence, Tuple

from logvalues.errors import ValueIndexError
from logvalues.renderer import render
from logvalues.scanner import MIN_PLACEHOLDER_LENGTH, ParsedTemplate, parse_template

ORIGINAL_FORMAT_KEY = "{OriginalFormat}"


class LogValue(NamedTuple):
    """A structured value: placeholder name and its argument"""

    name: str
    value: Any


class LogValuesFormatter:
    """Renders a message template and extracts its named values"""

    def __init__(self, format: str):
        self._original_format = format
        self._parsed: Optional[ParsedTemplate] = None
        self._parse_lock = threading.Lock()

    def __repr__(self) -> str:
        return f"LogValuesFormatter({self._original_format!r})"

    @property
    def original_format(self) -> str:
        return self._original_format

    @property
    def parsed(self) -> ParsedTemplate:
        """The memoized parse result"""
        parsed = self._parsed
        if parsed is None:
            with self._parse_lock:
                if self._parsed is None:
                    self._parsed = parse_template(self._original_format)
                parsed = self._parsed
        return parsed

    @property
    def value_names(self) -> Tuple[str, ...]:
        return self.parsed.names

    def format(self, values: Optional[Sequence[Any]] = None) -> str:
        """Render the template with positional ``values``.

        ``None`` values render as ``(null)`` and collections as their
        comma-separated elements. Raises ``TemplateFormatError`` when the
        template references an argument that was not supplied.
        """
        if len(self._original_format) < MIN_PLACEHOLDER_LENGTH:
            return self._original_format
        return render(self.parsed.canonical, values)

    def get_value(self, values: Optional[Sequence[Any]], index: int) -> LogValue:
        """Return the named value at ``index``.

        ``index == len(value_names)`` yields the ``{OriginalFormat}`` pair
        carrying the unparsed template.
        """
        names = self.value_names
        if index < 0 or index > len(names):
            raise ValueIndexError(index, len(names))

        if index < len(names):
            return LogValue(names[index], _argument(values, index, len(names)))

        return LogValue(ORIGINAL_FORMAT_KEY, self._original_format)

    def get_values(self, values: Optional[Sequence[Any]]) -> List[LogValue]:
        """Return every named value followed by the ``{OriginalFormat}`` pair"""
        names = self.value_names
        pairs = [
            LogValue(name, _argument(values, index, len(names)))
            for index, name in enumerate(names)
        ]
        pairs.append(LogValue(ORIGINAL_FORMAT_KEY, self._original_format))
        return pairs


def _argument(values: Optional[Sequence[Any]], index: int, count: int) -> Any:
    if values is None or index >= len(values):
        supplied = 0 if values is None else len(values)
        raise ValueIndexError(
            index,
            count,
            f"no argument supplied for placeholder {index} ({supplied} argument(s) given)",
        )
    return values[index]


__all__ = ["ORIGINAL_FORMAT_KEY", "LogValue", "LogValuesFormatter"]
