"""
Argument pre-processing and rendering of canonical templates.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, List, Optional, Sequence

from logvalues.composite import format_composite

NULL_VALUE = "(null)"
TEXT_TYPES = (str, bytes, bytearray)


def _element_text(value: Any) -> str:
    return NULL_VALUE if value is None else str(value)


def flatten_value(value: Any) -> Any:
    """Replace nulls and collections with their display text"""
    if value is None:
        return NULL_VALUE

    # text is iterable but is never treated as a collection
    if isinstance(value, TEXT_TYPES):
        return value

    if isinstance(value, Mapping):
        return ", ".join(
            f"[{_element_text(key)}, {_element_text(item)}]" for key, item in value.items()
        )

    if isinstance(value, Iterable):
        return ", ".join(_element_text(item) for item in value)

    return value


def prepare_arguments(values: Optional[Sequence[Any]]) -> List[Any]:
    """Return a pre-processed copy of ``values``; ``None`` means no arguments"""
    if values is None:
        return []
    return [flatten_value(value) for value in values]


def render(canonical: str, values: Optional[Sequence[Any]]) -> str:
    """Render a canonical template against the positional ``values``"""
    return format_composite(canonical, prepare_arguments(values))


__all__ = ["NULL_VALUE", "TEXT_TYPES", "flatten_value", "prepare_arguments", "render"]
