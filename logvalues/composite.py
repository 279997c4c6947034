"""
Composite positional formatting under a single invariant convention.

Renders items of the form ``{index[,alignment][:formatString]}``. Literal
braces are written ``{{`` and ``}}``. No locale setting is ever consulted.
"""

from __future__ import annotations

import re
import string
from decimal import Decimal
from typing import Any, Mapping, Optional, Sequence, Tuple

from logvalues.errors import TemplateFormatError

# Standard numeric format strings: a letter plus an optional precision
_STANDARD_NUMERIC = re.compile(r"^([DdXxNnFfEePpGgRr])(\d{1,2})?$")
_EXPONENT = re.compile(r"([eE])([+-])(\d+)$")
_FIELD = re.compile(r"^\s*(\d+)\s*(?:,\s*(-?\d+)\s*)?$", re.ASCII)

DEFAULT_DECIMALS = 2
DEFAULT_EXPONENT_DECIMALS = 6


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float, Decimal)) and not isinstance(value, bool)


def _pad_exponent(text: str) -> str:
    return _EXPONENT.sub(lambda m: f"{m.group(1)}{m.group(2)}{m.group(3).zfill(3)}", text)


def format_standard_numeric(value: Any, letter: str, precision: Optional[int]) -> str:
    """Format a number with a standard numeric format string such as ``N2``"""
    kind = letter.upper()

    if kind in ("D", "X"):
        if not isinstance(value, int):
            raise ValueError(f"format string '{letter}' requires an integer value")
        digits = format(abs(value), "d" if kind == "D" else letter)
        digits = digits.zfill(precision or 0)
        return f"-{digits}" if value < 0 else digits

    decimals = DEFAULT_DECIMALS if precision is None else precision
    if kind == "N":
        return format(value, f",.{decimals}f")
    if kind == "F":
        return format(value, f".{decimals}f")
    if kind == "P":
        return f"{format(value * 100, f',.{decimals}f')} %"
    if kind == "E":
        decimals = DEFAULT_EXPONENT_DECIMALS if precision is None else precision
        return _pad_exponent(format(value, f".{decimals}{letter}"))

    # G and R
    if precision:
        return format(value, f".{precision}{'G' if letter.isupper() else 'g'}")
    return str(value)


def accepts_format(value: Any) -> bool:
    """Text, booleans and types without their own ``__format__`` ignore format strings"""
    if isinstance(value, (str, bool)):
        return False
    return type(value).__format__ is not object.__format__


def format_invariant(value: Any, format_spec: str) -> str:
    """Render one value with the invariant convention"""
    if not format_spec or not accepts_format(value):
        return str(value)
    if _is_number(value):
        match = _STANDARD_NUMERIC.match(format_spec)
        if match:
            precision = int(match.group(2)) if match.group(2) else None
            return format_standard_numeric(value, match.group(1), precision)
    return format(value, format_spec)


def _split_field(field_name: str, canonical: str) -> Tuple[int, int]:
    match = _FIELD.match(field_name)
    if match is None:
        raise TemplateFormatError(f"Invalid format item '{{{field_name}}}'", canonical)
    alignment = match.group(2)
    return int(match.group(1)), int(alignment) if alignment else 0


def align(text: str, alignment: int) -> str:
    """Pad ``text``: positive alignment right-aligns, negative left-aligns"""
    if alignment > 0:
        return text.rjust(alignment)
    if alignment < 0:
        return text.ljust(-alignment)
    return text


class CompositeFormatter(string.Formatter):
    """``string.Formatter`` speaking composite ``{index,alignment:format}`` items"""

    def vformat(
        self,
        format_string: str,
        args: Sequence[Any],
        kwargs: Mapping[str, Any],
    ) -> str:
        result = []
        try:
            items = list(self.parse(format_string))
        except ValueError as exc:
            raise TemplateFormatError(str(exc), format_string) from exc

        for literal_text, field_name, format_spec, conversion in items:
            if literal_text:
                result.append(literal_text)
            if field_name is None:
                continue
            if conversion is not None:
                raise TemplateFormatError(
                    f"Conversion '!{conversion}' is not supported", format_string
                )
            if "{" in (format_spec or ""):
                raise TemplateFormatError(
                    "Nested format items are not supported", format_string
                )

            index, alignment = _split_field(field_name, format_string)
            value = self.get_value(index, args, kwargs, format_string)
            try:
                text = self.format_field(value, format_spec or "")
            except (ValueError, TypeError) as exc:
                raise TemplateFormatError(
                    f"Cannot format argument {index} with '{format_spec}': {exc}",
                    format_string,
                    index,
                ) from exc
            result.append(align(text, alignment))

        return "".join(result)

    def get_value(self, key, args, kwargs, format_string: str = ""):
        if key >= len(args):
            raise TemplateFormatError(
                f"Index (zero based) {key} is out of range for {len(args)} argument(s)",
                format_string,
                key,
            )
        return args[key]

    def format_field(self, value: Any, format_spec: str) -> str:
        return format_invariant(value, format_spec)


invariant_formatter = CompositeFormatter()


def format_composite(format_string: str, args: Sequence[Any]) -> str:
    """Render ``format_string`` against positional ``args``"""
    return invariant_formatter.vformat(format_string, args, {})


__all__ = [
    "CompositeFormatter",
    "accepts_format",
    "align",
    "format_composite",
    "format_invariant",
    "format_standard_numeric",
    "invariant_formatter",
]
