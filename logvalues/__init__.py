"""logvalues: named message templates for structured logging."""

from logvalues.composite import CompositeFormatter, format_composite
from logvalues.errors import LogValuesError, TemplateFormatError, ValueIndexError
from logvalues.formatter import ORIGINAL_FORMAT_KEY, LogValue, LogValuesFormatter
from logvalues.renderer import NULL_VALUE
from logvalues.scanner import ParsedTemplate, parse_template
from logvalues.values import FormattedLogValues
from logvalues.version import __version__

__all__ = [
    "NULL_VALUE",
    "ORIGINAL_FORMAT_KEY",
    "CompositeFormatter",
    "FormattedLogValues",
    "LogValue",
    "LogValuesError",
    "LogValuesFormatter",
    "ParsedTemplate",
    "TemplateFormatError",
    "ValueIndexError",
    "__version__",
    "format_composite",
    "parse_template",
]
