"""
This module defines all logvalues features using a unified registry system.
The CLI dispatches through it, so it is the single source of truth for what
each command does.
"""

from typing import (
    Any,
    Callable,
    Dict,
    Generic,
    List,
    Optional,
    Sequence,
    TypeVar,
)
from dataclasses import dataclass
import logging

from pydantic import BaseModel, Field

from logvalues.errors import LogValuesError
from logvalues.formatter import LogValuesFormatter

logger = logging.getLogger("logvalues.features")

T = TypeVar("T")


class OperationResult(Generic[T]):
    """Wrapper for operation results with success/error handling"""

    def __init__(
        self, success: bool, data: Optional[T] = None, error: Optional[str] = None
    ):
        self.success = success
        self.data = data
        self.error = error

    @classmethod
    def ok(cls, data: Optional[T] = None) -> "OperationResult[T]":
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error: str) -> "OperationResult[T]":
        return cls(success=False, error=error)


@dataclass
class Feature:
    """A named operation exposed on the command line"""

    name: str
    description: str
    handler: Callable
    cli_options: Optional[Dict[str, Any]] = None


class FeatureRegistry:
    """Registry for all logvalues features"""

    _features: Dict[str, Feature] = {}

    @classmethod
    def register(cls, feature: Feature) -> Feature:
        """Register a new feature"""
        cls._features[feature.name] = feature
        return feature

    @classmethod
    def get_feature(cls, name: str) -> Optional[Feature]:
        """Get a feature by name"""
        return cls._features.get(name)

    @classmethod
    def get_all_features(cls) -> Dict[str, Feature]:
        """Get all registered features"""
        return cls._features.copy()


# ----------------- Report Models -----------------


class TemplateRequest(BaseModel):
    template: str
    values: List[Any] = Field(default_factory=list)


class TemplateReport(BaseModel):
    """Parse result of one template"""

    template: str
    canonical: str
    names: List[str]


class NamedValue(BaseModel):
    name: str
    value: Any = None


class ValuesReport(BaseModel):
    template: str
    values: List[NamedValue]


# ----------------- Feature Handlers -----------------


def handle_version(**kwargs) -> OperationResult[Dict[str, str]]:
    """Handle version request"""
    from logvalues.version import get_version

    return OperationResult[Dict[str, str]](
        success=True, data={"version": get_version()}
    )


def handle_parse(template: str, **kwargs) -> OperationResult[Dict[str, Any]]:
    """Parse a template into its canonical form and placeholder names"""
    request = TemplateRequest(template=template)
    formatter = LogValuesFormatter(request.template)
    report = TemplateReport(
        template=formatter.original_format,
        canonical=formatter.parsed.canonical,
        names=list(formatter.value_names),
    )
    logger.debug("Parsed %d placeholder(s)", len(report.names))
    return OperationResult.ok(report.model_dump())


def handle_format(
    template: str, values: Optional[Sequence[Any]] = None, **kwargs
) -> OperationResult[Dict[str, Any]]:
    """Render a template with positional values"""
    request = TemplateRequest(template=template, values=list(values or []))
    try:
        message = LogValuesFormatter(request.template).format(request.values)
    except LogValuesError as e:
        logger.debug("Rendering failed: %s", e)
        return OperationResult.fail(str(e))
    return OperationResult.ok({"template": request.template, "message": message})


def handle_values(
    template: str, values: Optional[Sequence[Any]] = None, **kwargs
) -> OperationResult[Dict[str, Any]]:
    """Extract the named values of a template"""
    request = TemplateRequest(template=template, values=list(values or []))
    try:
        pairs = LogValuesFormatter(request.template).get_values(request.values)
    except LogValuesError as e:
        logger.debug("Value extraction failed: %s", e)
        return OperationResult.fail(str(e))
    report = ValuesReport(
        template=request.template,
        values=[NamedValue(name=pair.name, value=pair.value) for pair in pairs],
    )
    return OperationResult.ok(report.model_dump())


# ----------------- Feature Registration -----------------

_VALUE_OPTIONS = {
    "template": {
        "type": str,
        "required": True,
        "help": "Message template, e.g. 'User {UserId} logged in'",
    },
    "values": {
        "type": list,
        "required": False,
        "help": "Positional argument values",
    },
}

version_feature = FeatureRegistry.register(
    Feature(
        name="version",
        description="Get the logvalues version",
        handler=handle_version,
    )
)

parse_feature = FeatureRegistry.register(
    Feature(
        name="parse",
        description="Show the canonical form and placeholder names of a template",
        handler=handle_parse,
        cli_options={"template": _VALUE_OPTIONS["template"]},
    )
)

format_feature = FeatureRegistry.register(
    Feature(
        name="format",
        description="Render a template with positional values",
        handler=handle_format,
        cli_options=_VALUE_OPTIONS,
    )
)

values_feature = FeatureRegistry.register(
    Feature(
        name="values",
        description="Extract the named values of a template",
        handler=handle_values,
        cli_options=_VALUE_OPTIONS,
    )
)
