from __future__ import annotations

import pytest

from logvalues.features import FeatureRegistry, OperationResult


@pytest.mark.unit
def test_all_template_features_registered():
    features = FeatureRegistry.get_all_features()
    assert {"version", "parse", "format", "values"} <= set(features)


@pytest.mark.unit
def test_parse_feature_reports_canonical_form():
    result = FeatureRegistry.get_feature("parse").handler(template="{A,4} and {B:F2}")
    assert result.success is True
    assert result.data == {
        "template": "{A,4} and {B:F2}",
        "canonical": "{0,4} and {1:F2}",
        "names": ["A", "B"],
    }


@pytest.mark.unit
def test_format_feature_renders_message():
    result = FeatureRegistry.get_feature("format").handler(
        template="Items: {Items}", values=[[1, None, 3]]
    )
    assert result.success is True
    assert result.data["message"] == "Items: 1, (null), 3"


@pytest.mark.unit
def test_format_feature_reports_missing_arguments():
    result = FeatureRegistry.get_feature("format").handler(template="{A} {B}", values=["a"])
    assert result.success is False
    assert "out of range" in result.error


@pytest.mark.unit
def test_values_feature_lists_pairs():
    result = FeatureRegistry.get_feature("values").handler(template="{A}", values=[7])
    assert result.success is True
    assert result.data["values"] == [
        {"name": "A", "value": 7},
        {"name": "{OriginalFormat}", "value": "{A}"},
    ]


@pytest.mark.unit
def test_values_feature_reports_missing_arguments():
    result = FeatureRegistry.get_feature("values").handler(template="{A}")
    assert result.success is False
    assert result.error


@pytest.mark.unit
def test_operation_result_helpers():
    assert OperationResult.ok({"x": 1}).data == {"x": 1}
    failed = OperationResult.fail("boom")
    assert failed.success is False
    assert failed.error == "boom"
