#!/usr/bin/env python3
"""
HELMCHAT VALIDATOR SUITE
------------------------
Pre-flight checks on chart directories: good charts pass, broken ones
are reported without raising.
"""

from helmchat.core.models import ChartConfig
from helmchat.scaffold.scaffolder import ChartScaffolder
from helmchat.scaffold.validator import ChartValidator


def test_scaffolded_chart_is_valid(tmp_path):
    chart_path = ChartScaffolder(str(tmp_path)).generate(ChartConfig(name="good"))
    result = ChartValidator().validate(str(chart_path))

    assert result.is_valid
    assert result.errors == []
    assert result.warnings == []


def test_missing_chart_yaml(tmp_path):
    result = ChartValidator().validate(str(tmp_path))

    assert not result.is_valid
    assert any("Chart.yaml not found" in e for e in result.errors)
    assert len(result.warnings) == 2


def test_unparseable_chart_yaml(tmp_path):
    (tmp_path / "Chart.yaml").write_text("name: [unclosed\n")
    result = ChartValidator().validate(str(tmp_path))

    assert not result.is_valid
    assert "not valid YAML" in result.errors[0]


def test_missing_required_fields(tmp_path):
    (tmp_path / "Chart.yaml").write_text("apiVersion: v2\ndescription: no name\n")
    result = ChartValidator().validate(str(tmp_path))

    assert "Chart.yaml is missing required field 'name'." in result.errors
    assert "Chart.yaml is missing required field 'version'." in result.errors


def test_v1_api_version_is_rejected(tmp_path):
    (tmp_path / "Chart.yaml").write_text("apiVersion: v1\nname: old\nversion: 0.1.0\n")
    result = ChartValidator().validate(str(tmp_path))

    assert not result.is_valid
    assert result.errors == ["Unsupported apiVersion 'v1' (expected v2)."]


def test_non_mapping_chart_yaml(tmp_path):
    (tmp_path / "Chart.yaml").write_text("- just\n- a list\n")
    assert ChartValidator().validate(str(tmp_path)).errors == ["Chart.yaml must be a mapping."]


def test_is_chart(tmp_path):
    validator = ChartValidator()
    assert not validator.is_chart(tmp_path)
    (tmp_path / "Chart.yaml").write_text("apiVersion: v2\n")
    assert validator.is_chart(tmp_path)
