#!/usr/bin/env python3
"""
HELMCHAT SCAFFOLDER SUITE
-------------------------
Checks the emitted file layout, the literal value lines, determinism and
the fail-fast write behaviour.
"""

import os
import stat

import pytest
from ruamel.yaml import YAML

from helmchat.core.errors import ChartConfigError, ScaffoldError
from helmchat.core.models import ChartConfig, ChartType, ServiceType
from helmchat.scaffold.scaffolder import ChartScaffolder

EXPECTED_FILES = {
    "Chart.yaml",
    "values.yaml",
    "templates/_helpers.tpl",
    "templates/deployment.yaml",
    "templates/service.yaml",
}


def test_generate_writes_fixed_layout(tmp_path):
    chart_path = ChartScaffolder(str(tmp_path)).generate(ChartConfig(name="my-app"))

    assert chart_path == tmp_path / "my-app"
    written = {str(p.relative_to(chart_path)).replace(os.sep, "/") for p in chart_path.rglob("*") if p.is_file()}
    assert written == EXPECTED_FILES


@pytest.mark.parametrize("replicas, service_type", [
    (1, ServiceType.CLUSTER_IP),
    (3, ServiceType.LOAD_BALANCER),
    (0, ServiceType.NODE_PORT),
    (12, ServiceType.LOAD_BALANCER),
])
def test_values_contain_literal_lines(tmp_path, replicas, service_type):
    config = ChartConfig(name="web", replicas=replicas, service_type=service_type, port=8080)
    files = ChartScaffolder(str(tmp_path)).render(config)

    lines = [line.strip() for line in files["values.yaml"].splitlines()]
    assert f"replicaCount: {replicas}" in lines
    assert f"type: {service_type.value}" in lines
    assert "port: 8080" in lines


def test_values_yaml_is_loadable(tmp_path):
    files = ChartScaffolder(str(tmp_path)).render(ChartConfig(name="api", replicas=2))
    values = YAML(typ='safe').load(files["values.yaml"])

    assert values["replicaCount"] == 2
    assert values["service"] == {"type": "ClusterIP", "port": 80}
    assert values["image"]["tag"] == ""
    assert values["nodeSelector"] == {}
    assert values["tolerations"] == []
    assert files["values.yaml"].startswith("# Default values for api")


def test_chart_yaml_fields(tmp_path):
    config = ChartConfig(name="lib-one", version="2.3.4", app_version="9.9.9",
                         description="Shared helpers", type=ChartType.LIBRARY)
    files = ChartScaffolder(str(tmp_path)).render(config)
    chart = YAML(typ='safe').load(files["Chart.yaml"])

    assert chart == {
        "apiVersion": "v2",
        "name": "lib-one",
        "description": "Shared helpers",
        "type": "library",
        "version": "2.3.4",
        "appVersion": "9.9.9",
    }
    assert list(chart.keys())[0] == "apiVersion"


def test_templates_substitute_chart_name(tmp_path):
    files = ChartScaffolder(str(tmp_path)).render(ChartConfig(name="shop"))

    assert '{{- define "shop.fullname" -}}' in files["templates/_helpers.tpl"]
    assert '{{- define "shop.selectorLabels" -}}' in files["templates/_helpers.tpl"]
    # Go template variables are not touched by substitution
    assert "{{- $name := default .Chart.Name .Values.nameOverride }}" in files["templates/_helpers.tpl"]
    assert 'include "shop.fullname" .' in files["templates/deployment.yaml"]
    assert "type: {{ .Values.service.type }}" in files["templates/service.yaml"]


def test_render_is_deterministic(tmp_path):
    scaffolder = ChartScaffolder(str(tmp_path))
    config = ChartConfig(name="same", replicas=4, service_type=ServiceType.NODE_PORT)
    assert scaffolder.render(config) == scaffolder.render(config)


def test_generated_files_match_render(tmp_path):
    scaffolder = ChartScaffolder(str(tmp_path))
    config = ChartConfig(name="disk")
    chart_path = scaffolder.generate(config)

    for relative, content in scaffolder.render(config).items():
        assert (chart_path / relative).read_text(encoding="utf-8") == content


def test_existing_chart_is_overwritten(tmp_path):
    scaffolder = ChartScaffolder(str(tmp_path))
    scaffolder.generate(ChartConfig(name="app", replicas=1))
    chart_path = scaffolder.generate(ChartConfig(name="app", replicas=5))
    assert "replicaCount: 5" in (chart_path / "values.yaml").read_text()


@pytest.mark.parametrize("config", [
    ChartConfig(name="My_App"),
    ChartConfig(name=""),
    ChartConfig(name="ok", replicas=-1),
    ChartConfig(name="ok", port=0),
    ChartConfig(name="ok", port=70000),
])
def test_invalid_config_is_rejected(tmp_path, config):
    with pytest.raises(ChartConfigError):
        ChartScaffolder(str(tmp_path)).render(config)


@pytest.mark.skipif(os.name == "nt" or os.geteuid() == 0, reason="POSIX permissions, non-root only")
def test_write_failure_raises_scaffold_error(tmp_path):
    locked = tmp_path / "locked"
    locked.mkdir()
    os.chmod(locked, stat.S_IRUSR | stat.S_IXUSR)
    try:
        with pytest.raises(ScaffoldError):
            ChartScaffolder(str(locked)).generate(ChartConfig(name="app"))
    finally:
        os.chmod(locked, stat.S_IRWXU)


def test_failure_part_way_leaves_partial_output(tmp_path):
    chart_dir = tmp_path / "app"
    # A directory where values.yaml should go: Chart.yaml is written first
    (chart_dir / "values.yaml").mkdir(parents=True)

    with pytest.raises(ScaffoldError):
        ChartScaffolder(str(tmp_path)).generate(ChartConfig(name="app"))

    assert (chart_dir / "Chart.yaml").is_file()
    assert not (chart_dir / "templates" / "service.yaml").exists()
