#!/usr/bin/env python3
"""
HELMCHAT CHART SCAFFOLDER
-------------------------
Turns a ChartConfig into the fixed file layout of a Helm chart:

    <root>/<name>/Chart.yaml
    <root>/<name>/values.yaml
    <root>/<name>/templates/_helpers.tpl
    <root>/<name>/templates/deployment.yaml
    <root>/<name>/templates/service.yaml

Output is a pure function of the ChartConfig. Writing fails fast on the
first OS error and leaves whatever was already written in place.

Author: HelmChat Team
Date: 2026-10-19
"""

import io
import re
import logging
from pathlib import Path
from typing import Dict, Optional

from ruamel.yaml import YAML
from ruamel.yaml.comments import CommentedMap
from ruamel.yaml.scalarstring import DoubleQuotedScalarString

from helmchat.core.errors import ChartConfigError, ScaffoldError
from helmchat.core.models import ChartConfig
from helmchat.scaffold.templates import render_templates

CHART_NAME_PATTERN = re.compile(r"^[a-z0-9-]+$")


class ChartScaffolder:
    """
    Emits Chart.yaml and values.yaml through ruamel.yaml (ordered maps,
    2-space Kubernetes indentation) and the templates by substitution.
    """

    def __init__(self, root: str, logger: Optional[logging.Logger] = None):
        self.root = Path(root)
        self.logger = logger or logging.getLogger("helmchat.scaffold")
        self.yaml = YAML(typ='rt')
        # Standard K8s: 2 spaces, sequences indented 4 (offset 2)
        self.yaml.indent(mapping=2, sequence=4, offset=2)
        self.yaml.width = 4096

    def validate_config(self, config: ChartConfig):
        if not config.name or not CHART_NAME_PATTERN.match(config.name):
            raise ChartConfigError(
                f"Invalid chart name '{config.name}': use lowercase letters, digits and '-'."
            )
        if config.replicas < 0:
            raise ChartConfigError(f"Replica count must not be negative (got {config.replicas}).")
        if not 1 <= config.port <= 65535:
            raise ChartConfigError(f"Port {config.port} is outside 1-65535.")

    def render(self, config: ChartConfig) -> Dict[str, str]:
        """Returns {relative path: content} without touching the disk."""
        self.validate_config(config)
        files = {
            "Chart.yaml": self._dump(self._chart_yaml(config)),
            "values.yaml": self._dump(self._values_yaml(config)),
        }
        files.update(render_templates(config.name))
        return files

    def generate(self, config: ChartConfig) -> Path:
        """Writes the chart under <root>/<name>/ and returns that path."""
        files = self.render(config)
        chart_path = self.root / config.name

        try:
            (chart_path / "templates").mkdir(parents=True, exist_ok=True)
            for relative, content in files.items():
                target = chart_path / relative
                target.write_text(content, encoding='utf-8')
                self.logger.debug(f"Wrote {target}")
        except OSError as e:
            self.logger.error(f"Scaffolding {config.name} failed: {e}")
            raise ScaffoldError(str(e)) from e

        self.logger.info(f"Created chart {config.name} at {chart_path}")
        return chart_path

    def _chart_yaml(self, config: ChartConfig) -> CommentedMap:
        doc = CommentedMap()
        doc["apiVersion"] = "v2"
        doc["name"] = config.name
        doc["description"] = config.description
        doc["type"] = config.type.value
        doc["version"] = config.version
        doc["appVersion"] = config.app_version
        return doc

    def _values_yaml(self, config: ChartConfig) -> CommentedMap:
        doc = CommentedMap()
        doc["replicaCount"] = config.replicas
        doc["image"] = CommentedMap([
            ("repository", "nginx"),
            ("pullPolicy", "IfNotPresent"),
            ("tag", DoubleQuotedScalarString("")),
        ])
        doc["nameOverride"] = DoubleQuotedScalarString("")
        doc["fullnameOverride"] = DoubleQuotedScalarString("")
        doc["service"] = CommentedMap([
            ("type", config.service_type.value),
            ("port", config.port),
        ])
        doc["resources"] = CommentedMap([
            ("limits", CommentedMap([("cpu", "100m"), ("memory", "128Mi")])),
            ("requests", CommentedMap([("cpu", "100m"), ("memory", "128Mi")])),
        ])
        doc["nodeSelector"] = CommentedMap()
        doc["tolerations"] = []
        doc["affinity"] = CommentedMap()
        doc.yaml_set_start_comment(f"Default values for {config.name}")
        return doc

    def _dump(self, doc: CommentedMap) -> str:
        stream = io.StringIO()
        self.yaml.dump(doc, stream)
        return stream.getvalue()
