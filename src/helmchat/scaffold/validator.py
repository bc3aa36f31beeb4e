#!/usr/bin/env python3
"""
HELMCHAT CHART VALIDATOR - Pre-Flight Check
-------------------------------------------
Local structural check of a chart directory, run before ``helm lint`` so
obvious breakage (no Chart.yaml, unparseable metadata) is reported even
when helm's own output is terse.

Author: HelmChat Team
Date: 2026-10-19
"""

import logging
from pathlib import Path

from ruamel.yaml import YAML, YAMLError

from helmchat.core.models import ChartValidationResult

logger = logging.getLogger("helmchat.validator")


class ChartValidator:
    """
    Checks the metadata a chart must carry. Problems become entries in the
    ChartValidationResult; a broken chart never raises.
    """

    def __init__(self):
        self.yaml = YAML(typ='safe')
        # Fields every Chart.yaml must declare
        self.required_fields = ["apiVersion", "name", "version"]

    def is_chart(self, path: Path) -> bool:
        return Path(path).is_dir() and (Path(path) / "Chart.yaml").is_file()

    def validate(self, chart_path: str) -> ChartValidationResult:
        root = Path(chart_path)
        result = ChartValidationResult(is_valid=True)

        chart_file = root / "Chart.yaml"
        if not chart_file.is_file():
            result.errors.append(f"Chart.yaml not found in {root}")
        else:
            self._check_metadata(chart_file, result)

        if not (root / "values.yaml").is_file():
            result.warnings.append("values.yaml is missing; the chart has no default values.")

        templates = root / "templates"
        if not templates.is_dir() or not any(templates.iterdir()):
            result.warnings.append("templates/ is empty; the chart renders no resources.")

        result.is_valid = not result.errors
        logger.debug(f"Validated {root}: {len(result.errors)} error(s), {len(result.warnings)} warning(s)")
        return result

    def _check_metadata(self, chart_file: Path, result: ChartValidationResult):
        try:
            metadata = self.yaml.load(chart_file.read_text(encoding='utf-8-sig'))
        except (YAMLError, UnicodeDecodeError) as e:
            result.errors.append(f"Chart.yaml is not valid YAML: {e}")
            return

        if not isinstance(metadata, dict):
            result.errors.append("Chart.yaml must be a mapping.")
            return

        for field in self.required_fields:
            if not metadata.get(field):
                result.errors.append(f"Chart.yaml is missing required field '{field}'.")

        api_version = metadata.get("apiVersion")
        if api_version and api_version != "v2":
            result.errors.append(f"Unsupported apiVersion '{api_version}' (expected v2).")
