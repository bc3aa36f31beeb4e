#!/usr/bin/env python3
"""
HELMCHAT ENGINE - The Dispatcher
--------------------------------
Receives one message, confirms helm is reachable, parses the message and
routes the (intent, parameters) pair to the chart scaffolder or the helm
invoker. Whatever happens, the caller gets back a single response string.

Author: HelmChat Team
Date: 2026-10-19
"""

import logging
from dataclasses import replace
from pathlib import Path
from typing import Callable, Dict, Optional

from helmchat.core.errors import HelmChatError
from helmchat.core.models import ChartConfig, Intent, ParsedCommand
from helmchat.core.parser import IntentParser
from helmchat.helm.cli import HelmCLI
from helmchat.scaffold.scaffolder import ChartScaffolder
from helmchat.scaffold.validator import ChartValidator

HELM_MISSING_MESSAGE = "It seems Helm is not installed or accessible. Please install Helm and try again."

HELP_MESSAGE = """I'm not sure how to help with that. Here are some things you can ask me to do:
- Create a new Helm chart
- Scan a chart for security issues
- Install or upgrade a chart
- Uninstall a release
- List releases
- Check release status
What would you like to do?"""


class HelmChatEngine:
    """
    Principal dispatcher. Holds only its collaborators; every request is
    handled in isolation with no session state.
    """

    def __init__(self, workspace: str, helm: Optional[HelmCLI] = None,
                 scaffolder: Optional[ChartScaffolder] = None,
                 validator: Optional[ChartValidator] = None,
                 parser: Optional[IntentParser] = None,
                 logger: Optional[logging.Logger] = None):
        self.workspace = Path(workspace).resolve()
        self.logger = logger or logging.getLogger("helmchat.engine")
        self.helm = helm or HelmCLI(logger=self.logger.getChild("helm"))
        self.scaffolder = scaffolder or ChartScaffolder(str(self.workspace), logger=self.logger.getChild("scaffold"))
        self.validator = validator or ChartValidator()
        self.parser = parser or IntentParser()

        self.handlers: Dict[Intent, Callable[[ParsedCommand], str]] = {
            Intent.CREATE_CHART: self._handle_create_chart,
            Intent.UPDATE_CHART: self._handle_update_chart,
            Intent.SCAN_CHART: self._handle_scan_chart,
            Intent.INSTALL_CHART: self._handle_install_chart,
            Intent.UNINSTALL_CHART: self._handle_uninstall_chart,
            Intent.LIST_RELEASES: self._handle_list_releases,
            Intent.GET_STATUS: self._handle_get_status,
            Intent.UNKNOWN: self._handle_unknown,
        }

    def handle(self, message: str, release_name: Optional[str] = None) -> str:
        """
        Processes one inbound message and returns the response text.
        ``release_name`` is the caller's way of naming a release, since
        the parser only finds one in an install/upgrade phrase.
        """
        try:
            parsed = self.parser.parse(message)
            if release_name:
                parsed = replace(parsed, params=replace(parsed.params, release_name=release_name))
            return self.dispatch(parsed)

        except Exception as e:
            self.logger.error(f"Error handling message: {e}")
            return f"Sorry, I encountered an error: {e}"

    def dispatch(self, parsed: ParsedCommand) -> str:
        """Routes an already-parsed command, after the helm health check."""
        health = self.helm.validate_helm()
        if not health.success:
            self.logger.warning(f"Helm health check failed: {health.error}")
            return HELM_MISSING_MESSAGE

        self.logger.info(f"Intent {parsed.intent.value} with {parsed.params.to_dict()}")
        return self.handlers[parsed.intent](parsed)

    def build_chart_config(self, parsed: ParsedCommand) -> ChartConfig:
        """Maps the extracted parameters onto scaffolder input."""
        params = parsed.params
        config = ChartConfig()
        if params.chart_name:
            config.name = params.chart_name
        if params.version:
            config.version = params.version

        values = params.values
        if values is not None:
            if values.replica_count is not None:
                config.replicas = values.replica_count
            if values.service is not None:
                if values.service.type is not None:
                    config.service_type = values.service.type
                if values.service.port is not None:
                    config.port = values.service.port
        return config

    def _handle_create_chart(self, parsed: ParsedCommand) -> str:
        try:
            config = self.build_chart_config(parsed)
            chart_path = self.scaffolder.generate(config)
        except HelmChatError as e:
            return f"Failed to generate chart: {e}"

        return (
            f"Successfully created Helm chart at {chart_path}. The chart includes:\n"
            f"- Chart.yaml: Basic chart information\n"
            f"- values.yaml: Default configuration values\n"
            f"- templates/: Kubernetes resource templates\n\n"
            f"Would you like me to explain the generated files or help you customize them?"
        )

    def _resolve_chart_path(self, chart_name: Optional[str]) -> Path:
        if chart_name:
            candidate = self.workspace / chart_name
            if candidate.exists():
                return candidate
        return self.workspace

    def _handle_scan_chart(self, parsed: ParsedCommand) -> str:
        target = self._resolve_chart_path(parsed.params.chart_name)

        warnings = []
        if self.validator.is_chart(target):
            report = self.validator.validate(str(target))
            if not report.is_valid:
                return "Found some issues with the chart:\n" + "\n".join(report.errors)
            warnings = report.warnings

        lint = self.helm.lint_chart(str(target))
        if not lint.success:
            return f"Found some issues with the chart:\n{lint.error}"

        response = "Chart validation successful! No issues found."
        if warnings:
            response += "\nWarnings:\n" + "\n".join(f"- {w}" for w in warnings)
        return response

    def _handle_install_chart(self, parsed: ParsedCommand) -> str:
        params = parsed.params
        if not params.release_name or not params.chart_name:
            return "Please provide both a release name and chart name for installation."

        result = self.helm.install(params.release_name, params.chart_name, params.namespace)
        if not result.success:
            return f"Failed to install chart: {result.error}"

        suffix = f" in namespace {params.namespace}" if params.namespace else ""
        return f"Successfully installed {params.chart_name} as {params.release_name}{suffix}"

    def _handle_update_chart(self, parsed: ParsedCommand) -> str:
        params = parsed.params
        if not params.release_name or not params.chart_name:
            return "Please provide both a release name and chart name for the upgrade."

        result = self.helm.upgrade(params.release_name, params.chart_name, params.namespace)
        if not result.success:
            return f"Failed to upgrade release: {result.error}"

        suffix = f" in namespace {params.namespace}" if params.namespace else ""
        return f"Successfully upgraded {params.release_name} to {params.chart_name}{suffix}"

    def _handle_uninstall_chart(self, parsed: ParsedCommand) -> str:
        params = parsed.params
        if not params.release_name:
            return "Please specify which release you'd like to uninstall."

        result = self.helm.uninstall(params.release_name, params.namespace)
        if not result.success:
            return f"Failed to uninstall release: {result.error}"
        return f"Successfully uninstalled {params.release_name}"

    def _handle_list_releases(self, parsed: ParsedCommand) -> str:
        result = self.helm.list_releases(parsed.params.namespace)
        if not result.success:
            return f"Failed to list releases: {result.error}"
        return f"Current Helm releases:\n{result.output}"

    def _handle_get_status(self, parsed: ParsedCommand) -> str:
        params = parsed.params
        if not params.release_name:
            return "Please specify which release you'd like to check."

        result = self.helm.get_status(params.release_name, params.namespace)
        if not result.success:
            return f"Failed to get status: {result.error}"
        return f"Status for {params.release_name}:\n{result.output}"

    def _handle_unknown(self, parsed: ParsedCommand) -> str:
        return HELP_MESSAGE
