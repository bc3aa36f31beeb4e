#!/usr/bin/env python3
"""
HELMCHAT HELM INVOKER
---------------------
Thin wrapper around the external ``helm`` binary. Every sub-command is
executed as an argv list (never through a shell) and reported back as a
HelmResult; the invoker does not interpret output or retry.

Author: HelmChat Team
Date: 2026-10-19
"""

import logging
import subprocess
from typing import List, Optional

from helmchat.core.models import HelmResult


class HelmCLI:
    """
    Executes helm sub-commands and captures stdout/stderr.
    Success is exit status 0; stdout content is never inspected.
    """

    def __init__(self, binary: str = "helm", timeout: float = 60.0,
                 logger: Optional[logging.Logger] = None):
        self.binary = binary
        self.timeout = timeout
        self.logger = logger or logging.getLogger("helmchat.helm")

    def execute(self, args: List[str]) -> HelmResult:
        """Run ``helm <args>`` and return the captured result."""
        argv = [self.binary, *args]
        self.logger.info(f"Executing: {' '.join(argv)}")

        try:
            completed = subprocess.run(
                argv, capture_output=True, text=True, timeout=self.timeout
            )
        except FileNotFoundError:
            message = f"{self.binary}: executable not found"
            self.logger.error(message)
            return HelmResult(success=False, output="", error=message)
        except subprocess.TimeoutExpired:
            message = f"helm {' '.join(args)} timed out after {self.timeout}s"
            self.logger.error(message)
            return HelmResult(success=False, output="", error=message)
        except OSError as e:
            self.logger.error(f"Error: {e}")
            return HelmResult(success=False, output="", error=str(e))

        stderr = completed.stderr.strip() or None
        if completed.returncode != 0:
            message = stderr or f"helm exited with status {completed.returncode}"
            self.logger.error(f"Error: {message}")
            return HelmResult(success=False, output=completed.stdout, error=message)

        if stderr:
            self.logger.warning(f"Warning: {stderr}")
        self.logger.debug(f"Output: {completed.stdout}")
        return HelmResult(success=True, output=completed.stdout, error=stderr)

    @staticmethod
    def _with_namespace(args: List[str], namespace: Optional[str]) -> List[str]:
        if namespace:
            args.extend(["--namespace", namespace])
        return args

    def validate_helm(self) -> HelmResult:
        """Health check: is helm installed and runnable?"""
        return self.execute(["version"])

    def lint_chart(self, chart_path: str) -> HelmResult:
        return self.execute(["lint", chart_path])

    def install(self, release_name: str, chart: str,
                namespace: Optional[str] = None) -> HelmResult:
        return self.execute(self._with_namespace(["install", release_name, chart], namespace))

    def upgrade(self, release_name: str, chart: str,
                namespace: Optional[str] = None) -> HelmResult:
        return self.execute(self._with_namespace(["upgrade", release_name, chart], namespace))

    def uninstall(self, release_name: str, namespace: Optional[str] = None) -> HelmResult:
        return self.execute(self._with_namespace(["uninstall", release_name], namespace))

    def list_releases(self, namespace: Optional[str] = None, all: bool = False) -> HelmResult:
        args = self._with_namespace(["list"], namespace)
        if all:
            args.append("--all")
        return self.execute(args)

    def get_status(self, release_name: str, namespace: Optional[str] = None) -> HelmResult:
        return self.execute(self._with_namespace(["status", release_name], namespace))

    def get_manifest(self, release_name: str, namespace: Optional[str] = None) -> HelmResult:
        return self.execute(self._with_namespace(["get", "manifest", release_name], namespace))

    def get_values(self, release_name: str, namespace: Optional[str] = None,
                   all: bool = False) -> HelmResult:
        args = self._with_namespace(["get", "values", release_name], namespace)
        if all:
            args.append("--all")
        return self.execute(args)

    def add_repo(self, name: str, url: str) -> HelmResult:
        return self.execute(["repo", "add", name, url])

    def update_repos(self) -> HelmResult:
        return self.execute(["repo", "update"])
