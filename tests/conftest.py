import os
import sys

# Ensure the 'src' directory is in the python path so we can import helmchat
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../src')))

import pytest

from helmchat.core.models import HelmResult


class FakeHelm:
    """
    Records every helm call instead of running the binary. Results can be
    overridden per sub-command through ``results``.
    """

    def __init__(self, available: bool = True, results=None):
        self.available = available
        self.results = results or {}
        self.calls = []

    def _result(self, name, *args):
        self.calls.append((name, args))
        return self.results.get(name, HelmResult(success=True, output=f"{name} ok"))

    def validate_helm(self):
        self.calls.append(("version", ()))
        if not self.available:
            return HelmResult(success=False, output="", error="helm: executable not found")
        return HelmResult(success=True, output="v3.14.0")

    def lint_chart(self, chart_path):
        return self._result("lint", chart_path)

    def install(self, release_name, chart, namespace=None):
        return self._result("install", release_name, chart, namespace)

    def upgrade(self, release_name, chart, namespace=None):
        return self._result("upgrade", release_name, chart, namespace)

    def uninstall(self, release_name, namespace=None):
        return self._result("uninstall", release_name, namespace)

    def list_releases(self, namespace=None, all=False):
        return self._result("list", namespace, all)

    def get_status(self, release_name, namespace=None):
        return self._result("status", release_name, namespace)


@pytest.fixture
def fake_helm():
    return FakeHelm()
