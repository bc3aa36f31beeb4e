#!/usr/bin/env python3
"""
HELMCHAT CONFIG SUITE
---------------------
Defaults, HELMCHAT_* overlay and CLI overrides.
"""

from pathlib import Path

from helmchat.core.config import HelmChatConfig


def test_defaults():
    config = HelmChatConfig.from_env({})
    assert config == HelmChatConfig()
    assert config.helm_binary == "helm"
    assert config.helm_timeout == 60.0
    assert config.workspace == Path(".")


def test_environment_overlay():
    config = HelmChatConfig.from_env({
        "HELMCHAT_HELM_BINARY": "/usr/local/bin/helm",
        "HELMCHAT_HELM_TIMEOUT": "15",
        "HELMCHAT_WORKSPACE": "/srv/charts",
        "HELMCHAT_LOG_LEVEL": "debug",
    })

    assert config.helm_binary == "/usr/local/bin/helm"
    assert config.helm_timeout == 15.0
    assert config.workspace == Path("/srv/charts")
    assert config.log_level == "DEBUG"


def test_invalid_timeout_falls_back(caplog):
    for raw in ("soon", "0", "-3"):
        config = HelmChatConfig.from_env({"HELMCHAT_HELM_TIMEOUT": raw})
        assert config.helm_timeout == 60.0
    assert "Invalid HELMCHAT_HELM_TIMEOUT" in caplog.text


def test_override_skips_none():
    base = HelmChatConfig(helm_binary="helm3")
    config = base.override(helm_binary=None, helm_timeout=5.0, workspace="out")

    assert config.helm_binary == "helm3"
    assert config.helm_timeout == 5.0
    assert config.workspace == Path("out")
    assert base.helm_timeout == 60.0
