#!/usr/bin/env python3
"""
HELMCHAT CONFIGURATION
----------------------
Runtime settings for the engine and the helm invoker.

Precedence order:
1. Defaults declared on HelmChatConfig
2. HELMCHAT_* environment variables
3. CLI flags (applied by the caller through ``override``)

Author: HelmChat Team
Date: 2026-10-19
"""

import os
import logging
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Mapping, Optional

logger = logging.getLogger("helmchat.config")

ENV_PREFIX = "HELMCHAT_"


@dataclass(frozen=True)
class HelmChatConfig:
    helm_binary: str = "helm"
    helm_timeout: float = 60.0     # seconds per helm invocation
    workspace: Path = Path(".")    # scaffolding root
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "HelmChatConfig":
        """Overlays HELMCHAT_* variables on the defaults."""
        env = os.environ if environ is None else environ
        defaults = cls()

        timeout = defaults.helm_timeout
        raw_timeout = env.get(f"{ENV_PREFIX}HELM_TIMEOUT")
        if raw_timeout is not None:
            try:
                timeout = float(raw_timeout)
                if timeout <= 0:
                    raise ValueError(raw_timeout)
            except ValueError:
                logger.warning(f"Invalid {ENV_PREFIX}HELM_TIMEOUT '{raw_timeout}'. "
                               f"Falling back to default: {defaults.helm_timeout}")
                timeout = defaults.helm_timeout

        return cls(
            helm_binary=env.get(f"{ENV_PREFIX}HELM_BINARY", defaults.helm_binary),
            helm_timeout=timeout,
            workspace=Path(env.get(f"{ENV_PREFIX}WORKSPACE", str(defaults.workspace))),
            log_level=env.get(f"{ENV_PREFIX}LOG_LEVEL", defaults.log_level).upper(),
        )

    def override(self, **changes) -> "HelmChatConfig":
        """Returns a copy with every non-None keyword applied."""
        applied = {key: value for key, value in changes.items() if value is not None}
        if "workspace" in applied:
            applied["workspace"] = Path(applied["workspace"])
        return replace(self, **applied)
