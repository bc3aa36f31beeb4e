#!/usr/bin/env python3
"""
HELMCHAT ERRORS
---------------
Library exceptions. The dispatch engine converts every one of these into
response text, so none of them ever reaches the transport.

Author: HelmChat Team
Date: 2026-10-19
"""


class HelmChatError(Exception):
    """Base class for all HelmChat failures."""


class ChartConfigError(HelmChatError):
    """A ChartConfig carries a value the scaffolder cannot emit."""


class ScaffoldError(HelmChatError):
    """Writing the chart files to disk failed part-way."""
