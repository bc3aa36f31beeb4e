#!/usr/bin/env python3
"""
HELMCHAT INTENT CLASSIFIER
--------------------------
Maps a free-text command to exactly one Intent using an ordered table of
keyword rules. Keywords are plain substrings of the case-folded command
("redeploy" contains "deploy"). The first rule that matches wins, so the
order of RULES is part of the observable behaviour: "uninstall web"
contains "install" and therefore lands on InstallChart.

Author: HelmChat Team
Date: 2026-10-19
"""

from dataclasses import dataclass
from typing import FrozenSet, Tuple

from helmchat.core.models import Intent


@dataclass(frozen=True)
class IntentRule:
    """
    One row of the classification table.

    The rule matches when the command contains any keyword of ``any_of``
    AND, for every group in ``requires``, at least one of that group's
    keywords. An empty ``any_of`` places no constraint on verbs.
    """
    intent: Intent
    any_of: FrozenSet[str]
    requires: Tuple[FrozenSet[str], ...] = ()


RULES: Tuple[IntentRule, ...] = (
    IntentRule(
        Intent.CREATE_CHART,
        frozenset({"create", "generate", "new", "scaffold", "initialize"}),
        (frozenset({"chart"}),),
    ),
    IntentRule(
        Intent.UPDATE_CHART,
        frozenset({"update", "modify", "change", "edit"}),
        (frozenset({"chart"}),),
    ),
    IntentRule(
        Intent.SCAN_CHART,
        frozenset({"scan", "check", "analyze", "validate", "verify"}),
    ),
    IntentRule(
        Intent.INSTALL_CHART,
        frozenset({"install", "deploy", "release"}),
    ),
    IntentRule(
        Intent.UNINSTALL_CHART,
        frozenset({"uninstall", "remove", "delete", "destroy"}),
    ),
    # Anything this rule accepts contains "release", which InstallChart claims first.
    IntentRule(
        Intent.LIST_RELEASES,
        frozenset({"list", "show", "get"}),
        (frozenset({"release"}),),
    ),
    IntentRule(Intent.GET_STATUS, frozenset(), (frozenset({"status"}),)),
    IntentRule(Intent.GET_STATUS, frozenset({"get"}), (frozenset({"logs"}),)),
)


def normalize(command: str) -> str:
    """Case-folds and trims a command. ``None`` becomes the empty string."""
    return (command or "").lower().strip()


def contains_any(text: str, keywords) -> bool:
    return any(keyword in text for keyword in keywords)


class IntentClassifier:
    """
    Rule-table classifier. Stateless: ``classify`` is a pure function of
    its argument and never raises.
    """

    rules = RULES

    def classify(self, command: str) -> Intent:
        normalized = normalize(command)

        for rule in self.rules:
            if self._matches(rule, normalized):
                return rule.intent

        return Intent.UNKNOWN

    def matches(self, rule: IntentRule, command: str) -> bool:
        """Evaluates a single rule in isolation against a raw command."""
        return self._matches(rule, normalize(command))

    def _matches(self, rule: IntentRule, text: str) -> bool:
        if rule.any_of and not contains_any(text, rule.any_of):
            return False
        return all(contains_any(text, group) for group in rule.requires)
