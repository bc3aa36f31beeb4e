#!/usr/bin/env python3
"""
HELMCHAT PARAMETER EXTRACTOR
----------------------------
Pulls structured fields (chart, release, namespace, version, resource
kinds, value overrides) out of a normalized command. Every rule is an
independent best-effort pattern: the first acceptable match wins and a
miss simply leaves the field absent.

Author: HelmChat Team
Date: 2026-10-19
"""

import re
from typing import List, Optional, Pattern, Tuple

from helmchat.core.classifier import normalize
from helmchat.core.models import (
    ChartValues,
    Intent,
    ParameterBag,
    ResourceRequirements,
    ResourceType,
    ServiceType,
    ServiceValues,
)

# A keyword only counts when it starts a word ("my-chart" is not "chart").
BOUNDARY = r"(?<![a-z0-9-])"
TOKEN = r"[a-z0-9][a-z0-9-]*"


def _token_after(keywords: str) -> Pattern:
    # The captured token sits in a lookahead so a rejected filler word can
    # itself be the keyword of the next match ("chart for my-app").
    return re.compile(BOUNDARY + r"(?:" + keywords + r")\s+(?=(" + TOKEN + r"))")


CHART_NAME_PATTERN = _token_after(r"for|chart|named?")
NAMESPACE_PATTERN = _token_after(r"in|namespace|ns")

INSTALL_PHRASE_PATTERN = re.compile(
    BOUNDARY + r"(?:install|deploy|upgrade|update)\s+(" + TOKEN + r")\s+(?:from|using)\s+(" + TOKEN + r")"
)
VERSION_PATTERN = re.compile(BOUNDARY + r"version\s+(\d+(?:\.\d+)*)")
REPLICA_PATTERN = re.compile(r"(\d+)\s+replicas?")
PORT_PATTERN = re.compile(BOUNDARY + r"port\s+(\d+)")
# Recognised only; quantities are not converted into requests/limits.
RESOURCE_QUANTITY_PATTERN = re.compile(r"\d+(?:m|mi|g)?\s*(?:cpu|memory|ram)")

# Words that follow a keyword in ordinary phrasing but never name anything.
FILLER_WORDS = frozenset({
    "a", "all", "an", "and", "called", "chart", "for", "from", "helm", "in",
    "into", "it", "my", "name", "named", "namespace", "ns", "of", "on",
    "release", "status", "that", "the", "this", "to", "using", "version",
    "with",
})

# Checked in this order; appends follow it regardless of input order.
RESOURCE_TRIGGERS: Tuple[Tuple[ResourceType, Tuple[str, ...]], ...] = (
    (ResourceType.INGRESS, ("ingress",)),
    (ResourceType.CONFIG_MAP, ("configmap", "config map")),
    (ResourceType.SECRET, ("secret",)),
    (ResourceType.PERSISTENT_VOLUME_CLAIM, ("pvc", "volume")),
    (ResourceType.HORIZONTAL_POD_AUTOSCALER, ("hpa", "autoscal")),
)

VALUE_INTENTS = frozenset({Intent.CREATE_CHART, Intent.INSTALL_CHART, Intent.UPDATE_CHART})
INSTALL_PHRASE_INTENTS = frozenset({Intent.INSTALL_CHART, Intent.UPDATE_CHART})


class ParameterExtractor:
    """
    Derives a ParameterBag from a command and its already-assigned intent.
    Holds no state; ``extract`` never raises on malformed input.
    """

    def extract(self, command: str, intent: Intent) -> ParameterBag:
        text = normalize(command)

        chart_name = self._first_token(CHART_NAME_PATTERN, text)

        # The install phrase is the only source of a release name.
        release_name = None
        if intent in INSTALL_PHRASE_INTENTS:
            phrase = self._install_phrase(text)
            if phrase:
                release_name, chart_name = phrase

        return ParameterBag(
            chart_name=chart_name,
            release_name=release_name,
            namespace=self._first_token(NAMESPACE_PATTERN, text),
            version=self._version(text),
            resources=self.extract_resources(text) if intent == Intent.CREATE_CHART else None,
            values=self.extract_values(text) if intent in VALUE_INTENTS else None,
        )

    def extract_resources(self, text: str) -> Tuple[ResourceType, ...]:
        resources: List[ResourceType] = [ResourceType.DEPLOYMENT, ResourceType.SERVICE]
        for kind, triggers in RESOURCE_TRIGGERS:
            if any(trigger in text for trigger in triggers):
                resources.append(kind)
        return tuple(resources)

    def extract_values(self, text: str) -> Optional[ChartValues]:
        """Returns None when the command carries no value overrides at all."""
        replica_count = None
        match = REPLICA_PATTERN.search(text)
        if match:
            replica_count = int(match.group(1))

        service_type = None
        if "loadbalancer" in text:
            service_type = ServiceType.LOAD_BALANCER
        elif "nodeport" in text:
            service_type = ServiceType.NODE_PORT

        port = None
        match = PORT_PATTERN.search(text)
        if match:
            port = int(match.group(1))

        service = None
        if service_type is not None or port is not None:
            service = ServiceValues(type=service_type, port=port)

        resources = None
        if RESOURCE_QUANTITY_PATTERN.search(text):
            # TODO: convert the matched quantities into requests/limits
            resources = ResourceRequirements()

        if replica_count is None and service is None and resources is None:
            return None
        return ChartValues(replica_count=replica_count, service=service, resources=resources)

    def _install_phrase(self, text: str) -> Optional[Tuple[str, str]]:
        for match in INSTALL_PHRASE_PATTERN.finditer(text):
            release, chart = match.groups()
            if release not in FILLER_WORDS and chart not in FILLER_WORDS:
                return release, chart
        return None

    def _version(self, text: str) -> Optional[str]:
        match = VERSION_PATTERN.search(text)
        return match.group(1) if match else None

    def _first_token(self, pattern: Pattern, text: str) -> Optional[str]:
        for match in pattern.finditer(text):
            token = match.group(1)
            if token not in FILLER_WORDS:
                return token
        return None
