#!/usr/bin/env python3
"""
HELMCHAT INTENT PARSER
----------------------
Front door of the core: classifies a command, extracts its parameters
and wraps both in a ParsedCommand together with the untouched input.

Author: HelmChat Team
Date: 2026-10-19
"""

from typing import Optional

from helmchat.core.classifier import IntentClassifier, normalize
from helmchat.core.extractor import ParameterExtractor
from helmchat.core.models import ParsedCommand


class IntentParser:
    """
    Composes the classifier and extractor. Both collaborators are
    stateless, so one parser can serve any number of requests.
    """

    def __init__(self, classifier: Optional[IntentClassifier] = None,
                 extractor: Optional[ParameterExtractor] = None):
        self.classifier = classifier or IntentClassifier()
        self.extractor = extractor or ParameterExtractor()

    def parse(self, command: str) -> ParsedCommand:
        """Parse a natural-language command into intent and parameters."""
        original = command if command is not None else ""
        normalized = normalize(original)

        intent = self.classifier.classify(normalized)
        params = self.extractor.extract(normalized, intent)

        return ParsedCommand(intent=intent, params=params, original_command=original)
