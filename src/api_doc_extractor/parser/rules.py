"""Converts validation-rule expressions into parameter descriptors.

A rule expression is either a pipe-delimited string
(``"required|integer|min:1"``) or a list of rule tokens. Tokens may be
rule objects; they are converted with ``str()``.
"""

import logging
from typing import Any, Mapping

from api_doc_extractor.generator.examples import ExampleValueSynthesizer
from api_doc_extractor.parser.base import ParameterDescriptor
from api_doc_extractor.parser.types import CANONICAL_TYPES

logger = logging.getLogger("api_doc_extractor.parser.rules")


def tokenize_rule(rule: Any) -> list[str]:
    """Split a rule expression into unique tokens, keeping first-seen order."""
    if isinstance(rule, (list, tuple)):
        rule = "|".join(str(item) for item in rule)
    tokens = [t.strip() for t in str(rule).split("|")]
    return list(dict.fromkeys(t for t in tokens if t))


def match_type(tokens: list[str]) -> str:
    """First canonical type (in CANONICAL_TYPES order) present in ``tokens``."""
    for type_name in CANONICAL_TYPES:
        if type_name in tokens:
            return type_name
    return "string"


class ValidationRuleParser:
    """Builds one ParameterDescriptor per validated field."""

    def __init__(self, synthesizer: ExampleValueSynthesizer | None = None):
        self.synthesizer = synthesizer or ExampleValueSynthesizer()

    def parse(self, name: str, rule: Any) -> ParameterDescriptor:
        tokens = tokenize_rule(rule)
        required = "required" in tokens
        tokens = [t for t in tokens if t != "required"]

        canonical = match_type(tokens)
        # The full constraint expression is kept for display
        constraint = "|".join(tokens)

        return ParameterDescriptor(
            name=name,
            type=constraint,
            description="",
            required=required,
            example_value=self.synthesizer.synthesize(canonical),
        )

    def parse_all(self, rules: Mapping[str, Any]) -> dict[str, ParameterDescriptor]:
        params = {name: self.parse(name, rule) for name, rule in rules.items()}
        logger.debug(f"Converted {len(params)} validation rules")
        return params
