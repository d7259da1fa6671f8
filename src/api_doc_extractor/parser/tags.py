"""Parser for ``@pathParam`` / ``@queryParam`` / ``@bodyParam`` tags.

Tag content grammar::

    content     := name WS type [WS "required"] [WS description]
    description := text ["Example:" example]

Parsing is done with a small cursor over the content instead of a single
regular expression so that each branch of the grammar can be tested on
its own.
"""

import logging
import re

from api_doc_extractor.errors import TagParseError
from api_doc_extractor.generator.examples import ExampleValueSynthesizer
from api_doc_extractor.parser.base import ParameterDescriptor, Tag
from api_doc_extractor.parser.types import normalize_type, split_description

logger = logging.getLogger("api_doc_extractor.parser.tags")

PARAMETER_TAGS = {
    "pathParam": "path",
    "queryParam": "query",
    "bodyParam": "body",
}

_TOKEN = re.compile(r"\S+")


class _Cursor:
    """Walks whitespace-separated tokens while keeping the raw remainder."""

    def __init__(self, text: str):
        self.text = text
        self.pos = 0

    def next_token(self) -> str | None:
        match = _TOKEN.search(self.text, self.pos)
        if not match:
            return None
        self.pos = match.end()
        return match.group()

    def peek_token(self) -> tuple[str | None, bool]:
        """Return the next token and whether whitespace follows it."""
        match = _TOKEN.search(self.text, self.pos)
        if not match:
            return None, False
        followed = match.end() < len(self.text) and self.text[match.end()].isspace()
        return match.group(), followed

    def has_trailing_text(self) -> bool:
        """True if anything (even only whitespace) follows the cursor."""
        return self.pos < len(self.text)

    def rest(self) -> str:
        text = self.text[self.pos:]
        self.pos = len(self.text)
        return text


class TagParameterParser:
    """Turns one parameter tag into a ParameterDescriptor."""

    def __init__(self, synthesizer: ExampleValueSynthesizer | None = None):
        self.synthesizer = synthesizer or ExampleValueSynthesizer()

    def parse(self, tag: Tag, uri: str | None = None) -> ParameterDescriptor:
        name, type_name, required, description = self._split(tag, uri)

        canonical = normalize_type(type_name)
        description, example = split_description(description)
        if example is None:
            value = self.synthesizer.synthesize(canonical)
        else:
            value = self.synthesizer.cast(example, canonical)

        return ParameterDescriptor(
            name=name,
            type=canonical,
            description=description,
            required=required,
            example_value=value,
        )

    def parse_all(self, tags: list[Tag], kind: str, uri: str | None = None) -> dict[str, ParameterDescriptor]:
        """Parse every tag of one kind (``path``, ``query`` or ``body``), in order."""
        params: dict[str, ParameterDescriptor] = {}
        for tag in tags:
            if PARAMETER_TAGS.get(tag.name) != kind:
                continue
            param = self.parse(tag, uri)
            if param.name in params:
                logger.warning(f"Duplicate {tag.name} {param.name!r} on {uri}, last one wins")
            params[param.name] = param
        return params

    def _split(self, tag: Tag, uri: str | None) -> tuple[str, str, bool, str]:
        cursor = _Cursor(tag.content.strip())
        name = cursor.next_token()
        type_name = cursor.next_token()
        if name is None or type_name is None:
            raise TagParseError(tag.name, tag.content, uri)

        # Only "<name> <type>" was given
        if not cursor.has_trailing_text():
            return name, type_name, False, ""

        # "required" counts as the flag only when more text follows it
        token, followed = cursor.peek_token()
        flagged = token == "required" and followed
        if flagged:
            cursor.next_token()

        description = cursor.rest().strip()

        # "<name> <type> required" with nothing after: the lone word is the flag
        if description == "required" and not flagged:
            return name, type_name, True, ""

        return name, type_name, flagged, description
