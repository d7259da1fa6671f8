"""Shared helpers: type-alias canonicalization and inline example splitting."""

import logging
import re

logger = logging.getLogger("api_doc_extractor.parser.types")

CANONICAL_TYPES = ("integer", "numeric", "float", "boolean", "string", "array", "json", "image")

TYPE_ALIASES = {
    "int": "integer",
    "bool": "boolean",
    "double": "float",
}

# Last "Example:" preceded by whitespace (or at the very start) wins.
EXAMPLE_PATTERN = re.compile(r"^(?:(.*)\s+)?Example:\s*(.*?)\s*$", re.DOTALL)


def normalize_type(type_name: str | None) -> str:
    """Map a declared type to its canonical name.

    Aliases (int, bool, double) are resolved; empty or unrecognized types
    become ``string``. Canonical names are returned unchanged.
    """
    if not type_name:
        return "string"
    key = type_name.strip().lower()
    key = TYPE_ALIASES.get(key, key)
    if key not in CANONICAL_TYPES:
        logger.debug(f"Unrecognized parameter type {type_name!r}, using 'string'")
        return "string"
    return key


def split_description(description: str) -> tuple[str, str | None]:
    """Split ``"<text> Example: <value>"`` into ``(text, value)``.

    Returns ``(description, None)`` when there is no inline example or the
    example text is empty.
    """
    match = EXAMPLE_PATTERN.match(description)
    if not match:
        return description, None
    text = (match.group(1) or "").strip()
    example = match.group(2)
    if not example:
        return text, None
    return text, example
