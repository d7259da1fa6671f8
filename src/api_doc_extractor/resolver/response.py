"""Sample-response resolution for documented routes.

Resolvers receive the route, its tags and a context dict with the override
configuration (``rules``) and the parsed ``body``/``query`` parameters.
Live calls against a running application are not made here.
"""

import json
import logging
import re
from pathlib import Path
from typing import Any, Protocol

from api_doc_extractor.errors import ResponseResolutionError
from api_doc_extractor.parser.base import Route, Tag

logger = logging.getLogger("api_doc_extractor.resolver.response")

STATUS_PREFIX = re.compile(r"^(\d{3})\s+")


def is_empty(payload: Any) -> bool:
    """None, false, zero, "", "0" and empty containers count as no response."""
    if payload is None:
        return True
    if isinstance(payload, str):
        return payload in ("", "0")
    if isinstance(payload, (bool, int, float, list, tuple, dict)):
        return not payload
    return False


def _decode(text: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return text


class ResponseResolver(Protocol):
    def resolve(self, route: Route, tags: list[Tag], context: dict[str, Any]) -> Any:
        ...


class NullResponseResolver:
    """Never documents a response."""

    def resolve(self, route: Route, tags: list[Tag], context: dict[str, Any]) -> Any:
        return None


class ResponseTagStrategy:
    """``@response [status] <json or text>``; the first tag wins."""

    def resolve(self, route: Route, tags: list[Tag], context: dict[str, Any]) -> Any:
        for tag in tags:
            if tag.name != "response":
                continue
            content = STATUS_PREFIX.sub("", tag.content, count=1).strip()
            return _decode(content) if content else None
        return None


class ResponseFileStrategy:
    """``@responseFile <path>``, resolved under ``base_dir``."""

    def __init__(self, base_dir: Path | None = None):
        self.base_dir = base_dir or Path.cwd()

    def resolve(self, route: Route, tags: list[Tag], context: dict[str, Any]) -> Any:
        for tag in tags:
            if tag.name != "responseFile":
                continue
            path = self.base_dir / STATUS_PREFIX.sub("", tag.content, count=1).strip()
            if not path.is_file():
                logger.warning(f"Response file {path} for {route.uri} not found")
                return None
            try:
                text = path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                raise ResponseResolutionError(f"Cannot read response file {path} for {route.uri}: {e}") from e
            return _decode(text)
        return None


class ChainResponseResolver:
    """Tries each strategy in turn and returns the first non-empty payload."""

    def __init__(self, strategies: list[ResponseResolver]):
        self.strategies = strategies

    @classmethod
    def default(cls, response_file_dir: Path | None = None) -> "ChainResponseResolver":
        return cls([ResponseTagStrategy(), ResponseFileStrategy(response_file_dir)])

    def resolve(self, route: Route, tags: list[Tag], context: dict[str, Any]) -> Any:
        for strategy in self.strategies:
            payload = strategy.resolve(route, tags, context)
            if not is_empty(payload):
                return payload
        return None
