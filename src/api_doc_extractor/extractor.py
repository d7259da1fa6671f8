"""Route metadata extraction.

For each route the extractor asks the introspector for the handler's
comments and validation rules, parses them into parameter descriptors,
resolves the group and sample response, and assembles a RouteDescriptor.
Routes are independent of each other, so batches may run in parallel.
"""

import hashlib
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Protocol

from api_doc_extractor.config import ExtractionConfig
from api_doc_extractor.generator.examples import ExampleValueSynthesizer
from api_doc_extractor.parser.base import AnnotatedEntity, ParameterDescriptor, Route, RouteDescriptor, Tag
from api_doc_extractor.parser.docblock import parse_docblock
from api_doc_extractor.parser.rules import ValidationRuleParser
from api_doc_extractor.parser.tags import TagParameterParser
from api_doc_extractor.resolver.group import GroupResolver
from api_doc_extractor.resolver.response import ChainResponseResolver, ResponseResolver, is_empty

logger = logging.getLogger("api_doc_extractor.extractor")


class Introspector(Protocol):
    def inspect(self, route: Route) -> AnnotatedEntity:
        ...


def route_id(uri: str, methods: list[str]) -> str:
    """Stable identity of a route: md5 of ``uri:METHODS``."""
    return hashlib.md5(f"{uri}:{''.join(sorted(methods))}".encode("utf-8")).hexdigest()


def is_authenticated(tags: list[Tag]) -> bool:
    return any(tag.name.lower() == "authenticated" for tag in tags)


def apply_headers(headers: dict[str, str], authenticated: bool) -> dict[str, str]:
    """Copy the override headers, dropping Authorization on public routes."""
    if authenticated:
        return dict(headers)
    return {key: value for key, value in headers.items() if key.lower() != "authorization"}


def merge_parameters(
    base: dict[str, ParameterDescriptor], overrides: dict[str, ParameterDescriptor]
) -> dict[str, ParameterDescriptor]:
    """Overrides replace same-named entries in place; new names are appended."""
    merged = dict(base)
    merged.update(overrides)
    return merged


class RouteMetadataExtractor:
    """Produces one RouteDescriptor per route."""

    def __init__(
        self,
        introspector: Introspector,
        config: ExtractionConfig | None = None,
        response_resolver: ResponseResolver | None = None,
        synthesizer: ExampleValueSynthesizer | None = None,
    ):
        self.introspector = introspector
        self.config = config or ExtractionConfig()
        self.response_resolver = response_resolver or ChainResponseResolver.default(self.config.response_file_dir)
        synthesizer = synthesizer or ExampleValueSynthesizer.seeded(self.config.seed)
        self.tag_parser = TagParameterParser(synthesizer)
        self.rule_parser = ValidationRuleParser(synthesizer)
        self.group_resolver = GroupResolver(self.config.default_group)

    def extract(self, route: Route) -> RouteDescriptor:
        entity = self.introspector.inspect(route)
        return self.extract_entity(route, entity)

    def extract_entity(self, route: Route, entity: AnnotatedEntity) -> RouteDescriptor:
        """Assemble the descriptor from an already introspected handler."""
        logger.debug(f"Extracting {route.methods} {route.uri} ({route.handler})")
        doc = parse_docblock(entity.docstring)

        rule_params = self.rule_parser.parse_all(entity.rules)
        body_params = merge_parameters(rule_params, self.tag_parser.parse_all(doc.tags, "body", route.uri))
        query_params = self.tag_parser.parse_all(doc.tags, "query", route.uri)
        path_params = self.tag_parser.parse_all(doc.tags, "path", route.uri)

        authenticated = is_authenticated(doc.tags)
        response = self.response_resolver.resolve(
            route,
            doc.tags,
            {
                "rules": self.config.model_dump(),
                "body": body_params,
                "query": query_params,
            },
        )

        return RouteDescriptor(
            id=route_id(route.uri, route.methods),
            group=self.group_resolver.resolve(entity),
            title=doc.short,
            description=doc.long,
            methods=route.methods,
            uri=route.uri,
            path_parameters=path_params,
            query_parameters=query_params,
            body_parameters=body_params,
            authenticated=authenticated,
            response=response,
            showresponse=not is_empty(response),
            headers=apply_headers(self.config.headers, authenticated),
        )


def extract_routes(extractor: RouteMetadataExtractor, routes: list[Route], workers: int = 1) -> list[RouteDescriptor]:
    """Extract a batch of routes, preserving input order.

    The first failure propagates and no descriptors are returned.
    """
    if workers <= 1 or len(routes) <= 1:
        return [extractor.extract(route) for route in routes]

    logger.info(f"Extracting {len(routes)} routes with {workers} workers")
    with ThreadPoolExecutor(max_workers=workers) as executor:
        return list(executor.map(extractor.extract, routes))
