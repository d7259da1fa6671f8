"""Introspection adapter: locates a route's handler and what is declared on it.

Handlers are referenced as ``pkg.module:Class.method`` or
``pkg.module:function``. Validation rules come from the first declared
parameter type that looks like a form request, i.e. a class exposing
``validator()`` or ``rules()``.
"""

import importlib
import inspect
import logging
import sys
import typing
from pathlib import Path
from typing import Any

from api_doc_extractor.errors import IntrospectionError
from api_doc_extractor.parser.base import AnnotatedEntity, HandlerRef, Route

logger = logging.getLogger("api_doc_extractor.introspection")


def is_form_request(candidate: Any) -> bool:
    return inspect.isclass(candidate) and (
        callable(getattr(candidate, "validator", None)) or callable(getattr(candidate, "rules", None))
    )


def rules_from_form_request(form_class: type) -> dict[str, Any]:
    """Instantiate ``form_class`` and read its rules.

    ``validator()`` takes precedence; its result may expose ``get_rules()``
    or a ``rules`` attribute/method.
    """
    try:
        form = form_class()
        if callable(getattr(form, "validator", None)):
            validator = form.validator()
            if callable(getattr(validator, "get_rules", None)):
                rules = validator.get_rules()
            else:
                rules = validator.rules
                if callable(rules):
                    rules = rules()
        else:
            rules = form.rules()
    except Exception as e:
        raise IntrospectionError(f"Cannot read validation rules from {form_class.__qualname__}: {e}") from e
    return dict(rules or {})


class PythonIntrospector:
    """Builds an AnnotatedEntity for a route by importing its handler."""

    def __init__(self, app_dirs: list[Path] | None = None):
        for app_dir in reversed(app_dirs or []):
            path = str(Path(app_dir).resolve())
            if path not in sys.path:
                sys.path.insert(0, path)

    def inspect(self, route: Route) -> AnnotatedEntity:
        container, member = self._locate(route.handler)
        parameter_types = self._parameter_types(member, route.handler)

        rules: dict[str, Any] = {}
        for param_type in parameter_types:
            if is_form_request(param_type):
                rules = rules_from_form_request(param_type)
                break

        logger.debug(f"Introspected {route.handler}: {len(parameter_types)} parameter types, {len(rules)} rules")
        return AnnotatedEntity(
            handler=route.handler,
            docstring=getattr(member, "__doc__", None),
            container_docstring=getattr(container, "__doc__", None),
            parameter_types=parameter_types,
            rules=rules,
        )

    def _locate(self, handler: HandlerRef) -> tuple[Any, Any]:
        try:
            container = importlib.import_module(handler.module)
        except ImportError as e:
            raise IntrospectionError(f"Cannot import module {handler.module!r} for {handler}: {e}") from e

        try:
            if handler.owner:
                for part in handler.owner.split("."):
                    container = getattr(container, part)
            member = getattr(container, handler.member)
        except AttributeError as e:
            raise IntrospectionError(f"Cannot locate handler {handler}: {e}") from e

        if not callable(member):
            raise IntrospectionError(f"Handler {handler} is not callable")
        return container, member

    def _parameter_types(self, member: Any, handler: HandlerRef) -> list[Any]:
        try:
            signature = inspect.signature(member)
        except (TypeError, ValueError) as e:
            raise IntrospectionError(f"Cannot read signature of {handler}: {e}") from e

        try:
            hints = typing.get_type_hints(member)
        except Exception as e:
            # A forward reference that does not resolve names a type we cannot locate
            raise IntrospectionError(f"Cannot resolve parameter types of {handler}: {e}") from e

        types = []
        for name in signature.parameters:
            if name in hints:
                types.append(hints[name])
        return types
