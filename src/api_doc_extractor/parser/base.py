"""Unified data models for extracted route documentation.

The introspection adapter, the tag/rule parsers and the extractor all
exchange these models, and the renderer consumes RouteDescriptor.
"""

from typing import Any

from pydantic import BaseModel, Field, field_validator


class Tag(BaseModel):
    """A single structured-comment annotation, e.g. ``@queryParam page int``."""

    model_config = {"frozen": True}

    name: str
    content: str = ""


class DocBlock(BaseModel):
    """A parsed comment: short/long description plus tags in declaration order."""

    short: str = ""
    long: str = ""
    tags: list[Tag] = []


class ParameterDescriptor(BaseModel):
    """One documented path, query or body parameter."""

    name: str
    type: str  # canonical type, or a compound rule expression for rule-derived params
    description: str = ""
    required: bool = False
    example_value: Any = None


class HandlerRef(BaseModel):
    """The component/member pair implementing a route.

    ``component`` is a dotted module path, optionally followed by a class
    name (``app.controllers:UserController``); ``member`` names the
    function or method.
    """

    component: str
    member: str

    @classmethod
    def parse(cls, text: str) -> "HandlerRef":
        """Parse ``pkg.mod:Class.method``, ``pkg.mod:Class@method`` or ``pkg.mod:func``."""
        module, sep, attr = text.strip().partition(":")
        if not sep or not module or not attr:
            raise ValueError(f"Invalid handler reference: {text!r}")
        if "@" in attr:
            owner, _, member = attr.partition("@")
        else:
            owner, _, member = attr.rpartition(".")
        if not member:
            raise ValueError(f"Invalid handler reference: {text!r}")
        component = f"{module}:{owner}" if owner else module
        return cls(component=component, member=member)

    @property
    def module(self) -> str:
        return self.component.partition(":")[0]

    @property
    def owner(self) -> str | None:
        return self.component.partition(":")[2] or None

    def __str__(self) -> str:
        if self.owner:
            return f"{self.component}.{self.member}"
        return f"{self.component}:{self.member}"


class Route(BaseModel):
    """An addressable endpoint: URI, HTTP methods and the handler behind them."""

    uri: str
    methods: list[str]
    handler: HandlerRef

    @field_validator("methods")
    @classmethod
    def _normalize_methods(cls, methods: list[str]) -> list[str]:
        # HEAD is implied by GET
        upper = {m.upper() for m in methods}
        upper.discard("HEAD")
        return sorted(upper)

    @field_validator("handler", mode="before")
    @classmethod
    def _parse_handler(cls, value: Any) -> Any:
        if isinstance(value, str):
            return HandlerRef.parse(value)
        return value


class AnnotatedEntity(BaseModel):
    """What introspection knows about a route's handler."""

    model_config = {"arbitrary_types_allowed": True}

    handler: HandlerRef
    docstring: str | None = None
    container_docstring: str | None = None
    parameter_types: list[Any] = []
    rules: dict[str, Any] = {}


class RouteDescriptor(BaseModel):
    """The documentation unit for one route + method set."""

    id: str
    group: str
    title: str = ""
    description: str = ""
    methods: list[str]
    uri: str
    path_parameters: dict[str, ParameterDescriptor] = Field(default_factory=dict)
    query_parameters: dict[str, ParameterDescriptor] = Field(default_factory=dict)
    body_parameters: dict[str, ParameterDescriptor] = Field(default_factory=dict)
    authenticated: bool = False
    response: Any = None
    showresponse: bool = False
    headers: dict[str, str] = Field(default_factory=dict)
