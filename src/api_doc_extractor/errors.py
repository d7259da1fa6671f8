"""Exceptions raised while extracting route documentation."""


class ExtractionError(Exception):
    """Base class for all extraction failures."""


class TagParseError(ExtractionError):
    """A parameter tag's content does not follow ``<name> <type> ...``."""

    def __init__(self, tag_name: str, content: str, uri: str | None = None):
        self.tag_name = tag_name
        self.content = content
        self.uri = uri
        where = f" on route {uri}" if uri else ""
        super().__init__(
            f"Cannot parse @{tag_name} {content!r}{where}: expected '<name> <type> [required] [description]'"
        )


class IntrospectionError(ExtractionError):
    """The handler, its container or a declared parameter type cannot be located."""


class ManifestError(ExtractionError):
    """The route manifest is malformed."""


class ConfigError(ExtractionError):
    """The configuration file cannot be read or is malformed."""


class ResponseResolutionError(ExtractionError):
    """A documented sample response cannot be read."""
