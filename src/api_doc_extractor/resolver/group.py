"""Resolves the documentation group of a route's handler."""

from api_doc_extractor.parser.base import AnnotatedEntity, DocBlock
from api_doc_extractor.parser.docblock import parse_docblock

DEFAULT_GROUP = "general"


def find_group(doc: DocBlock) -> str | None:
    """Content of the first ``@group`` tag, if any."""
    for tag in doc.tags:
        if tag.name == "group":
            return tag.content
    return None


class GroupResolver:
    """A ``@group`` on the handler beats one on its container (class or module)."""

    def __init__(self, default: str = DEFAULT_GROUP):
        self.default = default

    def resolve(self, entity: AnnotatedEntity) -> str:
        for comment in (entity.docstring, entity.container_docstring):
            group = find_group(parse_docblock(comment))
            if group is not None:
                return group
        return self.default
