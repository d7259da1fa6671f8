"""Parse handler comments (docstrings or ``/** */`` blocks) into a DocBlock."""

import inspect
import re

from api_doc_extractor.parser.base import DocBlock, Tag

TAG_LINE = re.compile(r"^@([A-Za-z_][\w-]*)(?:\s+(.*))?$")
COMMENT_DECORATION = re.compile(r"^\s*\*(?!/)\s?")


def _strip_comment(text: str) -> str:
    text = text.strip()
    if text.startswith("/**"):
        text = text[3:]
        if text.endswith("*/"):
            text = text[:-2]
        text = "\n".join(COMMENT_DECORATION.sub("", line) for line in text.splitlines())
    return inspect.cleandoc(text)


def _paragraphs(lines: list[str]) -> list[list[str]]:
    paragraphs: list[list[str]] = []
    current: list[str] = []
    for line in lines:
        if line.strip():
            current.append(line.rstrip())
        elif current:
            paragraphs.append(current)
            current = []
    if current:
        paragraphs.append(current)
    return paragraphs


def parse_docblock(text: str | None) -> DocBlock:
    """Split a comment into short description, long description and tags.

    Example:
        >>> doc = parse_docblock('''Show a user.
        ...
        ... @group Users
        ... @pathParam id integer required The user ID. Example: 4
        ... ''')
        >>> doc.short, [t.name for t in doc.tags]
        ('Show a user.', ['group', 'pathParam'])
    """
    if not text or not text.strip():
        return DocBlock()

    description_lines: list[str] = []
    tags: list[tuple[str, list[str]]] = []

    for line in _strip_comment(text).splitlines():
        match = TAG_LINE.match(line.strip())
        if match:
            tags.append((match.group(1), [match.group(2) or ""]))
        elif tags:
            tags[-1][1].append(line.strip())
        else:
            description_lines.append(line)

    paragraphs = _paragraphs(description_lines)
    short = " ".join(line.strip() for line in paragraphs[0]) if paragraphs else ""
    long = "\n\n".join("\n".join(p) for p in paragraphs[1:])

    return DocBlock(
        short=short,
        long=long,
        tags=[Tag(name=name, content="\n".join(parts).strip()) for name, parts in tags],
    )
