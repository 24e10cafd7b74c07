"""
Job description renderer for a small markdown subset.

Supported:
    # / ## / ### headings
    "- ", "* " and "1. " list items (consecutive lines form one list)
    paragraphs with **bold**, *italic* and `code`

Anything else (links, images, quotes, tables, nested lists) is kept as
paragraph text. Malformed inline markers are left as literal text.
"""

import html
import re
from dataclasses import dataclass, field
from typing import Iterator, List, Union

_HEADING_MARKERS = (("### ", 3), ("## ", 2), ("# ", 1))
_NUMBERED_ITEM = re.compile(r"^\d+\.\s")
_BULLET_ITEM = re.compile(r"^[-*]\s")

_BOLD = re.compile(r"\*\*(.+?)\*\*")
_ITALIC = re.compile(r"\*(.+?)\*")
_CODE = re.compile(r"`(.+?)`")


@dataclass(frozen=True)
class Heading:
    level: int
    text: str
    type: str = "heading"


@dataclass(frozen=True)
class ListBlock:
    items: List[str] = field(default_factory=list)
    type: str = "list"


@dataclass(frozen=True)
class Paragraph:
    html: str
    type: str = "paragraph"


Block = Union[Heading, ListBlock, Paragraph]


def render_inline(text: str) -> str:
    """Escape HTML, then apply bold, italic and inline-code markers in that order."""
    out = html.escape(text, quote=False)
    out = _BOLD.sub(r"<strong>\1</strong>", out)
    out = _ITALIC.sub(r"<em>\1</em>", out)
    out = _CODE.sub(r"<code>\1</code>", out)
    return out


def _is_list_item(line: str) -> bool:
    return line.startswith("- ") or line.startswith("* ") or bool(_NUMBERED_ITEM.match(line))


def _strip_list_marker(line: str) -> str:
    return _NUMBERED_ITEM.sub("", _BULLET_ITEM.sub("", line, count=1), count=1)


def render_markdown(text: str) -> Iterator[Block]:
    """
    Yield display blocks for ``text`` line by line.

    Open list items are flushed as one ListBlock as soon as a non-list
    line (including a blank one) is seen, and at end of input.
    """
    list_items: List[str] = []

    for raw_line in (text or "").split("\n"):
        line = raw_line.strip()

        heading = next(
            ((level, line[len(marker):]) for marker, level in _HEADING_MARKERS if line.startswith(marker)),
            None,
        )
        if heading is not None:
            if list_items:
                yield ListBlock(items=list_items)
                list_items = []
            yield Heading(level=heading[0], text=heading[1])
            continue

        if _is_list_item(line):
            list_items.append(_strip_list_marker(line))
            continue

        if list_items:
            yield ListBlock(items=list_items)
            list_items = []

        if not line:
            continue

        yield Paragraph(html=render_inline(line))

    if list_items:
        yield ListBlock(items=list_items)


def render_description(text: str) -> List[dict]:
    """Render ``text`` into JSON-ready block dictionaries."""
    blocks = []
    for block in render_markdown(text):
        if isinstance(block, Heading):
            blocks.append({"type": block.type, "level": block.level, "text": block.text})
        elif isinstance(block, ListBlock):
            blocks.append({"type": block.type, "items": list(block.items)})
        else:
            blocks.append({"type": block.type, "html": block.html})
    return blocks
