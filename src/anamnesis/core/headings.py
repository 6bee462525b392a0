"""Heading index and ancestor lookup used to give cards their context."""

from .grammar import Grammar
from .model import HeadingEntry


def index_headings(text: str, grammar: Grammar) -> list[HeadingEntry]:
    """
    Collect every heading outside fenced code, in document order.

    Offsets are character offsets of the heading line from the start of *text*.
    Only ``\\n`` ends a line, as in the card grammar.
    """
    headings: list[HeadingEntry] = []
    offset = 0
    in_fence = False

    for ln in text.split("\n"):
        line_stripped = ln.rstrip("\r")

        if line_stripped.strip().startswith("```"):
            in_fence = not in_fence

        if not in_fence:
            m = grammar.headings.match(line_stripped)
            if m:
                headings.append(
                    HeadingEntry(
                        level=len(m.group(1)),
                        text=m.group(2).strip(),
                        offset=offset,
                    )
                )

        offset += len(ln) + 1

    return headings


def ancestor_context(
    headings: list[HeadingEntry], offset: int, heading_level: int = -1
) -> list[str]:
    """
    Get the chain of headings enclosing *offset*, outermost first.

    Args:
        headings: Output of :func:`index_headings`
        offset: Position whose ancestors are wanted
        heading_level: Level of the line at *offset* if it is itself a
            heading, -1 for any other line

    Returns:
        Heading texts; each entry is strictly shallower than the next one.
    """
    context: list[str] = []
    cursor = offset
    tracked_level = 6 if heading_level == -1 else heading_level - 1

    for i in range(len(headings) - 1, -1, -1):
        heading = headings[i]
        if heading.offset < cursor and heading.level <= tracked_level:
            context.insert(0, heading.text)
            cursor = heading.offset
            tracked_level = heading.level - 1  # look for the parent next

    return context
