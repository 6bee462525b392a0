"""Translate card source ranges into line positions."""

from typing import Any

from .core.model import Flashcard, Range


def char_offset_to_line(text: str, offset: int) -> int:
    """
    Convert character offset to line number (1-based).

    Args:
        text: The full text
        offset: Character offset (0-based)

    Returns:
        Line number (1-based)
    """
    if offset <= 0:
        return 1
    return text.count("\n", 0, min(offset, len(text))) + 1


def locate_range(text: str, rng: Range) -> dict[str, Any]:
    """Offsets and 1-based line numbers of *rng* in *text*."""
    # end is exclusive; the last character sits at end - 1
    return {
        "range": {"start": rng.start, "end": rng.end},
        "lines": {
            "start": char_offset_to_line(text, rng.start),
            "end": char_offset_to_line(text, max(rng.start, rng.end - 1)),
        },
    }


def locate_card(text: str, card: Flashcard, format_type: str = "json") -> dict[str, Any] | str:
    """
    Card data plus its position in the note.

    Returns:
        A dict for ``json``; for ``tsv`` one line of
        kind, id, start, end, start_line, end_line, original text
    """
    location = locate_range(text, card.range)
    if format_type == "tsv":
        original = card.original_text.replace("\t", " ").replace("\n", " ")
        return (
            f"{card.kind.value}\t{card.id}\t{card.range.start}\t{card.range.end}\t"
            f"{location['lines']['start']}\t{location['lines']['end']}\t{original}"
        )
    result = card.to_dict()
    result["lines"] = location["lines"]
    return result
