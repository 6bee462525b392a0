"""Note-level metadata: target deck, note-wide tags and existing id markers."""

import logging
from dataclasses import dataclass, field
from typing import Any

from .adapters.yaml_codec import YamlFrontmatter
from .core.grammar import Grammar
from .core.model import CardId, Range
from .transform.tags import to_anki_tag

logger = logging.getLogger(__name__)


@dataclass
class NoteHeader:
    deck: str
    global_tags: list[str] = field(default_factory=list)
    body_offset: int = 0  # first character after the frontmatter block


@dataclass(frozen=True)
class IdMarker:
    id: CardId
    range: Range


def split_global_tags(raw: str, grammar: Grammar) -> list[str]:
    """Split ``[[Link]] #tag plain/nested`` into Anki tags."""
    tags = []
    for m in grammar.global_tags_splitter.finditer(raw):
        value = m.group(1) or m.group(2) or m.group(3)
        if value:
            tags.append(to_anki_tag(value.strip(), grammar))
    return tags


def _frontmatter_tags(value: Any, grammar: Grammar) -> list[str]:
    if isinstance(value, str):
        return split_global_tags(value, grammar)
    if isinstance(value, list):
        tags = []
        for item in value:
            if item is not None:
                tags.extend(split_global_tags(str(item), grammar))
        return tags
    return []


def read_header(
    text: str,
    grammar: Grammar,
    default_deck: str,
    fm_codec: YamlFrontmatter | None = None,
) -> NoteHeader:
    """
    Find the deck and note-wide tags of a note.

    Frontmatter keys ``cards-deck`` and ``tags`` win; otherwise the first
    ``cards-deck: ...`` / ``tags: ...`` line in the note is used.
    """
    codec = fm_codec or YamlFrontmatter()
    fm, _body = codec.decode(text)

    deck = fm.get("cards-deck")
    if not isinstance(deck, str) or not deck.strip():
        m = grammar.cards_deck_line.search(text)
        deck = m.group(1) if m else default_deck
    deck = deck.strip()

    if "tags" in fm:
        tags = _frontmatter_tags(fm["tags"], grammar)
    else:
        m = grammar.tags_line.search(text)
        tags = split_global_tags(m.group(1), grammar) if m else []

    logger.debug("note header: deck=%r tags=%r", deck, tags)
    return NoteHeader(deck=deck, global_tags=tags, body_offset=codec.frontmatter_end(text))


def id_markers(text: str, grammar: Grammar) -> list[IdMarker]:
    """Every ``^<13 digits>`` marker in *text*, in document order."""
    return [
        IdMarker(id=int(m.group(1)), range=Range(m.start(), m.end()))
        for m in grammar.id_marker.finditer(text)
    ]


def cards_to_delete(text: str, grammar: Grammar) -> list[CardId]:
    """Ids whose marker stands alone after a blank line (card text removed)."""
    return [int(m.group(1)) for m in grammar.cards_to_delete.finditer(text)]
