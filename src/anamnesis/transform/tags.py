"""Card tag parsing."""

from ..core.grammar import Grammar

ANKI_HIERARCHY = "::"


def to_anki_tag(tag: str, grammar: Grammar) -> str:
    """Rewrite Obsidian's ``a/b`` nesting into Anki's ``a::b``."""
    return grammar.tag_hierarchy.sub(ANKI_HIERARCHY, tag)


def parse_tags(raw: str | None, global_tags: list[str], grammar: Grammar) -> list[str]:
    """
    Merge note-wide tags with the ``#tag #other/tag`` suffix of a card.

    Global tags come first; duplicates are kept.
    """
    tags = list(global_tags)
    if raw:
        for piece in raw.split("#"):
            piece = piece.strip()
            if piece:
                tags.append(to_anki_tag(piece, grammar))
    return tags
