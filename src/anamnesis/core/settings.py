"""Snapshot of the options the extraction engine is compiled from."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ParserSettings:
    """Flat, immutable configuration handed to the grammar and extractors."""
    flashcards_tag: str = "card"
    inline_separator: str = "::"
    inline_separator_reverse: str = ":::"
    inline_id: bool = False  # ^id marker on the same line as inline cards
    context_aware_mode: bool = True
    context_separator: str = " > "
    default_anki_tag: str = "obsidian"
    source_support: bool = False
    vault_name: str = ""
    default_deck: str = "Default"
