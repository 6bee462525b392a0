"""Drop code/math false positives and order the extracted cards."""

import logging
from typing import Iterable

from .grammar import Grammar
from .model import Flashcard, Range

logger = logging.getLogger(__name__)


def exclusion_ranges(text: str, grammar: Grammar) -> list[Range]:
    """Spans of fenced code, display math and inline math anywhere in *text*."""
    patterns = (grammar.obsidian_code_block, grammar.math_block, grammar.math_inline)
    return [
        Range(m.start(), m.end())
        for pattern in patterns
        for m in pattern.finditer(text)
    ]


def is_excluded(card: Flashcard, ranges: list[Range]) -> bool:
    return any(r.contains(card.range) for r in ranges)


def merge_cards(
    groups: Iterable[list[Flashcard]],
    text: str,
    grammar: Grammar,
    default_tag: str = "",
) -> list[Flashcard]:
    """
    Filter, concatenate and sort the output of every extractor.

    Cards come back ordered by ``range.end`` (not ``range.start``); the sort
    is stable, so ties keep extractor order.
    """
    ranges = exclusion_ranges(text, grammar)
    cards: list[Flashcard] = []
    for group in groups:
        for card in group:
            if is_excluded(card, ranges):
                logger.debug(
                    "dropping %s card at %d-%d inside code/math",
                    card.kind.value, card.range.start, card.range.end,
                )
                continue
            cards.append(card)

    cards.sort(key=lambda c: c.range.end)

    if default_tag:
        for card in cards:
            card.tags.append(default_tag)

    return cards
