"""Rewrite Obsidian math delimiters into the MathJax form Anki expects."""

import re

from ..core.grammar import Grammar

# Backslash goes first so the escapes added afterwards are not doubled
_MARKDOWN_ESCAPES = [
    ("\\", "\\\\"),
    ("*", "\\*"),
    ("#", "\\#"),
    ("/", "\\/"),
    ("(", "\\("),
    (")", "\\)"),
    ("[", "\\["),
    ("]", "\\]"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ("_", "\\_"),
    ("`", "\\`"),
]


def escape_markdown(text: str) -> str:
    """Escape *text* so the markdown renderer passes it through untouched."""
    for old, new in _MARKDOWN_ESCAPES:
        text = text.replace(old, new)
    return text


def math_to_anki(text: str, grammar: Grammar) -> str:
    """
    Convert ``$$...$$`` to ``\\[...\\]`` and ``$...$`` to ``\\(...\\)``.

    Delimiters are written with doubled backslashes; rendering collapses
    them to the single-backslash form MathJax reads.
    """

    def block_sub(m: re.Match[str]) -> str:
        return r"\\[" + escape_markdown(m.group(2)) + r" \\]"

    def inline_sub(m: re.Match[str]) -> str:
        return r"\\(" + escape_markdown(m.group(2)) + r"\\)"

    text = grammar.math_block.sub(block_sub, text)
    return grammar.math_inline.sub(inline_sub, text)
