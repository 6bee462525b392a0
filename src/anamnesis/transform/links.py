"""Note-link substitution for card content."""

import re
from urllib.parse import quote

from ..core.grammar import Grammar

# Characters encodeURIComponent leaves alone
_URI_SAFE = "-_.!~*'()"


def encode_uri_component(value: str) -> str:
    return quote(value, safe=_URI_SAFE)


def note_href(vault_name: str, target: str) -> str:
    """obsidian:// URL opening *target* in *vault_name*."""
    return (
        f"obsidian://open?vault={encode_uri_component(vault_name)}"
        f"&file={encode_uri_component(target)}.md"
    )


def substitute_note_links(text: str, vault_name: str, grammar: Grammar) -> str:
    """Turn ``[[target]]`` / ``[[target|alias]]`` into clickable anchors.

    The alias is the anchor text when present, the target otherwise.
    """

    def link_sub(m: re.Match[str]) -> str:
        target = m.group(1)
        alias = m.group(2) or target
        return f'<a href="{note_href(vault_name, target)}">{alias}</a>'

    return grammar.note_link.sub(link_sub, text)
