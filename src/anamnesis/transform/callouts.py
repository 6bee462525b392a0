"""Expand rendered ``> [!type]`` blockquotes into Obsidian-styled callouts."""

import re

from ..core.grammar import Grammar
from .icons import CALLOUT_ICONS, CHEVRON_DOWN, DEFAULT_ICON


def callout_icon(callout_type: str) -> str:
    return CALLOUT_ICONS.get(callout_type.lower(), DEFAULT_ICON)


def build_callout(callout_type: str, fold: str, label: str, content: str) -> str:
    """
    HTML for one callout.

    ``fold`` is the marker after the type: ``-`` renders collapsed, ``+`` or
    nothing renders expanded.
    """
    callout_type = callout_type.lower()
    collapsed = fold == "-"
    display = "none" if collapsed else "block"
    is_collapsed = " is-collapsed" if collapsed else ""
    collapsible = " is-collapsible" if fold else ""

    return (
        f'<div data-callout-metadata="" data-callout-fold="{fold}" '
        f'data-callout="{callout_type}" class="callout{collapsible}{is_collapsed}">\n'
        f'<div class="callout-title">\n'
        f'<div class="callout-icon">{callout_icon(callout_type)}</div>\n'
        f'<div class="callout-title-inner">{label}</div>\n'
        f'<div class="callout-fold{is_collapsed}">{CHEVRON_DOWN}</div>\n'
        f"</div>\n"
        f'<div class="callout-content" style="display:{display};">\n'
        f"<p>{content}</p>\n"
        f"</div>\n"
        f"</div>\n"
    )


def expand_callouts(html: str, grammar: Grammar) -> str:
    """Replace every rendered callout blockquote in *html*."""

    def callout_sub(m: re.Match[str]) -> str:
        callout_type, fold, label, content = m.group(1, 2, 3, 4)
        label = label.strip() or callout_type.capitalize()
        return build_callout(callout_type, fold, label, (content or "").strip())

    return grammar.callout_block.sub(callout_sub, html)
