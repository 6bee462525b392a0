"""Pattern grammar for the four card notations and the note constructs around them.

Every pattern is rebuilt from a :class:`ParserSettings` snapshot in one go;
there is no incremental patching of individual patterns.
"""

import logging
import re
from dataclasses import dataclass

from .settings import ParserSettings

logger = logging.getLogger(__name__)

FLAGS = re.IGNORECASE | re.MULTILINE

IMAGE_EXTS = "png|jpg|jpeg|gif|bmp|svg|tiff|webp"
AUDIO_EXTS = "mp3|webm|wav|m4a|ogg|3gp|flac"
EMBED_MEDIA_EXTS = "png|jpg|jpeg|gif|bmp|svg|tiff|mp3|webm|wav|m4a|ogg|3gp|flac"

# Unicode letters only (no digits, no underscore)
LETTER = r"[^\W\d_]"
ID = r"\^(\d{13})(?!\d)"


class GrammarError(ValueError):
    """Settings that cannot be turned into a working grammar."""


@dataclass(frozen=True)
class Grammar:
    headings: re.Pattern[str]
    wiki_image_links: re.Pattern[str]
    markdown_image_links: re.Pattern[str]
    wiki_audio_links: re.Pattern[str]
    note_link: re.Pattern[str]
    obsidian_code_block: re.Pattern[str]
    code_block: re.Pattern[str]  # <code> in rendered html
    math_block: re.Pattern[str]
    math_inline: re.Pattern[str]
    cards_deck_line: re.Pattern[str]
    tags_line: re.Pattern[str]
    cards_to_delete: re.Pattern[str]
    id_marker: re.Pattern[str]
    global_tags_splitter: re.Pattern[str]
    tag_hierarchy: re.Pattern[str]
    embed_block: re.Pattern[str]
    callout_block: re.Pattern[str]
    flashcards_with_tag: re.Pattern[str]
    cards_inline_style: re.Pattern[str]
    cards_spaced_style: re.Pattern[str]
    cards_cloze_whole_line: re.Pattern[str]
    single_cloze_curly: re.Pattern[str]
    single_cloze_highlight: re.Pattern[str]


def _check(settings: ParserSettings) -> None:
    tag = settings.flashcards_tag
    if not tag:
        raise GrammarError("flashcards tag must not be empty")
    if re.search(r"[\s#]", tag):
        raise GrammarError(f"flashcards tag {tag!r} must not contain whitespace or '#'")
    for name in ("inline_separator", "inline_separator_reverse"):
        value = getattr(settings, name)
        if not value:
            raise GrammarError(f"{name} must not be empty")
        if "\n" in value:
            raise GrammarError(f"{name} must fit on a single line")


def _inline_pattern(settings: ParserSettings) -> str:
    sep = settings.inline_separator
    rev = settings.inline_separator_reverse
    # Longest first, otherwise "::" wins over ":::" and the reverse flag is lost
    longest, shortest = (sep, rev) if len(sep) >= len(rev) else (rev, sep)
    separators = f"{re.escape(longest)}|{re.escape(shortest)}"
    tags = rf"((?: *#(?:{LETTER}|[\-/_])+)+)"
    prefix = r"( {0,3}#{0,6})?(?:[\t ]*(?:\d\.|[-+*]|#{1,6}))?"
    if settings.inline_id:
        return prefix + rf"(.+?) ?({separators}) ?(.+?){tags}?(?:\s+{ID}|$)"
    return prefix + rf"(.+?) ?({separators}) ?(.+?)(?:{tags}|$)(?:\n{ID})?"


def compile_grammar(settings: ParserSettings) -> Grammar:
    """Build every pattern for *settings*.

    Raises:
        GrammarError: if the settings cannot produce a valid grammar.
    """
    _check(settings)
    tag = re.escape(settings.flashcards_tag)

    try:
        grammar = Grammar(
            headings=re.compile(r"^ {0,3}(#{1,6}) +([^\n]+?) ?((?: *#\S+)*) *$", FLAGS),
            wiki_image_links=re.compile(
                rf"!\[\[([^\]\n]*?\.(?:{IMAGE_EXTS}))[^\]\n]*?\]\]", FLAGS
            ),
            markdown_image_links=re.compile(
                rf"!\[\]\(([^)\n]*?\.(?:{IMAGE_EXTS}))[^)\n]*?\)", FLAGS
            ),
            wiki_audio_links=re.compile(
                rf"!\[\[([^\]\n]*?\.(?:{AUDIO_EXTS}))[^\]\n]*?\]\]", FLAGS
            ),
            note_link=re.compile(r"\[\[(.+?)(?:\|(.+?))?\]\]", FLAGS),
            obsidian_code_block=re.compile(r"```[\s\S]*?```(?:\n|$)", FLAGS),
            code_block=re.compile(r"<code\b[^>]*>(.*?)</code>", FLAGS | re.DOTALL),
            math_block=re.compile(r"(\$\$)(.*?)(\$\$)", FLAGS | re.DOTALL),
            math_inline=re.compile(r"(\$)(.*?)(\$)", FLAGS),
            cards_deck_line=re.compile(r"^cards-deck: *(.+?) *$", FLAGS),
            tags_line=re.compile(r"^tags: *(.+?) *$", FLAGS),
            cards_to_delete=re.compile(rf"^\s*\n{ID}(?:\n\s*?)?", re.MULTILINE),
            id_marker=re.compile(rf"{ID}\s*", re.MULTILINE),
            global_tags_splitter=re.compile(
                r"\[\[(.*?)\]\]|#([\w:\-/]+)|([\w:\-/]+)", FLAGS
            ),
            tag_hierarchy=re.compile(r"/"),
            embed_block=re.compile(
                rf"!\[\[(?![^\]]*\.(?:{EMBED_MEDIA_EXTS})\]\])(.*?)\]\]", FLAGS
            ),
            callout_block=re.compile(
                r"<blockquote>\s*<p>\[!([\w-]+)\]([+-]?)[ \t]*(.*?)"
                r"(?:<br\s*/?>\s*(.*?))?</p>\s*</blockquote>\n?",
                FLAGS | re.DOTALL,
            ),
            flashcards_with_tag=re.compile(
                rf"﹇[ \t]*\n?( {{0,3}}#*)([\s\S]+?)(#{tag}(?:[/-]reverse)?)"
                rf" *?((?: *#.+)?) ?\n+([\s\S]*?)\s*﹈[ \t]*(?:\n?{ID})?",
                FLAGS,
            ),
            cards_inline_style=re.compile(_inline_pattern(settings), FLAGS),
            cards_spaced_style=re.compile(
                rf"( {{0,3}}#*)((?:[^\n]\n?)+?)(#{tag}[/-]spaced)"
                rf"((?: *#(?:{LETTER}|[\-/_])+)*) *\n?(?:{ID})?",
                FLAGS,
            ),
            cards_cloze_whole_line=re.compile(
                r"( {0,3}#{0,6})?(?:[\t ]*(?:\d\.|[-+*]|#{1,6}))?"
                r"(.*?(==.+?==|\{.+?\}).*?)"
                rf"(\n(?: *#(?:[\w\-/]|[^\x00-\x7f\s])+)+|$)(?:\n{ID})?",
                FLAGS,
            ),
            single_cloze_curly=re.compile(r"(\{(?:(\d+):)?(.+?)\})"),
            single_cloze_highlight=re.compile(r"(==(.+?)==)"),
        )
    except re.error as e:
        raise GrammarError(f"cannot compile card grammar: {e}") from e

    logger.debug(
        "compiled grammar for tag %r, separators %r/%r",
        settings.flashcards_tag,
        settings.inline_separator,
        settings.inline_separator_reverse,
    )
    return grammar
