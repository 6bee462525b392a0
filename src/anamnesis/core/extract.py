"""The four card extractors.

Each extractor is a pure function of the note text and an
:class:`ExtractionContext`; the card kinds differ only in data (slot names,
group layout), so all of them go through :func:`_build_card`.
"""

import itertools
import logging
import re
from dataclasses import dataclass, field
from typing import Callable, Sequence

from ..transform.media import audio_links, image_links
from ..transform.pipeline import TransformPipeline
from ..transform.tags import parse_tags
from .grammar import Grammar
from .headings import ancestor_context
from .model import NO_ID, SOURCE_SLOT, CardKind, Flashcard, HeadingEntry, Range
from .ports import EmbedLookup
from .settings import ParserSettings

logger = logging.getLogger(__name__)

CONTEXT_MARK = "<b>≡</b> "


@dataclass(frozen=True)
class ExtractionContext:
    """Everything an extractor needs besides the note text."""
    settings: ParserSettings
    grammar: Grammar
    pipeline: TransformPipeline
    deck: str
    headings: Sequence[HeadingEntry] = ()
    global_tags: Sequence[str] = ()
    source: str = ""  # rendered link back to the note, used with source_support
    embeds: EmbedLookup = field(default_factory=dict)


def _heading_level(prefix: str | None) -> int:
    hashes = (prefix or "").strip()
    return len(hashes) if hashes else -1


def _context(ctx: ExtractionContext, m: re.Match[str], prefix: str | None) -> list[str]:
    if not ctx.settings.context_aware_mode:
        return []
    # start - 1 so a heading card does not count itself as its own ancestor
    return ancestor_context(list(ctx.headings), m.start() - 1, _heading_level(prefix))


def _with_context(ctx: ExtractionContext, context: list[str], text: str) -> str:
    if not ctx.settings.context_aware_mode:
        return text
    return ctx.settings.context_separator.join([*context, text])


def _media(grammar: Grammar, *texts: str) -> list[str]:
    media: list[str] = []
    for text in texts:
        media.extend(image_links(text, grammar))
    for text in texts:
        media.extend(audio_links(text, grammar))
    return media


def _build_card(
    ctx: ExtractionContext,
    kind: CardKind,
    m: re.Match[str],
    original_text: str,
    values: list[str],
    reversed: bool,
    raw_tags: str | None,
    raw_id: str | None,
    media: list[str],
) -> Flashcard:
    fields = dict(zip(kind.slots, values))
    if ctx.settings.source_support:
        fields[SOURCE_SLOT] = ctx.source

    return Flashcard(
        kind=kind,
        id=int(raw_id) if raw_id else NO_ID,
        deck=ctx.deck,
        original_text=original_text,
        fields=fields,
        reversed=reversed,
        range=Range(m.start(), m.end()),
        tags=parse_tags(raw_tags, list(ctx.global_tags), ctx.grammar),
        inserted=bool(raw_id),
        media=media,
        contains_code=ctx.pipeline.contains_code(values),
    )


def extract_tagged(text: str, ctx: ExtractionContext) -> list[Flashcard]:
    """``﹇Question #card`` ... answer ... ``﹈`` blocks."""
    s = ctx.settings
    pipeline = ctx.pipeline
    reverse_tags = {
        f"#{s.flashcards_tag}-reverse".lower(),
        f"#{s.flashcards_tag}/reverse".lower(),
    }
    cards: list[Flashcard] = []

    for m in ctx.grammar.flashcards_with_tag.finditer(text):
        reversed = m.group(3).strip().lower() in reverse_tags
        context = _context(ctx, m, m.group(1))

        original_question = m.group(2).strip()
        question = original_question
        if context:
            question = (
                CONTEXT_MARK
                + s.context_separator.join(context)
                + "\n\n"
                + original_question
            )
        answer = m.group(5).strip()
        media = _media(ctx.grammar, question, answer)

        answer = pipeline.resolve_embeds(answer, ctx.embeds)
        question = pipeline.expand_callouts(pipeline.parse_line(question))
        answer = pipeline.expand_callouts(pipeline.parse_line(answer))

        cards.append(
            _build_card(
                ctx, CardKind.TAGGED, m, original_question, [question, answer],
                reversed, m.group(4), m.group(6), media,
            )
        )

    return cards


def extract_inline(text: str, ctx: ExtractionContext) -> list[Flashcard]:
    """``Question::Answer #tags ^id`` lines."""
    s = ctx.settings
    cards: list[Flashcard] = []

    for m in ctx.grammar.cards_inline_style.finditer(text):
        raw_question = m.group(2)
        # Note header lines look like inline cards to the grammar
        if raw_question.lstrip().lower().startswith(("cards-deck", "tags")):
            continue

        reversed = m.group(3).lower() == s.inline_separator_reverse.lower()
        context = _context(ctx, m, m.group(1))

        original_question = raw_question.strip()
        question = _with_context(ctx, context, original_question)
        answer = m.group(4).strip()
        media = _media(ctx.grammar, question, answer)

        question = ctx.pipeline.parse_line(question)
        answer = ctx.pipeline.parse_line(answer)

        cards.append(
            _build_card(
                ctx, CardKind.INLINE, m, original_question, [question, answer],
                reversed, m.group(5), m.group(6), media,
            )
        )

    return cards


def extract_spaced(text: str, ctx: ExtractionContext) -> list[Flashcard]:
    """Prompts ending in ``#card/spaced``."""
    cards: list[Flashcard] = []

    for m in ctx.grammar.cards_spaced_style.finditer(text):
        context = _context(ctx, m, m.group(1))

        original_prompt = m.group(2).strip()
        prompt = _with_context(ctx, context, original_prompt)
        media = _media(ctx.grammar, prompt)
        prompt = ctx.pipeline.parse_line(prompt)

        cards.append(
            _build_card(
                ctx, CardKind.SPACED, m, original_prompt, [prompt],
                False, m.group(4), m.group(5), media,
            )
        )

    return cards


def _math_ranges(text: str, grammar: Grammar) -> list[Range]:
    return [
        Range(mm.start(), mm.end())
        for pattern in (grammar.math_block, grammar.math_inline)
        for mm in pattern.finditer(text)
    ]


def _clozify(line: str, line_offset: int, math: list[Range], grammar: Grammar) -> str:
    """
    Rewrite ``{n:x}``, ``{x}`` and ``==x==`` into Anki cloze syntax.

    A curly marker lying entirely inside a math span stays as written;
    one that only overlaps a math span is still converted.
    """
    numbers = itertools.count(1)

    def curly_sub(c: re.Match[str]) -> str:
        span = Range(line_offset + c.start(), line_offset + c.end())
        if any(r.contains(span) for r in math):
            return c.group(0)
        number = c.group(2) or str(next(numbers))
        return "{{c" + number + "::" + c.group(3) + "}}"

    def highlight_sub(h: re.Match[str]) -> str:
        return "{{c1::" + h.group(2) + "}}"

    cloze = grammar.single_cloze_curly.sub(curly_sub, line)
    return grammar.single_cloze_highlight.sub(highlight_sub, cloze)


def extract_cloze(text: str, ctx: ExtractionContext) -> list[Flashcard]:
    """Lines holding ``{cloze}`` or ``==highlight==`` markers."""
    math = _math_ranges(text, ctx.grammar)
    cards: list[Flashcard] = []

    for m in ctx.grammar.cards_cloze_whole_line.finditer(text):
        line = m.group(2)
        cloze = _clozify(line, m.start(2), math, ctx.grammar)
        if cloze == line:
            logger.debug("no cloze outside math at offset %d, skipping", m.start())
            continue

        context = _context(ctx, m, m.group(1))
        original_line = line.strip()
        cloze = _with_context(ctx, context, ("<br>\n" + cloze).strip())
        media = _media(ctx.grammar, cloze)
        cloze = ctx.pipeline.parse_line(cloze)

        cards.append(
            _build_card(
                ctx, CardKind.CLOZE, m, original_line, [cloze, ""],
                False, m.group(4), m.group(5), media,
            )
        )

    return cards


Extractor = Callable[[str, ExtractionContext], list[Flashcard]]

EXTRACTORS: tuple[Extractor, ...] = (
    extract_tagged,
    extract_inline,
    extract_spaced,
    extract_cloze,
)
