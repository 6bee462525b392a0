import logging

from ..core.extract import EXTRACTORS, ExtractionContext
from ..core.grammar import Grammar, compile_grammar
from ..core.headings import index_headings
from ..core.merge import merge_cards
from ..core.model import Flashcard, HeadingEntry, Range
from ..core.ports import EmbedLookup, Renderer
from ..core.settings import ParserSettings
from ..note import read_header
from ..transform.pipeline import TransformPipeline
from .markdown_renderer import MarkdownItRenderer

logger = logging.getLogger(__name__)


class FlashcardParser:
    """
    Owns a settings snapshot, the grammar compiled from it and the renderer.

    ``update()`` recompiles everything; the previous grammar stays in place
    if compilation fails.
    """

    settings: ParserSettings
    grammar: Grammar
    pipeline: TransformPipeline

    def __init__(self, settings: ParserSettings | None = None, renderer: Renderer | None = None):
        self.renderer = renderer if renderer is not None else MarkdownItRenderer()
        self.update(settings or ParserSettings())

    def update(self, settings: ParserSettings) -> None:
        grammar = compile_grammar(settings)
        pipeline = TransformPipeline(grammar, self.renderer, settings.vault_name)
        self.settings, self.grammar, self.pipeline = settings, grammar, pipeline

    def headings(self, text: str) -> list[HeadingEntry]:
        return index_headings(text, self.grammar)

    def generate_flashcards(
        self,
        text: str,
        deck: str | None = None,
        note_name: str = "",
        global_tags: list[str] | None = None,
        embeds: EmbedLookup | None = None,
    ) -> list[Flashcard]:
        """
        Extract every card from *text*.

        Args:
            text: Full note content
            deck: Target deck (default: the configured default deck)
            note_name: Note name used for the Source field
            global_tags: Note-wide tags put in front of each card's own tags
            embeds: Embed reference -> markdown, for ``![[...]]`` in tagged answers

        Returns:
            Cards ordered by the end offset of their source range.
        """
        settings, grammar, pipeline = self.settings, self.grammar, self.pipeline

        ctx = ExtractionContext(
            settings=settings,
            grammar=grammar,
            pipeline=pipeline,
            deck=deck or settings.default_deck,
            headings=index_headings(text, grammar) if settings.context_aware_mode else (),
            global_tags=tuple(global_tags or ()),
            source=pipeline.source_link(note_name) if settings.source_support else "",
            embeds=embeds if embeds is not None else {},
        )

        groups = []
        for extract in EXTRACTORS:
            found = extract(text, ctx)
            logger.debug("%s: %d card(s)", extract.__name__, len(found))
            groups.append(found)

        return merge_cards(groups, text, grammar, settings.default_anki_tag)

    def parse_note(
        self,
        text: str,
        note_name: str = "",
        embeds: EmbedLookup | None = None,
        deck: str | None = None,
    ) -> list[Flashcard]:
        """
        Like :meth:`generate_flashcards`, taking deck and tags from the note itself.

        Cards lying entirely inside the frontmatter block are dropped; *deck*
        overrides the note's own deck.
        """
        header = read_header(text, self.grammar, self.settings.default_deck)
        cards = self.generate_flashcards(
            text,
            deck=deck or header.deck,
            note_name=note_name,
            global_tags=header.global_tags,
            embeds=embeds,
        )

        frontmatter = Range(0, header.body_offset)
        kept = [c for c in cards if not frontmatter.contains(c.range)]
        if len(kept) != len(cards):
            logger.debug("dropped %d card(s) inside frontmatter", len(cards) - len(kept))
        return kept
