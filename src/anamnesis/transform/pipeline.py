"""The fixed sequence of rewrites applied to every piece of card content."""

import logging
from dataclasses import dataclass
from typing import Iterable

from ..core.grammar import Grammar
from ..core.ports import EmbedLookup, Renderer
from .callouts import expand_callouts
from .links import substitute_note_links
from .mathjax import math_to_anki
from .media import substitute_audio_links, substitute_image_links

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TransformPipeline:
    grammar: Grammar
    renderer: Renderer
    vault_name: str = ""

    def parse_line(self, text: str) -> str:
        """
        Media -> note links -> math -> markdown render.

        Media embeds are rewritten before the note-link pass, which also
        matches ``![[...]]``.
        """
        text = substitute_audio_links(text, self.grammar)
        text = substitute_image_links(text, self.grammar)
        text = substitute_note_links(text, self.vault_name, self.grammar)
        text = math_to_anki(text, self.grammar)
        return self.renderer.render(text)

    def expand_callouts(self, html: str) -> str:
        return expand_callouts(html, self.grammar)

    def source_link(self, note_name: str) -> str:
        return substitute_note_links(f"[[{note_name}]]", self.vault_name, self.grammar)

    def resolve_embeds(self, text: str, embeds: EmbedLookup) -> str:
        """Append the content of every non-media ``![[ref]]`` found in *text*."""
        for m in self.grammar.embed_block.finditer(text):
            key = m.group(1)
            content = embeds.get(key)
            if content is None:
                logger.debug("no embed content for %r", key)
                continue
            text += content
        return text

    def contains_code(self, fields: Iterable[str]) -> bool:
        return any(self.grammar.code_block.search(f) for f in fields)
