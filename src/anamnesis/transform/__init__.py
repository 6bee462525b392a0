"""Content transforms applied to extracted card text."""

from .callouts import build_callout, expand_callouts
from .links import substitute_note_links
from .mathjax import escape_markdown, math_to_anki
from .media import audio_links, image_links
from .pipeline import TransformPipeline
from .tags import parse_tags

__all__ = [
    "TransformPipeline",
    "audio_links",
    "build_callout",
    "escape_markdown",
    "expand_callouts",
    "image_links",
    "math_to_anki",
    "parse_tags",
    "substitute_note_links",
]
