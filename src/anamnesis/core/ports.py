from typing import Mapping, Protocol

# Embed reference (the target inside ![[...]]) -> pre-rendered markdown
EmbedLookup = Mapping[str, str]


class Renderer(Protocol):
    """
    Markdown -> HTML conversion. Treated as a pure function of its input.
    """

    def render(self, markdown: str) -> str:
        pass
