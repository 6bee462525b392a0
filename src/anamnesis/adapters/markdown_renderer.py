from markdown_it import MarkdownIt
from mdit_py_plugins.tasklists import tasklists_plugin

from ..core.ports import Renderer


class MarkdownItRenderer(Renderer):
    """
    CommonMark renderer with the extensions card content relies on:
    autolinks, tables, task lists, strikethrough and hard line breaks.
    Fenced code and the space after a heading marker come with CommonMark.
    """

    def __init__(self) -> None:
        self.md = (
            MarkdownIt("commonmark", {"breaks": True, "linkify": True})
            .enable(["table", "strikethrough", "linkify"])
            .use(tasklists_plugin)
        )

    def render(self, markdown: str) -> str:
        return self.md.render(markdown)
