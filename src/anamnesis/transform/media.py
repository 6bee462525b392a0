"""Image and audio embeds in card content."""

from urllib.parse import unquote

from ..core.grammar import Grammar


def image_links(text: str, grammar: Grammar) -> list[str]:
    """File names of embedded images, wiki-style first, then markdown-style.

    Markdown image paths are URL-decoded (``my%20pic.png`` -> ``my pic.png``).
    """
    links = [m.group(1) for m in grammar.wiki_image_links.finditer(text)]
    links.extend(unquote(m.group(1)) for m in grammar.markdown_image_links.finditer(text))
    return links


def audio_links(text: str, grammar: Grammar) -> list[str]:
    return [m.group(1) for m in grammar.wiki_audio_links.finditer(text)]


def substitute_image_links(text: str, grammar: Grammar) -> str:
    text = grammar.wiki_image_links.sub(r"<img src='\1'>", text)
    return grammar.markdown_image_links.sub(r"<img src='\1'>", text)


def substitute_audio_links(text: str, grammar: Grammar) -> str:
    return grammar.wiki_audio_links.sub(r"[sound:\1]", text)
