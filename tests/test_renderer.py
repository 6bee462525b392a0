"""Tests for the markdown-it renderer and cards rendered through it."""

from anamnesis.adapters.flashcard_parser import FlashcardParser
from anamnesis.adapters.markdown_renderer import MarkdownItRenderer
from anamnesis.core.settings import ParserSettings

RENDERER = MarkdownItRenderer()


def test_strikethrough():
    assert "<s>gone</s>" in RENDERER.render("~~gone~~")


def test_hard_line_breaks():
    """Test that a single newline becomes a <br>."""
    assert "<br" in RENDERER.render("a\nb")


def test_tables():
    html = RENDERER.render("| a | b |\n| --- | --- |\n| 1 | 2 |\n")

    assert "<table>" in html
    assert "<td>1</td>" in html


def test_task_lists():
    html = RENDERER.render("- [ ] todo\n- [x] done\n")

    assert 'type="checkbox"' in html
    assert "checked" in html


def test_linkify():
    html = RENDERER.render("see https://example.com")

    assert '<a href="https://example.com">' in html


def test_heading_needs_space():
    """Test that #tag stays a paragraph."""
    assert "<h1>" not in RENDERER.render("#tag")
    assert "<h1>Title</h1>" in RENDERER.render("# Title")


def test_fenced_code():
    html = RENDERER.render("```python\nx = 1\n```\n")

    assert "<code" in html


def test_card_with_code_uses_code_model():
    """Test that rendered code switches the card to the code note type."""
    parser = FlashcardParser(ParserSettings())
    cards = parser.generate_flashcards("What does this print::`print(1)`\n")

    assert len(cards) == 1
    assert cards[0].contains_code is True
    assert cards[0].model_name == "Obsidian-basic (Code)"
    assert "<code>print(1)</code>" in cards[0].fields["Back"]


def test_card_without_code():
    parser = FlashcardParser(ParserSettings())
    cards = parser.generate_flashcards("Q::A\n")

    assert cards[0].contains_code is False
    assert cards[0].fields["Back"] == "<p>A</p>\n"


def test_callout_in_tagged_answer():
    """Test that an answer written as a callout is expanded."""
    parser = FlashcardParser(ParserSettings())
    text = """﹇
Q #card
> [!note] Title
> Body
﹈
"""
    cards = parser.generate_flashcards(text)

    back = cards[0].fields["Back"]
    assert 'data-callout="note"' in back
    assert '<div class="callout-title-inner">Title</div>' in back
    assert "<p>Body</p>" in back


def test_math_survives_rendering():
    """Test that MathJax delimiters come out with single backslashes."""
    parser = FlashcardParser(ParserSettings())
    cards = parser.generate_flashcards("Area::$a_1 * b$\n")

    assert r"\(a_1 * b\)" in cards[0].fields["Back"]
