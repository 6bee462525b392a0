"""Tests for heading indexing and ancestor context."""

from anamnesis.core.grammar import compile_grammar
from anamnesis.core.headings import ancestor_context, index_headings
from anamnesis.core.model import HeadingEntry
from anamnesis.core.settings import ParserSettings

GRAMMAR = compile_grammar(ParserSettings())


def test_index_headings_offsets():
    """Test that headings are indexed with level, text and offset."""
    text = """# A

intro

## B

para
"""
    headings = index_headings(text, GRAMMAR)

    assert headings == [
        HeadingEntry(level=1, text="A", offset=0),
        HeadingEntry(level=2, text="B", offset=text.index("## B")),
    ]


def test_index_headings_skips_fences():
    """Test that heading-like lines inside fenced code are ignored."""
    text = """```python
# not a heading
```
# Real
"""
    headings = index_headings(text, GRAMMAR)

    assert [h.text for h in headings] == ["Real"]
    assert headings[0].offset == text.index("# Real")


def test_index_headings_strips_trailing_tags():
    """Test that trailing hashtags are not part of the heading text."""
    headings = index_headings("## Cells #bio #cell\n", GRAMMAR)

    assert headings[0].text == "Cells"
    assert headings[0].level == 2


def test_index_headings_requires_space():
    """Test that '#word' is a tag, not a heading."""
    assert index_headings("#tag\n####### seven\n", GRAMMAR) == []


def test_context_for_paragraph():
    """Test the ancestor chain of a paragraph under H1 and H2."""
    text = """# A

## B

para
"""
    headings = index_headings(text, GRAMMAR)

    assert ancestor_context(headings, text.index("para"), -1) == ["A", "B"]


def test_context_for_heading_line():
    """Test that a heading does not include itself in its context."""
    text = """# A

## B
"""
    headings = index_headings(text, GRAMMAR)
    offset = text.index("## B")

    assert ancestor_context(headings, offset - 1, 2) == ["A"]


def test_context_skips_siblings_and_deeper_headings():
    """Test that only strictly shallower headings form the chain."""
    text = """# Top

## First

### Deep

## Second

para
"""
    headings = index_headings(text, GRAMMAR)

    assert ancestor_context(headings, text.index("para"), -1) == ["Top", "Second"]


def test_context_before_any_heading():
    """Test that text above the first heading has no context."""
    text = "intro\n# A\n"
    headings = index_headings(text, GRAMMAR)

    assert ancestor_context(headings, 0, -1) == []


def test_index_headings_only_newline_ends_a_line():
    """Test that a form feed does not start a new heading line."""
    text = "intro\x0c# Not a heading\nQ::A\n"

    assert index_headings(text, GRAMMAR) == []


def test_index_headings_crlf_offsets():
    text = "# A\r\n\r\n## B\r\n"
    headings = index_headings(text, GRAMMAR)

    assert [(h.text, h.offset) for h in headings] == [("A", 0), ("B", text.index("## B"))]
