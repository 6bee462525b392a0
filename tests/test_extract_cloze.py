"""Tests for cloze lines."""

from anamnesis.adapters.flashcard_parser import FlashcardParser
from anamnesis.core.model import CardKind
from anamnesis.core.settings import ParserSettings


class PlainRenderer:
    def render(self, markdown: str) -> str:
        return markdown


def make_parser(**kwargs) -> FlashcardParser:
    kwargs.setdefault("default_anki_tag", "")
    return FlashcardParser(ParserSettings(**kwargs), PlainRenderer())


def test_numbered_cloze():
    """Test that explicit numbers are kept."""
    parser = make_parser()
    text = "The {2:mitochondria} is the {1:powerhouse} of the cell\n"
    cards = parser.generate_flashcards(text)

    assert len(cards) == 1
    card = cards[0]
    assert card.kind is CardKind.CLOZE
    assert card.model_name == "Obsidian-cloze"
    assert card.fields["Text"].endswith(
        "The {{c2::mitochondria}} is the {{c1::powerhouse}} of the cell"
    )
    assert card.fields["Extra"] == ""
    assert card.original_text == "The {2:mitochondria} is the {1:powerhouse} of the cell"


def test_unnumbered_cloze_counts_up():
    """Test that bare markers are numbered from 1 in line order."""
    parser = make_parser()
    cards = parser.generate_flashcards("A {x} and {y}\n")

    assert cards[0].fields["Text"].endswith("A {{c1::x}} and {{c2::y}}")


def test_highlight_cloze():
    """Test that ==highlights== become the first cloze."""
    parser = make_parser()
    cards = parser.generate_flashcards("The ==sun== is hot\n")

    assert len(cards) == 1
    assert "The {{c1::sun}} is hot" in cards[0].fields["Text"]


def test_text_starts_with_break():
    """Test the line break put in front of the cloze text."""
    parser = make_parser()
    cards = parser.generate_flashcards("The {cell}\n")

    assert cards[0].fields["Text"] == "<br>\nThe {{c1::cell}}"


def test_cloze_with_context():
    """Test that the heading chain leads the cloze text."""
    parser = make_parser()
    cards = parser.generate_flashcards("# Bio\nThe {cell}\n")

    assert cards[0].fields["Text"] == "Bio > <br>\nThe {{c1::cell}}"


def test_cloze_inside_math_is_not_a_card():
    """Test that braces of a formula do not make a cloze."""
    parser = make_parser()

    assert parser.generate_flashcards("Value $f{x}$ here\n") == []
    assert parser.generate_flashcards("$$\n\\frac{a}{b}\n$$\n") == []


def test_cloze_partially_overlapping_math_is_converted():
    """Test that only markers entirely inside math are left alone."""
    parser = make_parser()
    cards = parser.generate_flashcards("Set {a $b} c$\n")

    assert len(cards) == 1
    assert "{{c1::a " in cards[0].fields["Text"]


def test_cloze_next_to_math():
    """Test a real cloze on a line that also holds a formula."""
    parser = make_parser()
    cards = parser.generate_flashcards("Energy {E} is $m c^2$\n")

    assert len(cards) == 1
    assert "{{c1::E}}" in cards[0].fields["Text"]
    assert r"\\(m c^2\\)" in cards[0].fields["Text"]


def test_cloze_tags_on_next_line():
    """Test the tag line below a cloze."""
    parser = make_parser()
    cards = parser.generate_flashcards("The {cell} is small\n#bio/cell\n")

    assert len(cards) == 1
    assert cards[0].tags == ["bio::cell"]


def test_cloze_id():
    """Test the id marker below a cloze."""
    parser = make_parser()
    cards = parser.generate_flashcards("The {1:sun}\n^1234567890123\n")

    assert cards[0].id == 1234567890123
    assert cards[0].inserted is True
    assert cards[0].id_marker() == "^1234567890123\n"


def test_cloze_in_list_item():
    """Test that the list marker is not part of the card text."""
    parser = make_parser()
    cards = parser.generate_flashcards("- The {cell}\n")

    assert cards[0].original_text == "The {cell}"
