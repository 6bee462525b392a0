"""Tests for grammar compilation."""

import pytest

from anamnesis.adapters.flashcard_parser import FlashcardParser
from anamnesis.core.grammar import GrammarError, compile_grammar
from anamnesis.core.settings import ParserSettings


class PlainRenderer:
    def render(self, markdown: str) -> str:
        return markdown


def test_compile_defaults():
    """Test that default settings compile."""
    grammar = compile_grammar(ParserSettings())

    assert grammar.headings.match("## Title #tag")
    assert grammar.cards_inline_style.search("Q::A")
    assert grammar.cards_spaced_style.search("Prompt #card/spaced")


def test_empty_separator_fails_fast():
    """Test that an empty separator is rejected at construction."""
    with pytest.raises(GrammarError):
        compile_grammar(ParserSettings(inline_separator=""))

    with pytest.raises(GrammarError):
        compile_grammar(ParserSettings(inline_separator_reverse=""))


def test_bad_tag_fails_fast():
    """Test that unusable tag names are rejected."""
    with pytest.raises(GrammarError):
        compile_grammar(ParserSettings(flashcards_tag=""))

    with pytest.raises(GrammarError):
        compile_grammar(ParserSettings(flashcards_tag="my card"))


def test_grammar_error_is_value_error():
    """Test that callers can catch configuration errors as ValueError."""
    with pytest.raises(ValueError):
        FlashcardParser(ParserSettings(inline_separator=""), PlainRenderer())


def test_longest_separator_tried_first():
    """Test that ':::' wins over '::' when both could match."""
    grammar = compile_grammar(
        ParserSettings(inline_separator="::", inline_separator_reverse=":::")
    )
    m = grammar.cards_inline_style.search("Q::: A")

    assert m is not None
    assert m.group(2) == "Q"
    assert m.group(3) == ":::"
    assert m.group(4) == "A"


def test_longest_separator_when_forward_is_longer():
    """Test the ordering when the forward separator is the longer one."""
    grammar = compile_grammar(
        ParserSettings(inline_separator=":::", inline_separator_reverse="::")
    )
    m = grammar.cards_inline_style.search("Q:::A")

    assert m.group(3) == ":::"


def test_separators_are_literal():
    """Test that regex metacharacters in separators are matched literally."""
    grammar = compile_grammar(
        ParserSettings(inline_separator="?", inline_separator_reverse="??")
    )
    m = grammar.cards_inline_style.search("Question?? Answer")

    assert m.group(3) == "??"


def test_unicode_tags_in_inline_cards():
    """Test that non-ASCII letters are accepted in card tags."""
    grammar = compile_grammar(ParserSettings())
    m = grammar.cards_inline_style.search("Frage::Antwort #Größe #été")

    assert m.group(4) == "Antwort"
    assert m.group(5) == " #Größe #été"


def test_update_recompiles_everything():
    """Test that update swaps in a grammar built from the new settings."""
    parser = FlashcardParser(ParserSettings(), PlainRenderer())
    parser.update(ParserSettings(flashcards_tag="flash", inline_separator=";;",
                                 inline_separator_reverse=";;;"))

    assert parser.grammar.cards_spaced_style.search("Prompt #flash/spaced")
    assert not parser.grammar.cards_spaced_style.search("Prompt #card/spaced")
    assert parser.grammar.cards_inline_style.search("Q;;A")


def test_failed_update_keeps_previous_grammar():
    """Test that a rejected update leaves the parser untouched."""
    parser = FlashcardParser(ParserSettings(), PlainRenderer())
    grammar = parser.grammar

    with pytest.raises(GrammarError):
        parser.update(ParserSettings(inline_separator=""))

    assert parser.grammar is grammar
    assert parser.settings.inline_separator == "::"
