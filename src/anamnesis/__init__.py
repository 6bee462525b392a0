"""anamnesis - Anki flashcards from Obsidian notes."""

__version__ = "0.4.0"
