from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

CardId = int

NO_ID: CardId = -1  # card has no ^<13 digits> marker in the note yet


@dataclass(frozen=True)
class Range:
    start: int  # char offsets in the raw note text, half-open
    end: int

    def contains(self, other: "Range") -> bool:
        return other.start >= self.start and other.end <= self.end


@dataclass(frozen=True)
class HeadingEntry:
    level: int  # 1..6
    text: str
    offset: int


class CardKind(Enum):
    TAGGED = "tagged"
    INLINE = "inline"
    SPACED = "spaced"
    CLOZE = "cloze"

    @property
    def slots(self) -> tuple[str, ...]:
        return _SLOTS[self]

    @property
    def base_model(self) -> str:
        return _MODELS[self]


_SLOTS = {
    CardKind.TAGGED: ("Front", "Back"),
    CardKind.INLINE: ("Front", "Back"),
    CardKind.SPACED: ("Prompt",),
    CardKind.CLOZE: ("Text", "Extra"),
}

_MODELS = {
    CardKind.TAGGED: "Obsidian-basic",
    CardKind.INLINE: "Obsidian-basic",
    CardKind.SPACED: "Obsidian-spaced",
    CardKind.CLOZE: "Obsidian-cloze",
}

SOURCE_SLOT = "Source"


@dataclass
class Flashcard:
    kind: CardKind
    id: CardId
    deck: str
    original_text: str  # untransformed question / prompt / line
    fields: dict[str, str]
    reversed: bool
    range: Range
    tags: list[str] = field(default_factory=list)
    inserted: bool = False
    media: list[str] = field(default_factory=list)
    contains_code: bool = False

    @property
    def model_name(self) -> str:
        """Anki note type this card is written to."""
        name = self.kind.base_model
        if self.reversed:
            name += "-reversed"
        if self.contains_code:
            name += " (Code)"
        return name

    def id_marker(self, card_id: CardId | None = None) -> str:
        """Text a writer inserts at ``range.end`` to pin the card to *card_id*."""
        value = self.id if card_id is None else card_id
        if self.kind is CardKind.INLINE:
            return f" ^{value}"
        return f"^{value}\n"

    def matches(self, other_fields: dict[str, str]) -> bool:
        return all(other_fields.get(k) == v for k, v in self.fields.items())

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "id": self.id,
            "deck": self.deck,
            "model": self.model_name,
            "original_text": self.original_text,
            "fields": dict(self.fields),
            "reversed": self.reversed,
            "range": [self.range.start, self.range.end],
            "tags": list(self.tags),
            "inserted": self.inserted,
            "media": list(self.media),
            "contains_code": self.contains_code,
        }
