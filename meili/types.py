"""Identifiers and word positions shared by indexing and search."""

from __future__ import annotations

from dataclasses import dataclass

U16_MAX = 0xFFFF
U64_MAX = 0xFFFF_FFFF_FFFF_FFFF


def _check_unsigned(name: str, value: int, maximum: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, not {type(value).__name__}")
    if not 0 <= value <= maximum:
        raise ValueError(f"{name} must be between 0 and {maximum}, got {value}")


@dataclass(frozen=True, order=True)
class DocumentId:
    """Internally generated unique identifier of a document."""

    value: int

    def __post_init__(self) -> None:
        _check_unsigned("document id", self.value, U64_MAX)

    def __int__(self) -> int:
        return self.value


@dataclass(frozen=True, order=True)
class DocIndex:
    """Position of a word in a document: attribute, word and character offsets."""

    document_id: DocumentId
    attribute: int
    word_index: int
    char_index: int
    char_length: int

    def __post_init__(self) -> None:
        if not isinstance(self.document_id, DocumentId):
            raise TypeError("document_id must be a DocumentId")
        for name in ("attribute", "word_index", "char_index", "char_length"):
            _check_unsigned(name, getattr(self, name), U16_MAX)


@dataclass(frozen=True, order=True)
class Highlight:
    """A matching word's location; ordered by attribute, then position, then length."""

    attribute: int
    char_index: int
    char_length: int

    def __post_init__(self) -> None:
        for name in ("attribute", "char_index", "char_length"):
            _check_unsigned(name, getattr(self, name), U16_MAX)