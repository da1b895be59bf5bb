"""Search results: cropping, match positions, highlighting and ranking criteria."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping

from meili.schema import Schema, SchemaAttr
from meili.settings import RankingOrdering, SettingBody
from meili.types import Highlight

logger = logging.getLogger(__name__)

SUM_OF_TYPOS = "_sum_of_typos"
NUMBER_OF_WORDS = "_number_of_words"
WORD_PROXIMITY = "_word_proximity"
SUM_OF_WORDS_ATTRIBUTE = "_sum_of_words_attribute"
SUM_OF_WORDS_POSITION = "_sum_of_words_position"
EXACT = "_exact"
DOCUMENT_ID = "_document_id"

BUILTIN_CRITERIA = (
    SUM_OF_TYPOS,
    NUMBER_OF_WORDS,
    WORD_PROXIMITY,
    SUM_OF_WORDS_ATTRIBUTE,
    SUM_OF_WORDS_POSITION,
    EXACT,
)

Criterion = tuple[str, "RankingOrdering | None"]


class SearchError(Exception):
    """A failure while searching or preparing search results."""

    def __init__(self, message: str, *, internal: bool = False) -> None:
        super().__init__(message)
        self.message = message
        self.internal = internal

    def __str__(self) -> str:
        return self.message

    @classmethod
    def search_documents(cls, err: Any) -> SearchError:
        return cls(f"impossible to search documents; {err}")

    @classmethod
    def retrieve_document(cls, document_id: int, err: Any) -> SearchError:
        return cls(f"impossible to retrieve the document with id: {document_id}; {err}")

    @classmethod
    def document_not_found(cls, document_id: int) -> SearchError:
        return cls(f"document {document_id} not found")

    @classmethod
    def crop_field_wrong_type(cls, field_name: str) -> SearchError:
        return cls(f"the field {field_name} cannot be cropped it's not a string")

    @classmethod
    def attribute_not_found_on_document(cls, field_name: str) -> SearchError:
        return cls(f"field {field_name} is not found on document")

    @classmethod
    def attribute_not_found_on_schema(cls, field_name: str) -> SearchError:
        return cls(f"field {field_name} is not found on schema")

    @classmethod
    def missing_filter_value(cls) -> SearchError:
        return cls("a filter doesn't have a value to compare it with")

    @classmethod
    def unknown_filtered_attribute(cls) -> SearchError:
        return cls("a filter is specifying an unknown schema attribute")

    @classmethod
    def internal_error(cls, err: Any) -> SearchError:
        return cls(f"internal error; {err}", internal=True)


@dataclass(frozen=True, order=True)
class MatchPosition:
    """Start and length, in characters, of a match inside a field."""

    start: int
    length: int

    def to_dict(self) -> dict[str, int]:
        return {"start": self.start, "length": self.length}


@dataclass
class SearchHit:
    """A found document, its formatted version and optional match positions."""

    document: dict[str, Any]
    formatted: dict[str, Any] = field(default_factory=dict)
    matches_info: dict[str, list[MatchPosition]] | None = None

    def to_dict(self) -> dict[str, Any]:
        result = dict(self.document)
        if self.formatted:
            result["_formatted"] = dict(self.formatted)
        if self.matches_info is not None:
            result["_matchesInfo"] = {
                name: [pos.to_dict() for pos in positions]
                for name, positions in self.matches_info.items()
            }
        return result


@dataclass
class SearchResult:
    """A page of hits for a query."""

    hits: list[SearchHit]
    offset: int
    limit: int
    processing_time_ms: int
    query: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "hits": [hit.to_dict() for hit in self.hits],
            "offset": self.offset,
            "limit": self.limit,
            "processingTimeMs": self.processing_time_ms,
            "query": self.query,
        }


def crop_text(
    text: str, matches: Iterable[Highlight], context: int
) -> tuple[str, list[Highlight]]:
    """Keep ``2 * context`` characters around the first match and shift the matches."""
    matches = list(matches)
    char_index = matches[0].char_index if matches else 0
    start = max(0, char_index - context)
    end = start + context * 2
    cropped = text[start:end]

    kept: list[Highlight] = []
    for match in matches:
        if match.char_index + match.char_length > end:
            break
        kept.append(
            Highlight(match.attribute, match.char_index - start, match.char_length)
        )
    return cropped, kept


def crop_document(
    document: Mapping[str, Any],
    matches: Iterable[Highlight],
    schema: Schema,
    fields: Mapping[str, int],
) -> tuple[dict[str, Any], list[Highlight]]:
    """Crop the string fields listed in ``fields``; return the document and matches."""
    cropped_document = dict(document)
    current = sorted(matches, key=lambda m: (m.char_index, m.char_length))

    for field_name, length in fields.items():
        attribute = schema.attribute(field_name)
        if attribute is None:
            continue
        original = cropped_document.get(field_name)
        if not isinstance(original, str):
            continue
        selected = [m for m in current if m.attribute == attribute.value]
        text, cropped_matches = crop_text(original, selected, length)
        cropped_document[field_name] = text
        current = [m for m in current if m.attribute != attribute.value]
        current.extend(cropped_matches)

    return cropped_document, current


def calculate_matches(
    matches: Iterable[Highlight],
    attributes_to_retrieve: Iterable[str] | None,
    schema: Schema,
) -> dict[str, list[MatchPosition]]:
    """Group matches by attribute name, sorted and without duplicates."""
    allowed = None if attributes_to_retrieve is None else set(attributes_to_retrieve)
    result: dict[str, list[MatchPosition]] = {}
    for match in matches:
        name = schema.attribute_name(SchemaAttr(match.attribute))
        if allowed is not None and name not in allowed:
            continue
        result.setdefault(name, []).append(
            MatchPosition(match.char_index, match.char_length)
        )
    return {name: sorted(set(positions)) for name, positions in result.items()}


def calculate_highlights(
    document: Mapping[str, Any],
    matches: Mapping[str, Iterable[MatchPosition]],
    attributes_to_highlight: Iterable[str],
) -> dict[str, str]:
    """Wrap matched parts of string fields in ``<em>`` tags."""
    wanted = set(attributes_to_highlight)
    result: dict[str, str] = {}

    for attribute, positions in matches.items():
        if attribute not in wanted:
            continue
        value = document.get(attribute)
        if not isinstance(value, str):
            continue
        parts: list[str] = []
        index = 0
        for position in positions:
            if position.start < index:
                continue
            end = position.start + position.length
            if end > len(value):
                logger.error(
                    "value: %r; index: %r, match: %r", value, index, position
                )
                continue
            parts.append(value[index:position.start])
            parts.append("<em>")
            parts.append(value[position.start:end])
            parts.append("</em>")
            index = end
        parts.append(value[index:])
        result[attribute] = "".join(parts)

    return result


def ranking_criteria(settings: SettingBody) -> list[Criterion] | None:
    """Ranking criteria described by the settings, or ``None`` for the defaults.

    Built-in criteria carry no ordering; custom rules carry their ordering.
    The list always ends with the document id criterion.
    """
    rules = settings.ranking_rules
    if rules is None:
        return None

    criteria: list[Criterion] = []
    if settings.ranking_order is not None:
        for rule in settings.ranking_order:
            if rule in BUILTIN_CRITERIA:
                criteria.append((rule, None))
            elif rule in rules:
                criteria.append((rule, rules[rule]))
    else:
        criteria.extend((name, None) for name in BUILTIN_CRITERIA)
        criteria.extend(rules.items())
    criteria.append((DOCUMENT_ID, None))
    return criteria