"""The user-facing schema format: each field name with a set of properties."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping

from meili.schema import Schema, SchemaBuilder, SchemaProps

DEFAULT_IDENTIFIER = "documentId"


class FieldProperty(enum.Enum):
    """A property that a field of the schema can carry."""

    IDENTIFIER = "identifier"
    INDEXED = "indexed"
    DISPLAYED = "displayed"
    RANKED = "ranked"


@dataclass
class SchemaBody:
    """Ordered mapping from field names to their properties."""

    fields: dict[str, frozenset[FieldProperty]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.fields = {
            str(name): frozenset(FieldProperty(p) for p in properties)
            for name, properties in self.fields.items()
        }

    @classmethod
    def from_schema(cls, schema: Schema) -> SchemaBody:
        fields: dict[str, set[FieldProperty]] = {}
        for name, _attr, props in schema:
            properties = fields.setdefault(name, set())
            if props.is_indexed():
                properties.add(FieldProperty.INDEXED)
            if props.is_displayed():
                properties.add(FieldProperty.DISPLAYED)
            if props.is_ranked():
                properties.add(FieldProperty.RANKED)
        identifier = fields.setdefault(schema.identifier_name(), set())
        identifier.update({FieldProperty.IDENTIFIER, FieldProperty.DISPLAYED})
        return cls({name: frozenset(props) for name, props in fields.items()})

    def to_schema(self) -> Schema:
        identifier = DEFAULT_IDENTIFIER
        attributes: list[tuple[str, SchemaProps]] = []
        for name, properties in self.fields.items():
            if FieldProperty.IDENTIFIER in properties:
                identifier = name
            attributes.append(
                (
                    name,
                    SchemaProps(
                        displayed=FieldProperty.DISPLAYED in properties,
                        indexed=FieldProperty.INDEXED in properties,
                        ranked=FieldProperty.RANKED in properties,
                    ),
                )
            )
        builder = SchemaBuilder.with_identifier(identifier)
        for name, props in attributes:
            builder.new_attribute(name, props)
        return builder.build()

    def to_dict(self) -> dict[str, list[str]]:
        return {
            name: [prop.value for prop in FieldProperty if prop in properties]
            for name, properties in self.fields.items()
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Iterable[Any]]) -> SchemaBody:
        if not isinstance(data, Mapping):
            raise TypeError("schema body must be a mapping")
        fields: dict[str, frozenset[FieldProperty]] = {}
        for name, properties in data.items():
            if isinstance(properties, (str, bytes)) or not isinstance(properties, Iterable):
                raise TypeError(f"properties of {name!r} must be a list")
            try:
                fields[name] = frozenset(FieldProperty(p) for p in properties)
            except ValueError as exc:
                raise ValueError(f"unknown property for field {name!r}: {exc}") from None
        return cls(fields)