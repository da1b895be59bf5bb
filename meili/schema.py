"""Index schemas: named attributes with display, index and ranking properties."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Iterator, Mapping, Union

import toml

_U16_MAX = 0xFFFF


def _debug_str(value: str) -> str:
    escaped = (
        value.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
    )
    return f'"{escaped}"'


@dataclass(frozen=True, repr=False)
class SchemaProps:
    """Properties of an attribute; combine them with ``|``."""

    displayed: bool = False
    indexed: bool = False
    ranked: bool = False

    def is_displayed(self) -> bool:
        return self.displayed

    def is_indexed(self) -> bool:
        return self.indexed

    def is_ranked(self) -> bool:
        return self.ranked

    def __or__(self, other: SchemaProps) -> SchemaProps:
        if not isinstance(other, SchemaProps):
            return NotImplemented
        return SchemaProps(
            displayed=self.displayed or other.displayed,
            indexed=self.indexed or other.indexed,
            ranked=self.ranked or other.ranked,
        )

    def flag_names(self) -> list[str]:
        """Names of the properties that are set, in declaration order."""
        names = []
        if self.displayed:
            names.append("DISPLAYED")
        if self.indexed:
            names.append("INDEXED")
        if self.ranked:
            names.append("RANKED")
        return names

    def __repr__(self) -> str:
        return "{" + ", ".join(self.flag_names()) + "}"

    def to_dict(self) -> dict[str, bool]:
        return {"displayed": self.displayed, "indexed": self.indexed, "ranked": self.ranked}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> SchemaProps:
        if not isinstance(data, Mapping):
            raise TypeError("schema properties must be a mapping")
        values = {}
        for name in ("displayed", "indexed", "ranked"):
            value = data.get(name, False)
            if not isinstance(value, bool):
                raise TypeError(f"property {name!r} must be a boolean")
            values[name] = value
        return cls(**values)


DISPLAYED = SchemaProps(displayed=True)
INDEXED = SchemaProps(indexed=True)
RANKED = SchemaProps(ranked=True)


@dataclass(frozen=True, order=True)
class SchemaAttr:
    """Position of an attribute within a schema (an unsigned 16-bit number)."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError("attribute number must be an integer")
        if not 0 <= self.value <= _U16_MAX:
            raise ValueError(f"attribute number out of range: {self.value}")

    @classmethod
    def min(cls) -> SchemaAttr:
        return cls(0)

    @classmethod
    def max(cls) -> SchemaAttr:
        return cls(_U16_MAX)

    def next(self) -> SchemaAttr | None:
        return SchemaAttr(self.value + 1) if self.value < _U16_MAX else None

    def prev(self) -> SchemaAttr | None:
        return SchemaAttr(self.value - 1) if self.value > 0 else None

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


@dataclass
class SchemaBuilder:
    """Collects attributes in order and builds a :class:`Schema`."""

    identifier: str
    attributes: dict[str, SchemaProps] = field(default_factory=dict)

    @classmethod
    def with_identifier(cls, name: str) -> SchemaBuilder:
        return cls(identifier=str(name))

    def new_attribute(self, name: str, props: SchemaProps) -> SchemaAttr:
        if name in self.attributes:
            raise ValueError("Field already inserted.")
        position = len(self.attributes)
        self.attributes[name] = props
        return SchemaAttr(position)

    def build(self) -> Schema:
        return Schema(self.identifier, self.attributes.items())

    def to_dict(self) -> dict[str, Any]:
        return {
            "identifier": self.identifier,
            "attributes": {name: props.to_dict() for name, props in self.attributes.items()},
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> SchemaBuilder:
        if not isinstance(data, Mapping):
            raise TypeError("schema must be a mapping")
        try:
            identifier = data["identifier"]
            attributes = data["attributes"]
        except KeyError as exc:
            raise ValueError(f"missing field {exc.args[0]!r}") from None
        if not isinstance(identifier, str):
            raise TypeError("identifier must be a string")
        if not isinstance(attributes, Mapping):
            raise TypeError("attributes must be a mapping")
        builder = cls.with_identifier(identifier)
        for name, props in attributes.items():
            builder.new_attribute(name, SchemaProps.from_dict(props))
        return builder


class Schema:
    """An immutable, ordered set of attributes plus the document identifier name."""

    __slots__ = ("_identifier", "_attrs", "_props")

    def __init__(self, identifier: str, attributes) -> None:
        self._identifier = identifier
        self._props: tuple[tuple[str, SchemaProps], ...] = tuple(attributes)
        if len(self._props) > _U16_MAX + 1:
            raise ValueError("too many attributes")
        self._attrs = {name: SchemaAttr(i) for i, (name, _) in enumerate(self._props)}
        if len(self._attrs) != len(self._props):
            raise ValueError("Field already inserted.")

    def to_builder(self) -> SchemaBuilder:
        return SchemaBuilder(self._identifier, dict(self._props))

    def number_of_attributes(self) -> int:
        return len(self._attrs)

    def props(self, attr: SchemaAttr) -> SchemaProps:
        return self._props[attr.value][1]

    def identifier_name(self) -> str:
        return self._identifier

    def attribute(self, name: str) -> SchemaAttr | None:
        return self._attrs.get(name)

    def attribute_name(self, attr: SchemaAttr) -> str:
        return self._props[attr.value][0]

    def __iter__(self) -> Iterator[tuple[str, SchemaAttr, SchemaProps]]:
        for name, props in self._props:
            yield name, self._attrs[name], props

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Schema):
            return NotImplemented
        return self._identifier == other._identifier and self._props == other._props

    def __hash__(self) -> int:
        return hash((self._identifier, self._props))

    def to_dict(self) -> dict[str, Any]:
        return self.to_builder().to_dict()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Schema:
        return SchemaBuilder.from_dict(data).build()

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    @classmethod
    def from_json(cls, text: Union[str, bytes]) -> Schema:
        return cls.from_dict(json.loads(text))

    def to_toml(self) -> str:
        return toml.dumps(self.to_dict())

    @classmethod
    def from_toml(cls, text: Union[str, bytes]) -> Schema:
        if isinstance(text, bytes):
            text = text.decode("utf-8")
        return cls.from_dict(toml.loads(text))

    def __repr__(self) -> str:
        attributes = ", ".join(
            f"{_debug_str(name)}: {props!r}" for name, props in self._props
        )
        return (
            f"Schema {{ identifier: {_debug_str(self._identifier)}, "
            f"attributes: {{{attributes}}} }}"
        )

    def pretty(self) -> str:
        """Multi-line description of the schema, one property per line."""
        lines = ["Schema {", f"    identifier: {_debug_str(self._identifier)},"]
        if not self._props:
            lines.append("    attributes: {},")
        else:
            lines.append("    attributes: {")
            for name, props in self._props:
                flags = props.flag_names()
                if not flags:
                    lines.append(f"        {_debug_str(name)}: {{}},")
                    continue
                lines.append(f"        {_debug_str(name)}: {{")
                lines.extend(f"            {flag}," for flag in flags)
                lines.append("        },")
            lines.append("    },")
        lines.append("}")
        return "\n".join(lines)


@dataclass(frozen=True)
class IdentChange:
    old: str
    new: str


@dataclass(frozen=True)
class AttrMove:
    name: str
    old: int
    new: int


@dataclass(frozen=True)
class AttrPropsChange:
    name: str
    old: SchemaProps
    new: SchemaProps


@dataclass(frozen=True)
class NewAttr:
    name: str
    pos: int
    props: SchemaProps


@dataclass(frozen=True)
class RemovedAttr:
    name: str


Diff = Union[IdentChange, AttrMove, AttrPropsChange, NewAttr, RemovedAttr]


def diff(old: Schema, new: Schema) -> list[Diff]:
    """List the changes that turn ``old`` into ``new``."""
    old_builder = old.to_builder()
    new_builder = new.to_builder()
    differences: list[Diff] = []

    if old_builder.identifier != new_builder.identifier:
        differences.append(IdentChange(old_builder.identifier, new_builder.identifier))

    new_positions = {name: pos for pos, name in enumerate(new_builder.attributes)}

    for pos, (name, props) in enumerate(old_builder.attributes.items()):
        npos = new_positions.get(name)
        if npos is None:
            differences.append(RemovedAttr(name))
            continue
        if pos != npos:
            differences.append(AttrMove(name, pos, npos))
        nprops = new_builder.attributes[name]
        if props != nprops:
            differences.append(AttrPropsChange(name, props, nprops))

    for pos, (name, props) in enumerate(new_builder.attributes.items()):
        if name not in old_builder.attributes:
            differences.append(NewAttr(name, pos, props))

    return differences