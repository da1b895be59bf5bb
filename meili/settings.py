"""Per-index settings: ranking order, distinct field and custom ranking rules."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Mapping

_FIELD_NAMES = {
    "rankingOrder": "ranking_order",
    "distinctField": "distinct_field",
    "rankingRules": "ranking_rules",
}


class RankingOrdering(enum.Enum):
    """Direction of a custom ranking rule."""

    ASC = "asc"
    DSC = "dsc"


@dataclass
class SettingBody:
    """Settings of an index; ``None`` means not set."""

    ranking_order: list[str] | None = None
    distinct_field: str | None = None
    ranking_rules: dict[str, RankingOrdering] | None = None

    def __post_init__(self) -> None:
        if self.ranking_order is not None:
            if isinstance(self.ranking_order, (str, bytes)):
                raise TypeError("rankingOrder must be a list of strings")
            order = list(self.ranking_order)
            if not all(isinstance(rule, str) for rule in order):
                raise TypeError("rankingOrder must be a list of strings")
            self.ranking_order = order
        if self.distinct_field is not None and not isinstance(self.distinct_field, str):
            raise TypeError("distinctField must be a string")
        if self.ranking_rules is not None:
            if not isinstance(self.ranking_rules, Mapping):
                raise TypeError("rankingRules must be a mapping")
            self.ranking_rules = {
                str(name): RankingOrdering(order)
                for name, order in self.ranking_rules.items()
            }

    def to_dict(self) -> dict[str, Any]:
        return {
            "rankingOrder": None if self.ranking_order is None else list(self.ranking_order),
            "distinctField": self.distinct_field,
            "rankingRules": None
            if self.ranking_rules is None
            else {name: order.value for name, order in self.ranking_rules.items()},
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> SettingBody:
        if not isinstance(data, Mapping):
            raise TypeError("settings must be a mapping")
        unknown = [key for key in data if key not in _FIELD_NAMES]
        if unknown:
            raise ValueError(f"unknown field {unknown[0]!r}")
        return cls(**{_FIELD_NAMES[key]: value for key, value in data.items()})

    def merge(self, other: SettingBody) -> SettingBody:
        """Return these settings with every field that ``other`` sets replaced."""
        return SettingBody(
            ranking_order=other.ranking_order
            if other.ranking_order is not None
            else self.ranking_order,
            distinct_field=other.distinct_field
            if other.distinct_field is not None
            else self.distinct_field,
            ranking_rules=other.ranking_rules
            if other.ranking_rules is not None
            else self.ranking_rules,
        )