"""
Immutable predicate tree for citizen search.

Nodes are frozen dataclasses composed with And / Or. A tree is built once per
request by the predicate builder and then handed to a storage adapter, which
either compiles it (SQL) or evaluates it directly with ``matches`` (in-memory).
"""

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Optional, Union


def read_field(record: Any, name: str) -> Any:
    """Field value from an ORM row, pydantic model, or plain dict. Missing -> None."""
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


class Predicate:
    """Base node. Subclasses are frozen dataclasses."""

    def matches(self, record: Any) -> bool:
        raise NotImplementedError


@dataclass(frozen=True)
class MatchAll(Predicate):
    """Always true. Returned when no facet is set."""

    def matches(self, record: Any) -> bool:
        return True


MATCH_ALL = MatchAll()


@dataclass(frozen=True)
class Eq(Predicate):
    field: str
    value: Any

    def matches(self, record: Any) -> bool:
        actual = read_field(record, self.field)
        if actual is None:
            return False
        return actual == self.value


@dataclass(frozen=True)
class Contains(Predicate):
    """Case-insensitive substring match."""

    field: str
    fragment: str

    def matches(self, record: Any) -> bool:
        actual = read_field(record, self.field)
        if not isinstance(actual, str):
            return False
        return self.fragment.lower() in actual.lower()


@dataclass(frozen=True)
class Between(Predicate):
    """Inclusive range; a missing bound leaves that side open.

    Bounds are dates, or timezone-aware datetimes for timestamp columns such as
    registration_date. They must be comparable with the field value.
    """

    field: str
    lower: Optional[Union[date, datetime]] = None
    upper: Optional[Union[date, datetime]] = None

    def matches(self, record: Any) -> bool:
        actual = read_field(record, self.field)
        if actual is None:
            return False
        if self.lower is not None and actual < self.lower:
            return False
        if self.upper is not None and actual > self.upper:
            return False
        return True


@dataclass(frozen=True)
class Exists(Predicate):
    """True if at least one item of a related collection satisfies ``where``."""

    collection: str
    where: Predicate

    def matches(self, record: Any) -> bool:
        items = read_field(record, self.collection) or ()
        return any(self.where.matches(item) for item in items)


@dataclass(frozen=True)
class And(Predicate):
    children: tuple[Predicate, ...]

    def matches(self, record: Any) -> bool:
        return all(child.matches(record) for child in self.children)


@dataclass(frozen=True)
class Or(Predicate):
    children: tuple[Predicate, ...]

    def matches(self, record: Any) -> bool:
        return any(child.matches(record) for child in self.children)


def all_of(*predicates: Predicate) -> Predicate:
    """AND the given predicates. Drops MatchAll; zero left -> MATCH_ALL, one left -> itself."""
    kept = tuple(p for p in predicates if not isinstance(p, MatchAll))
    if not kept:
        return MATCH_ALL
    if len(kept) == 1:
        return kept[0]
    return And(kept)


def any_of(*predicates: Predicate) -> Predicate:
    """OR the given predicates. Zero -> MATCH_ALL, one -> itself."""
    if not predicates:
        return MATCH_ALL
    if any(isinstance(p, MatchAll) for p in predicates):
        return MATCH_ALL
    if len(predicates) == 1:
        return predicates[0]
    return Or(tuple(predicates))
