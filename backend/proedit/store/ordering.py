"""
Listing order for each entity kind.

Applied on every read; nothing about order is persisted. Python's sort is
stable (also with reverse=True), so equal keys keep insertion order.
"""

from operator import attrgetter
from typing import Callable, NamedTuple, Sequence, TypeVar

from pydantic import BaseModel

from .kinds import EntityKind

E = TypeVar("E", bound=BaseModel)


class SortRule(NamedTuple):
    key: Callable
    descending: bool


ORDERING: dict[EntityKind, SortRule] = {
    # Most recently touched first
    EntityKind.PROJECT: SortRule(attrgetter("updated_at"), descending=True),
    EntityKind.ASSET: SortRule(attrgetter("created_at"), descending=True),
    # Timeline stacking rank
    EntityKind.TRACK: SortRule(attrgetter("order"), descending=False),
    EntityKind.CLIP: SortRule(attrgetter("start_time"), descending=False),
    EntityKind.EXPORT_JOB: SortRule(attrgetter("created_at"), descending=True),
}


def sort_entities(kind: EntityKind, entities: Sequence[E]) -> list[E]:
    """Return ``entities`` (given in insertion order) in listing order."""
    rule = ORDERING[kind]
    return sorted(entities, key=rule.key, reverse=rule.descending)
