"""Member kind ranking and deterministic member ordering.

Order within an owner: static properties, properties, constructors, events,
methods, static methods, then anything unclassified. Names break ties within
a rank and discovery order breaks ties between equal names.
"""

from collections.abc import Iterable

from jswrap_dts.typegen.records import NonOwnerRecord, RecordKind

KIND_RANK: dict[RecordKind, int] = {
    RecordKind.STATICPROPERTY: 0,
    RecordKind.PROPERTY: 1,
    RecordKind.CONSTRUCTOR: 2,
    RecordKind.EVENT: 3,
    RecordKind.METHOD: 4,
    RecordKind.STATICMETHOD: 5,
}
UNCLASSIFIED_RANK = 6


def kind_rank(kind: RecordKind) -> int:
    return KIND_RANK.get(kind, UNCLASSIFIED_RANK)


def sort_key(record: NonOwnerRecord) -> tuple[int, str]:
    """Composite ``(rank, name)`` key; tuple comparison puts rank first."""
    return kind_rank(record.kind), record.name or ""


def sort_members(members: Iterable[NonOwnerRecord]) -> list[NonOwnerRecord]:
    """Return members in rendering order. Never reorders the input."""
    return sorted(members, key=lambda member: (sort_key(member), member.discovery_index))
