"""Ownership resolution: attach member records to their class or library."""

from collections.abc import Iterable
from dataclasses import dataclass, field

from jswrap_dts.logging import get_pipeline_logger
from jswrap_dts.typegen.records import AnnotationRecord, NonOwnerRecord, Origin, OwnerRecord

logger = get_pipeline_logger(__name__)


@dataclass
class OwnerGroup:
    """An owner record and the members attached to it, in discovery order."""

    owner: OwnerRecord
    members: list[NonOwnerRecord] = field(default_factory=list)


@dataclass(frozen=True)
class UnresolvedOwner:
    """Diagnostic for a member naming an owner that was never declared."""

    member_name: str
    owner_name: str
    origin: Origin

    def __str__(self) -> str:
        return f"missing owner {self.owner_name!r} for {self.member_name!r} ({self.origin.source}:{self.origin.line})"


@dataclass
class Resolution:
    """Mutable during resolution, read-only once rendering starts.

    ``owners`` preserves the discovery order of owner records.
    """

    owners: dict[str, OwnerGroup] = field(default_factory=dict)
    free: list[NonOwnerRecord] = field(default_factory=list)
    unresolved: list[UnresolvedOwner] = field(default_factory=list)

    @property
    def member_count(self) -> int:
        return sum(len(group.members) for group in self.owners.values())


def resolve_owners(records: Iterable[AnnotationRecord]) -> Resolution:
    """Partition records into owner groups, free-standing records and orphans.

    Records are processed in ``discovery_index`` order. Orphans are logged,
    listed in ``Resolution.unresolved`` and left out of every group.
    """
    ordered = sorted(records, key=lambda record: record.discovery_index)
    resolution = Resolution()

    for record in ordered:
        if not isinstance(record, OwnerRecord):
            continue
        if not record.name:
            logger.warning("%s:%d: %s record has no name, cannot own members", record.origin.source, record.origin.line, record.kind)
            continue
        if record.name in resolution.owners:
            first = resolution.owners[record.name].owner
            logger.warning(
                "%s:%d: duplicate owner %r ignored (first declared at %s:%d)",
                record.origin.source,
                record.origin.line,
                record.name,
                first.origin.source,
                first.origin.line,
            )
            continue
        resolution.owners[record.name] = OwnerGroup(owner=record)

    for record in ordered:
        if isinstance(record, OwnerRecord):
            continue
        if not record.owner_name:
            resolution.free.append(record)
            continue
        group = resolution.owners.get(record.owner_name)
        if group is None:
            orphan = UnresolvedOwner(member_name=record.label, owner_name=record.owner_name, origin=record.origin)
            logger.warning("%s", orphan)
            resolution.unresolved.append(orphan)
            continue
        group.members.append(record)

    return resolution
