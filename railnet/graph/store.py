"""Segment store and route graph construction.

The store is a flat, read-only table of segments. Each segment links to
the hops before and after it on the same route through indices into that
table, so building the graph once at startup is the only mutation the
network ever sees.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import AbstractSet, Dict, Iterable, Iterator, List, Tuple

from ..domain.models import Segment, SegmentRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SegmentStore:
    """Immutable collection of linked route segments.

    Attributes:
        segments: All segments, each stored at its own ``index``
    """

    segments: Tuple[Segment, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.segments)

    def __iter__(self) -> Iterator[Segment]:
        return iter(self.segments)

    def __getitem__(self, index: int) -> Segment:
        return self.segments[index]

    def routes(self) -> Tuple[str, ...]:
        """Route names in order of first appearance."""
        return tuple(dict.fromkeys(segment.route for segment in self.segments))

    def segments_for(self, route: str) -> Tuple[Segment, ...]:
        return tuple(s for s in self.segments if s.route == route)

    def segments_from(self, station: str) -> Tuple[Segment, ...]:
        return tuple(s for s in self.segments if s.origin == station)

    def segments_to(self, station: str) -> Tuple[Segment, ...]:
        return tuple(s for s in self.segments if s.destination == station)

    def predecessors_of(self, segment: Segment) -> Tuple[Segment, ...]:
        return tuple(self[i] for i in segment.predecessors)

    def successors_of(self, segment: Segment) -> Tuple[Segment, ...]:
        return tuple(self[i] for i in segment.successors)


def build_store(
    records: Iterable[SegmentRecord],
    step_free_stations: AbstractSet[str],
) -> SegmentStore:
    """Link raw segment records into per-route chains.

    Duplicate records collapse to the first occurrence. Within each route a
    segment is linked behind the first segment (in input order) that arrives
    at its origin; only that one link is made even when several candidates
    exist. Inconsistent input is tolerated and leaves chains with several
    roots or leaves.

    Args:
        records: Raw segment records in input order.
        step_free_stations: Names of stations with step-free access.

    Returns:
        The linked, read-only store.
    """
    received = list(records)
    unique: List[SegmentRecord] = list(dict.fromkeys(received))

    by_route: Dict[str, List[int]] = {}
    for index, record in enumerate(unique):
        by_route.setdefault(record.route, []).append(index)

    predecessors: List[List[int]] = [[] for _ in unique]
    successors: List[List[int]] = [[] for _ in unique]

    for indices in by_route.values():
        for index in indices:
            origin = unique[index].origin
            previous = next(
                (i for i in indices if unique[i].destination == origin), None
            )
            if previous is None:
                continue
            if previous not in predecessors[index]:
                predecessors[index].append(previous)
            if index not in successors[previous]:
                successors[previous].append(index)

    store = SegmentStore(
        segments=tuple(
            Segment(
                index=index,
                route=record.route,
                origin=record.origin,
                destination=record.destination,
                duration=record.duration,
                step_free=record.origin in step_free_stations,
                predecessors=tuple(predecessors[index]),
                successors=tuple(successors[index]),
            )
            for index, record in enumerate(unique)
        )
    )

    for route, indices in by_route.items():
        roots = sum(1 for i in indices if not predecessors[i])
        leaves = sum(1 for i in indices if not successors[i])
        if roots != 1 or leaves != 1:
            logger.warning(
                "Route is not a simple chain",
                extra={"route": route, "roots": roots, "leaves": leaves},
            )

    logger.info(
        "Segment store built",
        extra={
            "segments": len(store),
            "duplicates_dropped": len(received) - len(unique),
            "routes": len(by_route),
            "step_free": sum(1 for s in store if s.step_free),
        },
    )
    return store

