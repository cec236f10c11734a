"""Path enumeration between two segments and shortest-path selection.

A path is a tuple of ``TimedSegment`` values from the start segment to
the stop segment. The stop is recognised when the search reaches a
segment that lists it as a predecessor, so the last hop walked before the
match and the stop marker both name the stop segment.
"""

from __future__ import annotations

import logging
from enum import Enum, auto
from typing import Callable, Dict, List, Optional, Sequence, Set, Tuple, Union

from ..domain.models import Segment, TimedSegment
from .store import SegmentStore

logger = logging.getLogger(__name__)

Path = Tuple[TimedSegment, ...]


class SearchOutcome(Enum):
    """Marker for a search branch that ran off the end of its chain."""

    NOT_FOUND = auto()


SearchResult = Union[List[Path], SearchOutcome]


def nearest_step_free(
    segment: Segment,
    neighbours: Callable[[Segment], Sequence[Segment]],
) -> Optional[Segment]:
    """Breadth-first search for the closest step-free neighbour.

    Args:
        segment: Where the search starts (not itself considered).
        neighbours: Either ``store.predecessors_of`` or ``store.successors_of``.

    Returns:
        The nearest step-free segment, or None once every reachable
        segment has been checked.
    """
    visited: Set[int] = {segment.index}
    frontier: List[Segment] = [segment]
    while frontier:
        next_frontier: List[Segment] = []
        for current in frontier:
            for neighbour in neighbours(current):
                if neighbour.index in visited:
                    continue
                if neighbour.step_free:
                    return neighbour
                visited.add(neighbour.index)
                next_frontier.append(neighbour)
        frontier = next_frontier
    return None


def find_paths(
    store: SegmentStore,
    start: Segment,
    stop: Segment,
    accessible_only: bool = False,
) -> List[Path]:
    """Enumerate the simple paths from ``start`` to ``stop``.

    With ``accessible_only`` a start whose origin lacks step-free access is
    replaced by its nearest step-free predecessor, and such a stop by its
    nearest step-free successor. If no substitute exists the search is not
    attempted.

    Returns:
        Zero or more paths. Never raises for unreachable stops.
    """
    if accessible_only:
        if not start.step_free:
            substitute = nearest_step_free(start, store.predecessors_of)
            if substitute is None:
                logger.info(
                    "No step-free start available",
                    extra={"route": start.route, "station": start.origin},
                )
                return []
            start = substitute
        if not stop.step_free:
            substitute = nearest_step_free(stop, store.successors_of)
            if substitute is None:
                logger.info(
                    "No step-free stop available",
                    extra={"route": stop.route, "station": stop.origin},
                )
                return []
            stop = substitute

    result = _search(store, start, stop, 0, set())
    if result is SearchOutcome.NOT_FOUND:
        return []
    if any(len(path) == 1 for path in result):
        logger.debug(
            "Stop lies directly behind start",
            extra={"route": start.route, "station": stop.origin},
        )
    return result


def _search(
    store: SegmentStore,
    current: Segment,
    stop: Segment,
    depth: int,
    on_path: Set[int],
) -> SearchResult:
    if current.is_leaf:
        return SearchOutcome.NOT_FOUND

    if stop.index in current.predecessors:
        return [(TimedSegment(stop, depth),)]

    # A segment already on the current path would close a cycle
    if current.index in on_path:
        return SearchOutcome.NOT_FOUND

    elapsed = depth + current.duration
    step = TimedSegment(current, elapsed)
    on_path.add(current.index)

    paths: List[Path] = []
    for successor in store.successors_of(current):
        branch = _search(store, successor, stop, elapsed, on_path)
        if branch is SearchOutcome.NOT_FOUND or not branch:
            continue
        paths.extend((step,) + path for path in branch)

    on_path.discard(current.index)
    return paths


def group_by_route(paths: Sequence[Path]) -> Dict[str, List[Path]]:
    """Group paths by the route of their first hop, keeping input order."""
    groups: Dict[str, List[Path]] = {}
    for path in paths:
        if path:
            groups.setdefault(path[0].route, []).append(path)
    return groups


def interchange_count(path: Path) -> int:
    """Number of route changes along ``path``."""
    routes = {step.route for step in path}
    return max(len(routes) - 1, 0)


def total_minutes(path: Path) -> int:
    """Minutes recorded on the last hop of ``path``."""
    return path[-1].elapsed


def select_shortest(candidates: Sequence[Path]) -> Optional[Path]:
    """Pick the candidate with the least total time.

    Ties go to the first candidate encountered.
    """
    shortest: Optional[Path] = None
    for candidate in candidates:
        if not candidate:
            continue
        if shortest is None or total_minutes(candidate) < total_minutes(shortest):
            shortest = candidate
    return shortest
