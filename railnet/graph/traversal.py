"""Chain endpoint resolution and timed forward traversal.

``find_roots`` and ``walk_forward`` take an optional ``visited`` set of
segment indices holding the segments already on the current walk. Each
segment is removed from the set again before its call returns, so a set
comes back exactly as it was passed in.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Set

from ..domain.models import Segment, TimedSegment
from .store import SegmentStore

logger = logging.getLogger(__name__)


def find_roots(
    store: SegmentStore,
    segment: Segment,
    visited: Optional[Set[int]] = None,
) -> List[Segment]:
    """Find the chain starts reachable backwards from ``segment``.

    A segment already on the visited set closes a cycle and contributes
    nothing.

    Returns:
        The distinct root segments, in discovery order.
    """
    if visited is None:
        visited = set()
    if segment.index in visited:
        return []
    visited.add(segment.index)

    if segment.is_root:
        visited.discard(segment.index)
        return [segment]

    roots: List[Segment] = []
    for predecessor in store.predecessors_of(segment):
        for root in find_roots(store, predecessor, visited):
            if root not in roots:
                roots.append(root)
    visited.discard(segment.index)
    return roots


def walk_forward(
    store: SegmentStore,
    segment: Segment,
    accumulated: int = 0,
    visited: Optional[Set[int]] = None,
) -> List[TimedSegment]:
    """Walk successors depth first, accumulating travel time.

    Args:
        store: The segment store.
        segment: Where the walk starts.
        accumulated: Minutes already elapsed before ``segment``.
        visited: Segments already on the walk; left unchanged on return.

    Returns:
        Every terminus reached, each paired with the minutes elapsed from
        the starting segment's departure to the terminus' arrival.
    """
    if visited is None:
        visited = set()
    if segment.index in visited:
        return []
    visited.add(segment.index)

    elapsed = accumulated + segment.duration
    if segment.is_leaf:
        visited.discard(segment.index)
        return [TimedSegment(segment, elapsed)]

    terminals: List[TimedSegment] = []
    for successor in store.successors_of(segment):
        terminals.extend(walk_forward(store, successor, elapsed, visited))
    visited.discard(segment.index)
    return terminals


def find_leaves(store: SegmentStore, segment: Segment) -> List[TimedSegment]:
    """Find every terminus of the chain(s) ``segment`` belongs to.

    Each root behind ``segment`` is walked forward with its own cycle guard.
    A terminus reachable from several roots is reported once, with the time
    from the first root that reached it.
    """
    leaves: List[TimedSegment] = []
    seen: Set[int] = set()
    roots = find_roots(store, segment)
    if not roots:
        logger.debug(
            "No chain start behind segment",
            extra={"route": segment.route, "origin": segment.origin},
        )
    for root in roots:
        for terminal in walk_forward(store, root):
            if terminal.segment.index in seen:
                continue
            seen.add(terminal.segment.index)
            leaves.append(terminal)
    return leaves
