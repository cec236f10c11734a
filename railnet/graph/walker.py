"""Visit-once iteration over the segment store."""

from __future__ import annotations

from typing import Callable, List, Optional

from ..domain.models import Segment
from .store import SegmentStore

SegmentCondition = Callable[[Segment], bool]
SegmentAction = Callable[[Segment], None]


def visit_once(
    store: SegmentStore,
    condition: SegmentCondition,
    action: Optional[SegmentAction] = None,
) -> List[Segment]:
    """Apply ``action`` to every segment matching ``condition`` exactly once.

    The store holds each segment once, so a single pass in store order
    reaches every match exactly once; nothing is marked on the segments.

    Returns:
        The segments the action was applied to, in store order.
    """
    result: List[Segment] = []
    for segment in store:
        if not condition(segment):
            continue
        result.append(segment)
        if action is not None:
            action(segment)
    return result
