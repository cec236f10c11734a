"""In-memory network source, for tests and embedding."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import AbstractSet, FrozenSet, Iterable, Sequence, Tuple

from ...domain.models import SegmentRecord


@dataclass(frozen=True)
class InMemoryNetworkSource:
    """Network source backed by records already in memory.

    Implements NetworkSourcePort.
    """

    segments: Tuple[SegmentRecord, ...] = field(default_factory=tuple)
    step_free: FrozenSet[str] = field(default_factory=frozenset)

    @classmethod
    def from_tuples(
        cls,
        rows: Iterable[Tuple[str, str, str, int]],
        step_free: Iterable[str] = (),
    ) -> InMemoryNetworkSource:
        """Build a source from ``(route, origin, destination, minutes)`` rows."""
        return cls(
            segments=tuple(SegmentRecord(*row) for row in rows),
            step_free=frozenset(step_free),
        )

    def load_segments(self) -> Sequence[SegmentRecord]:
        return self.segments

    def load_step_free(self) -> AbstractSet[str]:
        return self.step_free
