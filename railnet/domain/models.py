"""Immutable domain models for the rail network route finder.

All models are frozen dataclasses with slots. Segments reference their
neighbours by index into the owning store rather than by object, so the
whole network is a flat, read-only table once built.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True, slots=True)
class SegmentRecord:
    """A raw route segment as delivered by a network source.

    Two records with equal fields are the same record.

    Attributes:
        route: Name of the line the hop belongs to
        origin: Station the hop departs from
        destination: Station the hop arrives at
        duration: Travel time in minutes
    """

    route: str
    origin: str
    destination: str
    duration: int

    def __post_init__(self) -> None:
        """Validate the duration."""
        if self.duration <= 0:
            raise ValueError(
                f"Duration must be a positive number of minutes, got {self.duration}"
            )


@dataclass(frozen=True, slots=True)
class Segment:
    """One directed hop within a route, linked into its route chain.

    Attributes:
        index: Position of the segment in its store
        route: Name of the line
        origin: Departure station
        destination: Arrival station
        duration: Travel time in minutes
        step_free: True iff the origin station has step-free access
        predecessors: Store indices of the hops leading into this one
        successors: Store indices of the hops leaving from this one
    """

    index: int
    route: str
    origin: str
    destination: str
    duration: int
    step_free: bool = False
    predecessors: tuple[int, ...] = field(default_factory=tuple)
    successors: tuple[int, ...] = field(default_factory=tuple)

    @property
    def is_root(self) -> bool:
        """Check if the segment starts its chain."""
        return not self.predecessors

    @property
    def is_leaf(self) -> bool:
        """Check if the segment ends its chain."""
        return not self.successors


@dataclass(frozen=True, slots=True)
class TimedSegment:
    """A segment paired with the minutes elapsed from the chain root.

    ``elapsed`` includes the segment's own duration.
    """

    segment: Segment
    elapsed: int

    @property
    def route(self) -> str:
        return self.segment.route


@dataclass(frozen=True, slots=True)
class Termini:
    """Both ends of a line and the time to travel between them."""

    route: str
    origin: str
    destination: str
    total_minutes: int


@dataclass(frozen=True, slots=True)
class LineStop:
    """A station on a line with the minutes taken to reach it from the start."""

    station: str
    minutes: int


@dataclass(frozen=True, slots=True)
class LineSummary:
    """A start-to-end run of a line with its total travel time."""

    route: str
    origin: str
    destination: str
    total_minutes: int


@dataclass(frozen=True, slots=True)
class JourneyPath:
    """A path between two stations.

    Attributes:
        stations: Ordered station names from departure to arrival
        routes: Distinct route names used, in order of first use
        interchanges: Number of changes from one route to another
        total_minutes: Elapsed minutes recorded on the final hop
    """

    stations: tuple[str, ...]
    routes: tuple[str, ...] = field(default_factory=tuple)
    interchanges: int = 0
    total_minutes: Optional[int] = None

    @property
    def is_empty(self) -> bool:
        """Check if no path was found."""
        return len(self.stations) == 0
