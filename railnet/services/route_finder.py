"""Route finder service - Query orchestration over the segment store.

Each query composes the graph primitives in ``railnet.graph``. Unknown
routes and stations are not errors: queries return ``None`` or an empty
tuple and log what was missing.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Set, Tuple

from ..domain.models import JourneyPath, LineStop, LineSummary, Segment, Termini
from ..graph.paths import (
    Path,
    find_paths,
    group_by_route,
    interchange_count,
    select_shortest,
    total_minutes,
)
from ..graph.store import SegmentStore, build_store
from ..graph.traversal import find_leaves, walk_forward
from ..graph.walker import visit_once
from ..ports.network import NetworkSourcePort


def normalise_route_name(route: str) -> str:
    """Collapse a doubled en dash, as typed by some terminals, to one."""
    return route.replace("––", "–")


@dataclass
class RouteFinderService:
    """Answers structural queries about a loaded rail network.

    Attributes:
        store: The linked segment store
    """

    store: SegmentStore
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    @classmethod
    def from_source(cls, source: NetworkSourcePort) -> RouteFinderService:
        """Load a network source and build the service on top of it.

        Raises:
            NetworkLoadError: If the source cannot be loaded.
        """
        records = source.load_segments()
        step_free = source.load_step_free()
        return cls(store=build_store(records, step_free))

    def _route_roots(self, route: str) -> List[Segment]:
        return visit_once(self.store, lambda s: s.route == route and s.is_root)

    def list_termini(self, route: str) -> Optional[Termini]:
        """Find where a line starts and ends, and how long the run takes.

        A line needs a start hop with a successor and an end hop with a
        predecessor to have termini.

        Returns:
            The termini, or None if the line has none.
        """
        route = normalise_route_name(route)
        roots = visit_once(
            self.store,
            lambda s: s.route == route and s.is_root and not s.is_leaf,
        )
        if len(roots) > 1:
            self._logger.warning(
                "Line has several starts", extra={"route": route, "starts": len(roots)}
            )

        for root in roots:
            leaves = find_leaves(self.store, root)
            if leaves:
                end = leaves[0]
                return Termini(
                    route=route,
                    origin=root.origin,
                    destination=end.segment.destination,
                    total_minutes=end.elapsed,
                )

        self._logger.info("Line has no termini", extra={"route": route})
        return None

    def list_stations_in_line(self, route: str) -> Tuple[LineStop, ...]:
        """List the stations of a line in travel order.

        Each station carries the minutes needed to reach it from the start
        of its chain. Branches are listed depth first; a station shared by
        several branches is listed once.
        """
        route = normalise_route_name(route)
        stops: List[LineStop] = []
        seen: Set[str] = set()

        def emit(station: str, minutes: int) -> None:
            if station not in seen:
                seen.add(station)
                stops.append(LineStop(station, minutes))

        for root in self._route_roots(route):
            visited: Set[int] = set()
            stack: List[Tuple[Segment, int]] = [(root, 0)]
            while stack:
                segment, before = stack.pop()
                if segment.index in visited:
                    continue
                visited.add(segment.index)
                emit(segment.origin, before)
                after = before + segment.duration
                if segment.is_leaf:
                    emit(segment.destination, after)
                for successor in reversed(self.store.successors_of(segment)):
                    stack.append((successor, after))

        if not stops:
            self._logger.info("Line has no stations", extra={"route": route})
        return tuple(stops)

    def list_all_lines(self) -> Tuple[LineSummary, ...]:
        """Summarise every start-to-end run of every line."""
        summaries: List[LineSummary] = []
        for route in self.store.routes():
            for root in self._route_roots(route):
                for terminal in walk_forward(self.store, root):
                    summary = LineSummary(
                        route=route,
                        origin=root.origin,
                        destination=terminal.segment.destination,
                        total_minutes=terminal.elapsed,
                    )
                    if summary not in summaries:
                        summaries.append(summary)
        return tuple(summaries)

    def _candidate_paths(
        self, from_station: str, to_station: str, accessible_only: bool
    ) -> Iterator[Path]:
        """Search each line serving both stations, in route order."""
        starts = self.store.segments_from(from_station)
        stops = self.store.segments_to(to_station)
        for route in self.store.routes():
            start = next((s for s in starts if s.route == route), None)
            stop = next((s for s in stops if s.route == route), None)
            if start is None or stop is None:
                continue
            yield from find_paths(self.store, start, stop, accessible_only)

    def find_accessible_path(self, from_station: str, to_station: str) -> JourneyPath:
        """Find a path using only step-free boarding points.

        Returns:
            The first path found, or an empty JourneyPath.
        """
        for path in self._candidate_paths(from_station, to_station, True):
            return _journey(path)
        self._logger.info(
            "No step-free path",
            extra={"from_station": from_station, "to_station": to_station},
        )
        return JourneyPath(stations=())

    def find_all_paths(
        self, from_station: str, to_station: str
    ) -> Tuple[JourneyPath, ...]:
        """Find every path between two stations, grouped by line."""
        paths = list(self._candidate_paths(from_station, to_station, False))
        journeys = tuple(
            _journey(path)
            for group in group_by_route(paths).values()
            for path in group
        )
        self._logger.info(
            "Paths found",
            extra={
                "from_station": from_station,
                "to_station": to_station,
                "paths": len(journeys),
            },
        )
        return journeys

    def find_shortest_path(
        self, from_station: str, to_station: str
    ) -> Optional[JourneyPath]:
        """Find the quickest path between two stations.

        Returns:
            The path with the least total time, or None if there is no path.
        """
        paths = list(self._candidate_paths(from_station, to_station, False))
        ordered = [p for group in group_by_route(paths).values() for p in group]
        shortest = select_shortest(ordered)
        if shortest is None:
            return None
        return _journey(shortest)


def _journey(path: Path) -> JourneyPath:
    """Turn a path of timed segments into a station-by-station journey.

    The stop marker repeats the last hop walked; it is not listed twice.
    """
    steps = [
        step
        for i, step in enumerate(path)
        if i == 0 or step.segment.index != path[i - 1].segment.index
    ]
    stations = tuple(step.segment.origin for step in steps)
    stations += (steps[-1].segment.destination,)
    routes = tuple(dict.fromkeys(step.route for step in steps))
    return JourneyPath(
        stations=stations,
        routes=routes,
        interchanges=interchange_count(path),
        total_minutes=total_minutes(path),
    )
