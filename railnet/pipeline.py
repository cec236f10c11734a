"""Text rendering of route finder queries.

Each menu option maps to a renderer that runs one query and turns the
result into the message shown to the user. Front-ends (the console menu
in ``start.py``, tests) call ``run_query`` with the option and its
arguments.
"""

from __future__ import annotations

from typing import Callable, Dict, Optional

from .services.route_finder import RouteFinderService

QueryRenderer = Callable[..., str]


def render_termini(service: RouteFinderService, route: str) -> str:
    termini = service.list_termini(route)
    if termini is None:
        return f"Line {route} has no termini."
    return f"{termini.origin} -- {termini.destination} ({termini.total_minutes})"


def render_stations_in_line(service: RouteFinderService, route: str) -> str:
    """Render a line as ``A <4> B <8> C`` under a ``route (total) :`` header."""
    stops = service.list_stations_in_line(route)
    if not stops:
        return f"Line {route} has no stations."

    body = stops[0].station
    for stop in stops[1:]:
        body += f" <{stop.minutes}> {stop.station}"
    return f"{route} ({stops[-1].minutes}) :\n{body}"


def render_all_lines(service: RouteFinderService) -> str:
    lines = service.list_all_lines()
    if not lines:
        return "No lines loaded."
    return "\n".join(
        f"{line.origin} <...> {line.destination} ({line.total_minutes}mins)"
        for line in lines
    )


def render_accessible_path(
    service: RouteFinderService, from_station: str, to_station: str
) -> str:
    journey = service.find_accessible_path(from_station, to_station)
    if journey.is_empty:
        return f"No step-free path found between {from_station} and {to_station}."
    return " -> ".join(journey.stations)


def render_all_paths(
    service: RouteFinderService, from_station: str, to_station: str
) -> str:
    journeys = service.find_all_paths(from_station, to_station)
    if not journeys:
        return f"No path found between {from_station} and {to_station}."
    return "\n".join(
        f"{journey.interchanges} changes: {' -> '.join(journey.stations)}"
        for journey in journeys
    )


def render_shortest_path(
    service: RouteFinderService, from_station: str, to_station: str
) -> str:
    journey = service.find_shortest_path(from_station, to_station)
    if journey is None:
        return f"No path found between {from_station} and {to_station}."
    return (
        f"shortest: {' -> '.join(journey.stations)} "
        f"({journey.total_minutes} mins)"
    )


QUERY_RENDERERS: Dict[str, QueryRenderer] = {
    "1": render_termini,
    "2": render_stations_in_line,
    "3": render_all_lines,
    "4": render_accessible_path,
    "5": render_all_paths,
    "6": render_shortest_path,
}


def run_query(
    option: str,
    *arguments: str,
    service: Optional[RouteFinderService] = None,
) -> str:
    """Run the query behind a menu option and return the message to show.

    The default container's service is used when none is given, which
    loads the network on first use.

    Raises:
        NetworkLoadError: If the network has to be loaded and cannot be.
    """
    renderer = QUERY_RENDERERS.get(option)
    if renderer is None:
        return f"Unknown option: {option!r}"

    if service is None:
        from .container import get_container

        service = get_container().resolve(RouteFinderService)

    return renderer(service, *arguments)
