"""Console menu for the rail network route finder.

Loads the network named by the RAILNET_NETWORK_* settings, then loops
over the menu until the user exits.
"""

from __future__ import annotations

import sys
from typing import Callable, Dict, Tuple

from railnet.config import configure_logging, get_config
from railnet.container import get_container
from railnet.domain.errors import NetworkLoadError
from railnet.pipeline import run_query
from railnet.services.route_finder import RouteFinderService

MENU = """
Rail Network Route Finder

1 - List all termini along a line
2 - List all stations along a line
3 - List all lines and their travel time
4 - Find a step-free path between two stations
5 - Find all paths between two stations
6 - Find the shortest path between two stations
7 - Exit
"""

PROMPTS: Dict[str, Tuple[str, ...]] = {
    "1": ("Enter the name of the line:",),
    "2": ("Enter the name of the line:",),
    "3": (),
    "4": ("Enter the start station:", "Enter the destination station:"),
    "5": ("Enter the start station:", "Enter the destination station:"),
    "6": ("Enter the start station:", "Enter the destination station:"),
}


def main(read: Callable[[str], str] = input) -> None:
    config = get_config()
    configure_logging(config.observability)

    try:
        service = get_container().resolve(RouteFinderService)
    except NetworkLoadError as e:
        print(f"Could not load the network: {e}")
        sys.exit(1)

    while True:
        print(MENU)
        choice = read("Choice: ").strip()
        if choice == "7":
            print("Goodbye!")
            return
        if choice not in PROMPTS:
            print(f"Command not recognised: {choice!r}")
            continue
        arguments = [read(prompt + " ").strip() for prompt in PROMPTS[choice]]
        print(run_query(choice, *arguments, service=service))


if __name__ == "__main__":
    main()
