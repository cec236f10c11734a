"""Shared fixtures: small networks with known shapes and timings."""

from __future__ import annotations

import pytest

from railnet.adapters.network import InMemoryNetworkSource
from railnet.config import reset_config
from railnet.container import reset_container
from railnet.graph.store import SegmentStore, build_store
from railnet.services.route_finder import RouteFinderService

# A -> B -> C -> D on one line
CHAIN = [
    ("X", "A", "B", 10),
    ("X", "B", "C", 5),
    ("X", "C", "D", 7),
]

# Two lines serving A and C, one quicker than the other
TWO_LINES = [
    ("Slow", "A", "B", 10),
    ("Slow", "B", "C", 12),
    ("Slow", "C", "D", 3),
    ("Slow", "D", "E", 1),
    ("Fast", "A", "B", 5),
    ("Fast", "B", "C", 10),
    ("Fast", "C", "F", 2),
    ("Fast", "F", "G", 2),
]

# P -> Q -> R -> S -> T -> U with step-free access at P and R only
ACCESS_LINE = [
    ("Z", "P", "Q", 3),
    ("Z", "Q", "R", 4),
    ("Z", "R", "S", 5),
    ("Z", "S", "T", 6),
    ("Z", "T", "U", 2),
]
ACCESS_STEP_FREE = {"P", "R"}


def make_store(rows, step_free=()) -> SegmentStore:
    source = InMemoryNetworkSource.from_tuples(rows, step_free)
    return build_store(source.load_segments(), source.load_step_free())


def segment(store: SegmentStore, route: str, origin: str, destination: str):
    return next(
        s
        for s in store
        if s.route == route and s.origin == origin and s.destination == destination
    )


@pytest.fixture(autouse=True)
def _fresh_globals():
    reset_config()
    reset_container()
    yield
    reset_config()
    reset_container()


@pytest.fixture
def chain_store() -> SegmentStore:
    return make_store(CHAIN, {"A", "C"})


@pytest.fixture
def two_lines_service() -> RouteFinderService:
    return RouteFinderService(store=make_store(TWO_LINES))


@pytest.fixture
def access_store() -> SegmentStore:
    return make_store(ACCESS_LINE, ACCESS_STEP_FREE)
