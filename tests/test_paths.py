from conftest import ACCESS_LINE, CHAIN, make_store, segment

from railnet.domain.models import TimedSegment
from railnet.graph.paths import (
    SearchOutcome,
    _search,
    find_paths,
    group_by_route,
    interchange_count,
    nearest_step_free,
    select_shortest,
    total_minutes,
)

# A chain long enough that the hop after the stop still has a successor
LONG_CHAIN = CHAIN + [("X", "D", "E", 2)]


def _hops(path):
    return [(step.segment.origin, step.segment.destination, step.elapsed) for step in path]


def test_path_ends_with_stop_marker():
    store = make_store(LONG_CHAIN)
    start = segment(store, "X", "A", "B")
    stop = segment(store, "X", "B", "C")

    paths = find_paths(store, start, stop)

    assert [_hops(p) for p in paths] == [
        [("A", "B", 10), ("B", "C", 15), ("B", "C", 15)],
    ]


def test_stop_is_matched_against_predecessors_only():
    # The stop is recognised from the hop after it; when that hop is the
    # end of the line the branch is a dead end and nothing is found.
    store = make_store(CHAIN)
    start = segment(store, "X", "A", "B")
    stop = segment(store, "X", "B", "C")

    assert find_paths(store, start, stop) == []


def test_stop_at_end_of_line_is_not_found():
    store = make_store(LONG_CHAIN)
    start = segment(store, "X", "A", "B")
    stop = segment(store, "X", "D", "E")

    assert find_paths(store, start, stop) == []


def test_leaf_start_is_not_found_marker():
    store = make_store(CHAIN)
    leaf = segment(store, "X", "C", "D")

    assert _search(store, leaf, leaf, 0, set()) is SearchOutcome.NOT_FOUND


def test_stop_directly_behind_start():
    store = make_store(LONG_CHAIN)
    start = segment(store, "X", "B", "C")
    stop = segment(store, "X", "A", "B")

    paths = find_paths(store, start, stop)

    assert [_hops(p) for p in paths] == [[("A", "B", 0)]]


def test_unreachable_stop_returns_empty():
    store = make_store(LONG_CHAIN + [("Y", "K", "L", 1), ("Y", "L", "M", 1)])
    start = segment(store, "X", "A", "B")
    stop = segment(store, "Y", "K", "L")

    assert find_paths(store, start, stop) == []


def test_search_terminates_on_cycle():
    store = make_store(
        [
            ("O", "A", "B", 1),
            ("O", "B", "C", 1),
            ("O", "C", "A", 1),
            ("Q", "K", "L", 1),
        ]
    )
    start = segment(store, "O", "A", "B")
    stop = segment(store, "Q", "K", "L")

    assert find_paths(store, start, stop) == []


def test_dead_end_branches_are_dropped():
    store = make_store(
        [
            ("X", "A", "B", 1),
            ("X", "B", "C", 2),
            ("X", "C", "D", 1),
            ("X", "D", "E", 1),
            ("X", "B", "C2", 4),
        ]
    )
    start = segment(store, "X", "A", "B")
    stop = segment(store, "X", "B", "C")

    paths = find_paths(store, start, stop)

    assert len(paths) == 1
    assert total_minutes(paths[0]) == 3


def test_accessible_start_uses_nearest_step_free_predecessor(access_store):
    start = segment(access_store, "Z", "Q", "R")
    stop = segment(access_store, "Z", "R", "S")

    paths = find_paths(access_store, start, stop, accessible_only=True)

    assert [_hops(p) for p in paths] == [
        [("P", "Q", 3), ("Q", "R", 7), ("R", "S", 12), ("R", "S", 12)],
    ]


def test_accessible_stop_uses_nearest_step_free_successor():
    store = make_store(
        ACCESS_LINE + [("Z", "U", "V", 1), ("Z", "V", "W", 1)], {"P", "T"}
    )
    start = segment(store, "Z", "P", "Q")
    stop = segment(store, "Z", "Q", "R")

    paths = find_paths(store, start, stop, accessible_only=True)

    assert len(paths) == 1
    assert paths[0][-1].segment == segment(store, "Z", "T", "U")


def test_accessible_search_without_step_free_start_terminates():
    store = make_store(ACCESS_LINE, {"R"})
    start = segment(store, "Z", "Q", "R")
    stop = segment(store, "Z", "R", "S")

    assert find_paths(store, start, stop, accessible_only=True) == []


def test_accessible_search_on_cycle_without_step_free_terminates():
    store = make_store([("O", "A", "B", 1), ("O", "B", "A", 1)])
    start = segment(store, "O", "A", "B")

    assert find_paths(store, start, start, accessible_only=True) == []


def test_nearest_step_free_prefers_closest(access_store):
    tu = segment(access_store, "Z", "T", "U")

    nearest = nearest_step_free(tu, access_store.predecessors_of)

    assert nearest == segment(access_store, "Z", "R", "S")


def test_nearest_step_free_none_available(access_store):
    pq = segment(access_store, "Z", "P", "Q")

    assert nearest_step_free(pq, access_store.predecessors_of) is None


def _path(store, *hops):
    return tuple(
        TimedSegment(segment(store, route, o, d), elapsed)
        for route, o, d, elapsed in hops
    )


def test_interchange_count_counts_distinct_routes():
    store = make_store([("X", "A", "B", 1), ("Y", "B", "C", 1)])
    single = _path(store, ("X", "A", "B", 1))
    mixed = _path(store, ("X", "A", "B", 1), ("Y", "B", "C", 2))

    assert interchange_count(single) == 0
    assert interchange_count(mixed) == 1


def test_group_by_route_keeps_order():
    store = make_store([("X", "A", "B", 1), ("Y", "A", "B", 1)])
    x = _path(store, ("X", "A", "B", 1))
    y = _path(store, ("Y", "A", "B", 1))

    groups = group_by_route([y, x, y])

    assert list(groups) == ["Y", "X"]
    assert groups["Y"] == [y, y]


def test_select_shortest_picks_least_time():
    store = make_store([("X", "A", "B", 1), ("Y", "A", "B", 1)])
    slow = _path(store, ("X", "A", "B", 22))
    fast = _path(store, ("Y", "A", "B", 15))

    assert select_shortest([slow, fast]) == fast


def test_select_shortest_tie_goes_to_first():
    store = make_store([("X", "A", "B", 1), ("Y", "A", "B", 1)])
    first = _path(store, ("X", "A", "B", 15))
    second = _path(store, ("Y", "A", "B", 15))

    assert select_shortest([first, second]) == first


def test_select_shortest_of_nothing():
    assert select_shortest([]) is None


def test_stop_directly_behind_start_is_logged(caplog):
    store = make_store(LONG_CHAIN)
    start = segment(store, "X", "B", "C")
    stop = segment(store, "X", "A", "B")

    with caplog.at_level("DEBUG", logger="railnet.graph.paths"):
        find_paths(store, start, stop)

    assert "Stop lies directly behind start" in caplog.text


def test_ordinary_path_is_not_logged_as_behind_start(caplog):
    store = make_store(LONG_CHAIN)
    start = segment(store, "X", "A", "B")
    stop = segment(store, "X", "B", "C")

    with caplog.at_level("DEBUG", logger="railnet.graph.paths"):
        find_paths(store, start, stop)

    assert "Stop lies directly behind start" not in caplog.text
