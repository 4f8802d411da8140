import pytest

from algobox.graphs import Graph, knight_reach_count


def build(count, edges):
    graph = Graph(count)
    for source, target in edges:
        graph.add_edge(source, target)
    return graph


def test_bfs_single_component_order():
    graph = build(4, [(0, 1), (0, 2), (1, 3)])
    assert graph.bfs() == [[0, 1, 2, 3]]


def test_bfs_starts_again_for_unreached_vertices():
    graph = build(5, [(0, 1), (0, 2), (1, 3)])
    assert graph.bfs() == [[0, 1, 2, 3], [4]]


def test_bfs_follows_edge_direction():
    graph = build(2, [(1, 0)])
    assert graph.bfs() == [[0], [1]]


def test_bfs_covers_every_vertex_once():
    graph = build(6, [(0, 1), (1, 2), (2, 0), (3, 4), (5, 5)])
    visited = [v for order in graph.bfs() for v in order]
    assert sorted(visited) == list(range(6))


def test_add_edge_rejects_unknown_vertex():
    graph = Graph(3)
    with pytest.raises(IndexError):
        graph.add_edge(0, 3)


def test_neighbours_in_insertion_order():
    graph = build(3, [(0, 2), (0, 1)])
    assert graph.neighbours(0) == [2, 1]


def test_scc_first_graph_order():
    graph = build(5, [(1, 0), (0, 2), (2, 1), (0, 3), (3, 4)])
    assert graph.strongly_connected_components() == [[4], [3], [1, 2, 0]]


def test_scc_chain_gives_singletons():
    graph = build(4, [(0, 1), (1, 2), (2, 3)])
    components = graph.strongly_connected_components()
    assert all(len(c) == 1 for c in components)
    assert [c[0] for c in components] == [3, 2, 1, 0]


@pytest.mark.parametrize(
    "count, edges",
    [
        (7, [(0, 1), (1, 2), (2, 0), (1, 3), (1, 4), (1, 6), (3, 5), (4, 5)]),
        (
            11,
            [
                (0, 1), (0, 3), (1, 2), (1, 4), (2, 0), (2, 6), (3, 2),
                (4, 5), (4, 6), (5, 6), (5, 7), (5, 8), (5, 9), (6, 4),
                (7, 9), (8, 9), (9, 8),
            ],
        ),
        (5, [(0, 1), (1, 2), (2, 3), (2, 4), (3, 0), (4, 2)]),
    ],
)
def test_scc_partitions_vertices(count, edges):
    graph = build(count, edges)
    components = graph.strongly_connected_components()
    members = [v for c in components for v in c]
    assert sorted(members) == list(range(count))


def test_scc_cycle_is_one_component():
    graph = build(5, [(0, 1), (1, 2), (2, 3), (2, 4), (3, 0), (4, 2)])
    components = graph.strongly_connected_components()
    assert len(components) == 1
    assert sorted(components[0]) == [0, 1, 2, 3, 4]


def test_scc_mutually_reachable_within_component():
    edges = [(0, 1), (1, 2), (2, 0), (1, 3), (1, 4), (1, 6), (3, 5), (4, 5)]
    graph = build(7, edges)
    components = [sorted(c) for c in graph.strongly_connected_components()]
    assert [0, 1, 2] in components
    assert sum(len(c) == 1 for c in components) == 4


def test_knight_zero_moves_counts_start():
    assert knight_reach_count(3, 3, 0) == 1


def test_knight_one_move_from_centre():
    assert knight_reach_count(3, 3, 1) == 9


def test_knight_one_move_from_corner():
    assert knight_reach_count(0, 0, 1) == 3


def test_knight_count_never_decreases():
    counts = [knight_reach_count(3, 3, moves) for moves in range(6)]
    assert counts == sorted(counts)
    assert counts[-1] <= 100


def test_knight_rejects_off_board():
    with pytest.raises(ValueError):
        knight_reach_count(10, 0, 1)


def test_knight_rejects_negative_moves():
    with pytest.raises(ValueError):
        knight_reach_count(0, 0, -1)