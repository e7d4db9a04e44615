import pytest

from dsakit.graph import Graph, bfs, dfs, has_cycle_bfs, has_cycle_dfs


def undirected(count, edges):
    adjacency = [[] for _ in range(count)]
    for u, v in edges:
        adjacency[u].append(v)
        adjacency[v].append(u)
    return adjacency


def test_render_undirected_edge():
    graph = Graph()
    graph.add_edge(1, 2, False)
    assert graph.render() == "1 ->2, \n2 ->1, \n"


def test_directed_edge_only_one_way():
    graph = Graph()
    graph.add_edge(1, 2, True)
    assert graph.adjacency == {1: [2]}


def test_neighbours_keep_insertion_order():
    graph = Graph()
    graph.add_edge(0, 3, True)
    graph.add_edge(0, 1, True)
    graph.add_edge(0, 2, True)
    assert graph.adjacency[0] == [3, 1, 2]


def test_render_empty():
    assert Graph().render() == ""


def test_bfs_order():
    adjacency = undirected(5, [(0, 1), (0, 2), (1, 3), (2, 4)])
    assert bfs(adjacency) == [0, 1, 2, 3, 4]


def test_bfs_only_reachable():
    adjacency = undirected(4, [(0, 1), (2, 3)])
    assert sorted(bfs(adjacency)) == [0, 1]


def test_bfs_visits_each_once():
    adjacency = undirected(4, [(0, 1), (1, 2), (2, 0), (2, 3)])
    order = bfs(adjacency)
    assert sorted(order) == [0, 1, 2, 3]
    assert order[0] == 0


def test_bfs_empty():
    assert bfs([]) == []


def test_dfs_goes_deep_first():
    adjacency = [[1, 2], [3], [], []]
    assert dfs(adjacency, 0) == [0, 1, 3, 2]


def test_dfs_directed_edges_only():
    adjacency = [[1], [], [0]]
    assert dfs(adjacency, 0) == [0, 1]


def test_dfs_visits_each_once_with_cycle():
    adjacency = [[1], [2], [0]]
    assert sorted(dfs(adjacency, 1)) == [0, 1, 2]


def test_dfs_bad_start():
    with pytest.raises(ValueError):
        dfs([[]], 3)


def test_triangle_has_cycle():
    adjacency = undirected(3, [(0, 1), (1, 2), (2, 0)])
    assert has_cycle_dfs(adjacency)
    assert has_cycle_bfs(adjacency)


def test_path_has_no_cycle():
    adjacency = undirected(4, [(0, 1), (1, 2), (2, 3)])
    assert not has_cycle_dfs(adjacency)
    assert not has_cycle_bfs(adjacency)


def test_cycle_in_later_component():
    adjacency = undirected(6, [(0, 1), (2, 3), (3, 4), (4, 5), (5, 2)])
    assert has_cycle_dfs(adjacency)
    assert has_cycle_bfs(adjacency)


def test_forest_has_no_cycle():
    adjacency = undirected(7, [(0, 1), (0, 2), (3, 4), (4, 5)])
    assert not has_cycle_dfs(adjacency)
    assert not has_cycle_bfs(adjacency)


def test_no_edges():
    adjacency = [[], [], []]
    assert not has_cycle_dfs(adjacency)
    assert not has_cycle_bfs(adjacency)


def test_detectors_agree():
    adjacency = undirected(5, [(0, 1), (1, 2), (2, 3), (3, 1), (3, 4)])
    assert has_cycle_bfs(adjacency) == has_cycle_dfs(adjacency) is True