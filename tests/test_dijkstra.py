"""
Testes da busca de origem única (Dijkstra) contra a implementação de referência do NetworkX.
"""

import networkx as nx
import pytest

from graph_pathfinder import (
    NO_PARENT,
    UNREACHED_COST,
    add_or_set_edge,
    run_single_source_shortest_paths,
    to_networkx,
)


def _walk_to_start(graph, node_id, start_id):
    """Soma os pesos seguindo os predecessores até a origem."""
    total = 0
    current = node_id
    while current != start_id:
        parent = graph.nodes[current].parent_id
        assert parent != NO_PARENT
        total += graph.edge_weight(parent, current)
        current = parent
    return total


def test_line_costs(line_graph):
    run_single_source_shortest_paths(line_graph, 0)
    assert [n.cost for n in line_graph.nodes] == [0, 1, 2, 3]
    assert [n.parent_id for n in line_graph.nodes] == [NO_PARENT, 0, 1, 2]


def test_prefers_cheaper_detour(diamond_graph):
    run_single_source_shortest_paths(diamond_graph, 0)
    assert diamond_graph.nodes[3].cost == 2
    assert diamond_graph.nodes[3].parent_id == 1
    assert diamond_graph.nodes[2].cost == 3
    assert diamond_graph.nodes[2].parent_id == 3


def test_unreachable_node_keeps_sentinels(diamond_graph):
    run_single_source_shortest_paths(diamond_graph, 0)
    isolated = diamond_graph.nodes[4]
    assert isolated.cost == UNREACHED_COST
    assert isolated.parent_id == NO_PARENT


def test_start_has_zero_cost_and_no_parent(diamond_graph):
    run_single_source_shortest_paths(diamond_graph, 3)
    assert diamond_graph.nodes[3].cost == 0
    assert diamond_graph.nodes[3].parent_id == NO_PARENT


def test_rerun_from_other_start_resets_previous_result(line_graph):
    run_single_source_shortest_paths(line_graph, 0)
    run_single_source_shortest_paths(line_graph, 3)
    assert [n.cost for n in line_graph.nodes] == [3, 2, 1, 0]
    assert [n.parent_id for n in line_graph.nodes] == [1, 2, 3, NO_PARENT]


def test_zero_weight_edges(line_graph):
    add_or_set_edge(line_graph, 1, 2, 0)
    run_single_source_shortest_paths(line_graph, 0)
    assert [n.cost for n in line_graph.nodes] == [0, 1, 1, 2]


@pytest.mark.parametrize("seed", range(10))
def test_matches_networkx_on_random_graphs(random_graph, seed):
    graph = random_graph(seed)
    expected = nx.single_source_dijkstra_path_length(to_networkx(graph), 0, weight="weight")

    run_single_source_shortest_paths(graph, 0)

    for node in graph.nodes:
        if node.node_id in expected:
            assert node.cost == expected[node.node_id]
            assert _walk_to_start(graph, node.node_id, 0) == node.cost
        else:
            assert node.cost == UNREACHED_COST
            assert node.parent_id == NO_PARENT


def test_invalid_start_raises(line_graph):
    with pytest.raises(nx.NodeNotFound):
        run_single_source_shortest_paths(line_graph, 4)
