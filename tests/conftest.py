"""
Configuração do pytest e fixtures compartilhadas.
"""

import math
import random
from typing import Callable

import pytest

from graph_pathfinder import Graph, add_node, add_or_set_edge, build_line_example, create_graph


@pytest.fixture
def line_graph() -> Graph:
    """Nós 0..3 em (0,0), (1,0), (2,0), (3,0); arestas 0-1, 1-2, 2-3 com peso 1."""
    return build_line_example(4, 1)


@pytest.fixture
def diamond_graph() -> Graph:
    """
    0 -(1)- 1 -(1)- 3 e 0 -(4)- 2 -(1)- 3, mais o nó 4 isolado.
    Caminho mínimo 0 -> 3 passa por 1 (custo 2).
    """
    graph = create_graph()
    for pos in [(0, 0), (1, 1), (1, -1), (2, 0), (10, 10)]:
        add_node(graph, pos)
    add_or_set_edge(graph, 0, 1, 1)
    add_or_set_edge(graph, 1, 3, 1)
    add_or_set_edge(graph, 0, 2, 4)
    add_or_set_edge(graph, 2, 3, 1)
    return graph


def _random_graph(seed: int, n_nodes: int = 12, n_edges: int = 20) -> Graph:
    """
    Grafo aleatório com posições inteiras e pesos >= distância euclidiana entre as pontas,
    para que a heurística em linha reta seja consistente.
    """
    rng = random.Random(seed)
    graph = create_graph()
    for _ in range(n_nodes):
        add_node(graph, (rng.randint(0, 20), rng.randint(0, 20)))
    for _ in range(n_edges):
        a, b = rng.randrange(n_nodes), rng.randrange(n_nodes)
        if a == b:
            continue
        pa, pb = graph.nodes[a].position, graph.nodes[b].position
        dist = math.ceil(math.hypot(pa[0] - pb[0], pa[1] - pb[1]))
        add_or_set_edge(graph, a, b, dist + rng.randint(0, 5))
    return graph


@pytest.fixture
def random_graph() -> Callable[..., Graph]:
    """Fábrica de grafos aleatórios reprodutíveis: random_graph(seed, n_nodes, n_edges)."""
    return _random_graph
