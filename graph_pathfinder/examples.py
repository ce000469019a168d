"""
Grafos de exemplo prontos para experimentos, testes e scripts.

- build_line_example: nós em linha reta ligados em sequência (0-1-2-...).
- build_grid_example: grade 4-vizinhos com células bloqueadas opcionais.

As posições são escaladas pelo peso das arestas, para que a distância em linha reta
nunca supere o custo real (heurística do A* admissível).
"""

from __future__ import annotations

from typing import Iterable, Set, Tuple

from .graph import Graph, add_node, add_or_set_edge, create_graph

Cell = Tuple[int, int]


def build_line_example(length: int = 4, weight: int = 1) -> Graph:
    """Nós 0..length-1 em (i * weight, 0) e arestas i-(i+1) com o peso dado."""
    graph = create_graph()
    for i in range(length):
        add_node(graph, (i * weight, 0))
    for i in range(length - 1):
        add_or_set_edge(graph, i, i + 1, weight)
    return graph


def grid_node_id(width: int, cell: Cell) -> int:
    """Id do nó da célula (x, y) numa grade de largura width (ordem por linhas)."""
    x, y = cell
    return y * width + x


def build_grid_example(
    width: int,
    height: int,
    weight: int = 10,
    blocked: Iterable[Cell] = (),
) -> Graph:
    """
    Grade width x height; nó (x, y) em (x * weight, y * weight).
    Células em blocked continuam existindo como nós (ids densos), mas ficam sem arestas.
    """
    blocked_cells: Set[Cell] = set(blocked)
    graph = create_graph()
    for y in range(height):
        for x in range(width):
            add_node(graph, (x * weight, y * weight))

    for y in range(height):
        for x in range(width):
            if (x, y) in blocked_cells:
                continue
            here = grid_node_id(width, (x, y))
            for nx_, ny_ in ((x + 1, y), (x, y + 1)):
                if nx_ >= width or ny_ >= height or (nx_, ny_) in blocked_cells:
                    continue
                add_or_set_edge(graph, here, grid_node_id(width, (nx_, ny_)), weight)
    return graph
