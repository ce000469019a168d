"""
Algoritmo A*: busca heurística ponto a ponto.
f(n) = g(n) + h(n), com h = piso da distância em linha reta até o alvo (heuristic_distance).
Conjunto aberto: PathfindingHeap; conjunto fechado: set de ids já assentados.
O resultado é a cadeia de predecessores do alvo até a origem (parent_id nos nós do grafo).
"""

from __future__ import annotations

import logging
from typing import Set

from ..graph import Graph, heuristic_distance, validate_node_ids
from ..heap import PathfindingHeap

logger = logging.getLogger(__name__)


def run_point_to_point_search(graph: Graph, start_id: int, target_id: int) -> None:
    """
    Procura um caminho de custo mínimo de start_id até target_id.

    Não há retorno de sucesso: se o alvo for alcançado, seu parent_id aponta para o caminho
    (exceto quando start == target). Se o conjunto aberto esvaziar antes, parent_id do alvo
    continua NO_PARENT. Quem chama deve checar esse campo.
    """
    validate_node_ids(graph, (start_id, target_id))
    graph.reset_search_state()

    open_set = PathfindingHeap(len(graph.nodes))
    closed_set: Set[int] = set()

    start = graph.nodes[start_id]
    start.cost = 0
    start.heuristic_cost = heuristic_distance(graph, start_id, target_id)
    open_set.insert(start)

    while open_set:
        current = open_set.extract_min()
        closed_set.add(current.node_id)

        if current.node_id == target_id:
            logger.info("a_star: caminho encontrado de %d até %d (custo %d)", start_id, target_id, current.cost)
            return

        for edge in graph.neighbours(current.node_id):
            if edge.target_id in closed_set:
                continue
            neighbour = graph.nodes[edge.target_id]
            movement_cost = current.cost + edge.weight

            # Já aberto com custo estritamente melhor: descarta. Empate é reprocessado.
            in_open = open_set.contains(neighbour)
            if in_open and neighbour.cost < movement_cost:
                continue

            neighbour.parent_id = current.node_id
            neighbour.cost = movement_cost
            neighbour.heuristic_cost = heuristic_distance(graph, neighbour.node_id, target_id)

            if in_open:
                open_set.notify_cost_decreased(neighbour)
            else:
                open_set.insert(neighbour)

    logger.info("a_star: nenhum caminho de %d até %d", start_id, target_id)
