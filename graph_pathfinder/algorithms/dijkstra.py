"""
Algoritmo de Dijkstra: caminhos mínimos de origem única.
Calcula, a partir de start, o custo mínimo e o predecessor de todos os nós alcançáveis.
Resultado fica nos próprios nós do grafo (cost, parent_id); use get_path / get_nodes_in_range.
Fila de prioridade: PathfindingHeap (heap indexado com notify_cost_decreased).
"""

from __future__ import annotations

import logging

from ..graph import Graph, validate_node_ids
from ..heap import PathfindingHeap

logger = logging.getLogger(__name__)


def run_single_source_shortest_paths(graph: Graph, start_id: int) -> None:
    """
    Executa Dijkstra a partir de start_id sobre todo o grafo.

    Reinicia o estado de busca (custo "não alcançado", sem predecessor), zera o custo da
    origem e carrega todos os nós no heap de uma vez. A cada passo remove o nó de menor custo
    e relaxa suas arestas; termina quando o heap esvazia (cada nó sai exatamente uma vez).
    Nós não alcançados mantêm o custo sentinela e predecessor NO_PARENT.
    """
    validate_node_ids(graph, (start_id,))
    graph.reset_search_state()

    unvisited = PathfindingHeap(len(graph.nodes))
    graph.nodes[start_id].cost = 0
    for node in graph.nodes:
        unvisited.insert(node)

    while unvisited:
        node = unvisited.extract_min()
        for edge in graph.neighbours(node.node_id):
            distance = node.cost + edge.weight
            neighbour = graph.nodes[edge.target_id]
            if distance < neighbour.cost:
                neighbour.cost = distance
                neighbour.parent_id = node.node_id
                unvisited.notify_cost_decreased(neighbour)

    if logger.isEnabledFor(logging.DEBUG):
        reached = sum(1 for n in graph.nodes if n.reached)
        logger.debug("dijkstra: origem %d, %d/%d nós alcançados", start_id, reached, len(graph.nodes))
