"""
Leitura do resultado das buscas: reconstrução de caminho, consulta por alcance e custo de caminho.
Tudo aqui lê o estado deixado pela última busca nos nós do grafo (cost, parent_id).
"""

from __future__ import annotations

import logging
from typing import List

from .algorithms import run_point_to_point_search
from .config import NO_PARENT
from .graph import Graph

logger = logging.getLogger(__name__)


def get_path(graph: Graph, start_id: int, target_id: int, recalculate: bool = False) -> List[int]:
    """
    Retorna os ids do caminho de start_id até target_id, na ordem da origem para o alvo.

    A origem NÃO entra na lista e o alvo é sempre o último elemento; start == target dá [].
    recalculate=True executa A* antes de reconstruir; com False usa o que a última busca
    deixou no grafo (por exemplo, um Dijkstra já feito a partir de start_id).
    Ids inválidos, alvo nunca alcançado ou cadeia que não passa por start_id: lista vazia.
    """
    if not (graph.is_valid_node(start_id) and graph.is_valid_node(target_id)):
        logger.warning("get_path: ids de nó inválidos (start=%r, target=%r)", start_id, target_id)
        return []

    # Checado antes do recálculo: o alvo precisa ter sido alcançado por alguma busca anterior
    if graph.nodes[target_id].parent_id == NO_PARENT:
        logger.warning("get_path: nó alvo %d nunca foi alcançado", target_id)
        return []

    if recalculate:
        run_point_to_point_search(graph, start_id, target_id)

    path: List[int] = []
    current = target_id
    while current != start_id:
        if current == NO_PARENT:
            logger.warning("get_path: cadeia de predecessores de %d não passa por %d", target_id, start_id)
            return []
        path.append(current)
        current = graph.nodes[current].parent_id
    path.reverse()
    return path


def get_nodes_in_range(graph: Graph, max_cost: int) -> List[int]:
    """
    Ids (em ordem de id) dos nós cujo custo atual é <= max_cost.
    Só faz sentido depois de run_single_source_shortest_paths. Com max_cost >= UNREACHED_COST
    os nós não alcançados também entram (o custo deles é o próprio sentinela).
    """
    return [node.node_id for node in graph.nodes if node.cost <= max_cost]


def path_cost(graph: Graph, start_id: int, path: List[int]) -> float:
    """
    Custo total de um caminho no formato de get_path (origem implícita).
    Retorna 0 para caminho vazio e inf se algum trecho não for aresta do grafo.
    """
    total = 0
    previous = start_id
    for node_id in path:
        weight = graph.edge_weight(previous, node_id)
        if weight is None:
            return float("inf")
        total += weight
        previous = node_id
    return total
