"""
Modelagem do grafo sobre o qual os algoritmos de busca operam.

Vértices: nós com id denso (índice em Graph.nodes) e posição 2D ('position' = (x, y)).
Arestas: não direcionadas, guardadas como par simétrico (a -> b e b -> a com o mesmo peso)
em listas de adjacência paralelas a Graph.nodes (Graph.edges[i] = vizinhos do nó i).

Os campos cost, parent_id e heuristic_cost de cada nó são estado de trabalho: cada busca
sobrescreve o resultado da anterior (memo de uma única posição), e get_path / get_nodes_in_range
apenas leem o que a última busca deixou.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

import networkx as nx

from .config import NO_HEAP_SLOT, NO_PARENT, UNREACHED_COST

logger = logging.getLogger(__name__)

Position = Tuple[float, float]


@dataclass(eq=False)
class Node:
    """Nó do grafo com custo acumulado (g), heurística (h), predecessor e posição no heap."""

    node_id: int
    position: Position = (0.0, 0.0)
    parent_id: int = NO_PARENT
    cost: int = UNREACHED_COST
    heuristic_cost: int = 0
    heap_slot: int = NO_HEAP_SLOT

    @property
    def total_cost(self) -> int:
        """f(n) = g(n) + h(n). Na busca de origem única h = 0, então f = g."""
        return self.cost + self.heuristic_cost

    @property
    def reached(self) -> bool:
        return self.cost < UNREACHED_COST


@dataclass(frozen=True)
class Edge:
    """Meia-aresta: destino e peso (custo não negativo para atravessar)."""

    target_id: int
    weight: int


@dataclass
class Graph:
    """Nós indexados por id e listas de adjacência paralelas (uma por nó)."""

    nodes: List[Node] = field(default_factory=list)
    edges: List[List[Edge]] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.nodes)

    def is_valid_node(self, node_id: int) -> bool:
        return isinstance(node_id, int) and 0 <= node_id < len(self.nodes)

    def neighbours(self, node_id: int) -> List[Edge]:
        return self.edges[node_id]

    def edge_weight(self, a: int, b: int) -> Optional[int]:
        """Peso da aresta a-b, ou None se não existir (ou se algum id for inválido)."""
        if not (self.is_valid_node(a) and self.is_valid_node(b)):
            return None
        for edge in self.edges[a]:
            if edge.target_id == b:
                return edge.weight
        return None

    def number_of_edges(self) -> int:
        """Número de arestas não direcionadas (par simétrico e laço contam uma vez cada)."""
        # Laços ficam guardados uma única vez; pares simétricos, duas
        return sum(1 for a, adj in enumerate(self.edges) for edge in adj if edge.target_id >= a)

    def reset_search_state(self) -> None:
        """
        Pré-passo comum às duas buscas: custo = sentinela "não alcançado", heurística = 0,
        predecessor = nenhum. Também solta qualquer referência a um heap antigo.
        """
        for node in self.nodes:
            node.cost = UNREACHED_COST
            node.heuristic_cost = 0
            node.parent_id = NO_PARENT
            node.heap_slot = NO_HEAP_SLOT


def create_graph() -> Graph:
    """Retorna um grafo vazio."""
    return Graph()


def add_node(graph: Graph, position: Position = (0.0, 0.0)) -> int:
    """
    Cria um nó na posição dada e sua lista de adjacência (vazia).
    Retorna o id do nó, que é igual ao número de nós antes da inserção.
    """
    node_id = len(graph.nodes)
    graph.nodes.append(Node(node_id=node_id, position=(float(position[0]), float(position[1]))))
    graph.edges.append([])
    return node_id


def _replace_weight(adjacency: List[Edge], target_id: int, weight: int) -> None:
    for i, edge in enumerate(adjacency):
        if edge.target_id == target_id:
            adjacency[i] = Edge(target_id, weight)


def add_or_set_edge(graph: Graph, node_a: int, node_b: int, weight: int) -> None:
    """
    Insere a aresta a-b (nos dois sentidos) com o peso dado.
    Se a aresta já existe, apenas sobrescreve o peso nos dois sentidos (sem duplicar entradas).
    Ids inválidos ou peso negativo: registra um aviso e não altera o grafo.
    """
    if not (graph.is_valid_node(node_a) and graph.is_valid_node(node_b)):
        logger.warning("add_or_set_edge: vértice fora do grafo (a=%r, b=%r, n=%d)", node_a, node_b, len(graph))
        return
    if weight < 0:
        logger.warning("add_or_set_edge: peso negativo %r ignorado (a=%d, b=%d)", weight, node_a, node_b)
        return

    if any(edge.target_id == node_b for edge in graph.edges[node_a]):
        logger.warning("add_or_set_edge: peso da aresta %d-%d sobrescrito para %d", node_a, node_b, weight)
        _replace_weight(graph.edges[node_a], node_b, weight)
        _replace_weight(graph.edges[node_b], node_a, weight)
        return

    graph.edges[node_a].append(Edge(node_b, weight))
    # Laço (a == b): uma única entrada basta
    if node_a != node_b:
        graph.edges[node_b].append(Edge(node_a, weight))


def heuristic_distance(graph: Graph, node_a: int, node_b: int) -> int:
    """Piso da distância em linha reta entre dois nós. Heurística (admissível) do A*."""
    pos_a = graph.nodes[node_a].position
    pos_b = graph.nodes[node_b].position
    return math.floor(math.hypot(pos_a[0] - pos_b[0], pos_a[1] - pos_b[1]))


def validate_node_ids(graph: Graph, node_ids: Iterable[int]) -> None:
    """
    Levanta networkx.NodeNotFound se algum id não existir no grafo.
    Usado pelas entradas das buscas; get_path e add_or_set_edge apenas registram aviso.
    """
    missing = [n for n in node_ids if not graph.is_valid_node(n)]
    if not missing:
        return
    raise nx.NodeNotFound(f"Nó(s) {missing} não existem no grafo (ids válidos: 0..{len(graph) - 1}).")
