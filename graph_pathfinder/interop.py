"""
Conversão entre Graph e NetworkX, e persistência do grafo em JSON (formato node-link).

No NetworkX: atributo de nó 'pos' = (x, y) e atributo de aresta 'weight'.
O estado de busca (cost, parent_id) é exportado em to_networkx para exibição/inspeção,
mas não é gravado em JSON nem lido de volta.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Tuple, Union

import networkx as nx

from .graph import Graph, add_node, add_or_set_edge, create_graph

logger = logging.getLogger(__name__)


def to_networkx(graph: Graph, include_state: bool = True) -> nx.Graph:
    """Grafo NetworkX não direcionado com os mesmos ids, posições e pesos."""
    G = nx.Graph()
    for node in graph.nodes:
        attrs: Dict[str, Any] = {"pos": node.position}
        if include_state:
            attrs["cost"] = node.cost
            attrs["parent_id"] = node.parent_id
        G.add_node(node.node_id, **attrs)
    for node_id, adjacency in enumerate(graph.edges):
        for edge in adjacency:
            G.add_edge(node_id, edge.target_id, weight=edge.weight)
    return G


def from_networkx(G: nx.Graph, default_weight: int = 1) -> Tuple[Graph, Dict[Any, int]]:
    """
    Monta um Graph a partir de um grafo NetworkX.
    Ids são atribuídos na ordem de G.nodes(); retorna (graph, {nó NetworkX -> id}).
    Nós sem 'pos' ficam em (0, 0), o que deixa a heurística do A* em zero para eles.
    Em DiGraph, a aresta é tratada como não direcionada e o último peso lido prevalece.
    Pesos não inteiros (ex.: 1.9) não são arredondados: a aresta é ignorada com um aviso.
    """
    graph = create_graph()
    ids: Dict[Any, int] = {}
    for n, data in G.nodes(data=True):
        pos = data.get("pos", (0.0, 0.0))
        ids[n] = add_node(graph, (pos[0], pos[1]))
    for u, v, data in G.edges(data=True):
        weight = data.get("weight", default_weight)
        if isinstance(weight, bool) or not isinstance(weight, (int, float)) or not float(weight).is_integer():
            logger.warning("from_networkx: peso não inteiro %r na aresta %r-%r ignorado", weight, u, v)
            continue
        add_or_set_edge(graph, ids[u], ids[v], int(weight))
    return graph, ids


def save_graph_json(graph: Graph, output_path: Union[str, Path]) -> Path:
    """Grava o grafo (posições e pesos) em JSON node-link. Retorna o caminho gravado."""
    output_path = Path(output_path)
    data = nx.node_link_data(to_networkx(graph, include_state=False), edges="edges")
    for node in data["nodes"]:
        node["pos"] = list(node["pos"])
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False, indent=2)
    return output_path


def load_graph_json(input_path: Union[str, Path]) -> Graph:
    """Carrega um grafo gravado por save_graph_json (ou qualquer JSON node-link com 'pos')."""
    with open(input_path, encoding="utf-8") as f:
        data = json.load(f)
    # Arquivos gerados por versões antigas do NetworkX usam a chave "links"
    edges_key = "edges" if "edges" in data else "links"
    G = nx.node_link_graph(data, edges=edges_key)
    graph, _ = from_networkx(G)
    return graph
