"""
Helpers para exibição do grafo e do caminho encontrado (Dash Cytoscape).
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Set, Tuple

import dash_cytoscape as cyto
from dash import Dash, Input, Output, html

from ..graph import Graph

# Canvas em pixels para layout (posições do grafo são escaladas para este tamanho)
_LAYOUT_CANVAS_WIDTH: float = 800.0
_LAYOUT_CANVAS_HEIGHT: float = 600.0
_LAYOUT_PADDING: float = 40.0


def scale_positions_to_canvas(
    positions: Dict[int, Tuple[float, float]],
    width: float = _LAYOUT_CANVAS_WIDTH,
    height: float = _LAYOUT_CANVAS_HEIGHT,
    padding: float = _LAYOUT_PADDING,
) -> Dict[int, Tuple[float, float]]:
    """Escala posições (unidades do grafo) para um canvas em pixels, mantendo o formato."""
    if not positions:
        return {}
    xs = [p[0] for p in positions.values()]
    ys = [p[1] for p in positions.values()]
    min_x, min_y = min(xs), min(ys)
    range_x = max(xs) - min_x
    range_y = max(ys) - min_y
    if range_x < 1e-6:
        range_x = 1.0
    if range_y < 1e-6:
        range_y = 1.0
    inner_w = width - 2 * padding
    inner_h = height - 2 * padding
    return {
        n: (padding + (x - min_x) / range_x * inner_w, padding + (y - min_y) / range_y * inner_h)
        for n, (x, y) in positions.items()
    }


def _path_edges(start: Optional[int], path: Optional[List[int]]) -> Set[Tuple[int, int]]:
    """Pares (menor id, maior id) percorridos; path no formato de get_path (origem implícita)."""
    if not path:
        return set()
    hops = ([start] if start is not None else []) + list(path)
    return {(min(a, b), max(a, b)) for a, b in zip(hops, hops[1:])}


def build_cytoscape_elements(
    graph: Graph,
    path: Optional[List[int]] = None,
    start: Optional[int] = None,
    target: Optional[int] = None,
) -> List[Dict[str, Any]]:
    """
    Monta a lista de elementos (nós + arestas) no formato do Dash Cytoscape.
    Cada aresta não direcionada aparece uma vez. Arestas do caminho recebem in_path=True
    (opacidade 100%); as demais ficam com 20% quando há caminho.
    Nós recebem classes start / goal / unreached para destaque.
    """
    positions = scale_positions_to_canvas({n.node_id: n.position for n in graph.nodes})
    path_edges = _path_edges(start, path)
    elements: List[Dict[str, Any]] = []

    for node in graph.nodes:
        x, y = positions[node.node_id]
        label = str(node.node_id) if not node.reached else f"{node.node_id} ({node.cost})"
        elem: Dict[str, Any] = {
            "data": {"id": str(node.node_id), "label": label},
            "position": {"x": x, "y": -y},
        }
        classes = []
        if node.node_id == start:
            classes.append("start")
        if node.node_id == target:
            classes.append("goal")
        if not node.reached:
            classes.append("unreached")
        if classes:
            elem["classes"] = " ".join(classes)
        elements.append(elem)

    for a, adjacency in enumerate(graph.edges):
        for edge in adjacency:
            b = edge.target_id
            if b < a:
                continue
            in_path = (a, b) in path_edges
            elements.append({
                "data": {
                    "id": f"{a}-{b}",
                    "source": str(a),
                    "target": str(b),
                    "weight": edge.weight,
                    "in_path": in_path,
                    "edge_opacity": 1.0 if (in_path or not path_edges) else 0.2,
                }
            })
    return elements


_STYLESHEET: List[Dict[str, Any]] = [
    {
        "selector": "node",
        "style": {
            "content": "data(label)",
            "background-color": "#87CEEB",
            "color": "#ffffff",
            "font-size": "12px",
            "text-valign": "bottom",
            "text-halign": "center",
        },
    },
    {"selector": "node.unreached", "style": {"background-color": "#666666"}},
    {"selector": "node.start", "style": {"background-color": "#14532d"}},
    {"selector": "node.goal", "style": {"background-color": "#ef4444"}},
    {
        "selector": "edge",
        "style": {
            "label": "data(weight)",
            "line-color": "#cccccc",
            "color": "#cccccc",
            "width": 2,
            "opacity": "data(edge_opacity)",
        },
    },
    {"selector": "edge[?in_path]", "style": {"line-color": "#f1c40f", "width": 6}},
]


def display_graph(
    graph: Graph,
    path: Optional[List[int]] = None,
    start: Optional[int] = None,
    target: Optional[int] = None,
    height: str = "550px",
    width: str = "100%",
    iframe_height: int = 700,
    display_in_notebook: bool = True,
) -> Any:
    """
    Exibe o grafo num app Dash Cytoscape (posições fixas), destacando origem, destino,
    nós não alcançados e o caminho (lista no formato de get_path).
    Retorna o app Dash.
    """
    elements = build_cytoscape_elements(graph, path=path, start=start, target=target)

    app = Dash(__name__)
    app.layout = html.Div([
        cyto.Cytoscape(
            id="cytoscape-graph",
            elements=elements,
            layout={"name": "preset", "fit": True, "padding": 30},
            style={"width": width, "height": height, "backgroundColor": "#404040"},
            stylesheet=_STYLESHEET,
        ),
        html.Div(id="cytoscape-hover-output", style={"marginTop": "8px", "fontSize": "12px"}),
    ])

    @app.callback(
        Output("cytoscape-hover-output", "children"),
        Input("cytoscape-graph", "mouseoverNodeData"),
        Input("cytoscape-graph", "mouseoverEdgeData"),
    )
    def display_hover(node_data, edge_data):
        if node_data is not None:
            return f"Nó: {node_data.get('label', node_data.get('id', ''))}"
        if edge_data is not None:
            return f"Aresta: {edge_data.get('source', '')} - {edge_data.get('target', '')} (peso {edge_data.get('weight', '')})"
        return "Passe o mouse sobre um nó ou aresta para ver detalhes."

    if display_in_notebook:
        app.run(jupyter_mode="inline", jupyter_height=iframe_height, use_reloader=False)
    else:
        app.run(use_reloader=False)
    return app
