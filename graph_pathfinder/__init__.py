# Busca de caminhos em grafos ponderados: Dijkstra (origem única) e A* (ponto a ponto)
# sobre um heap mínimo indexado.

from pathlib import Path

from dotenv import load_dotenv

# Carrega .env da raiz do projeto (sobe do diretório do pacote até encontrar .env)
_package_dir = Path(__file__).resolve().parent
_root = _package_dir.parent
for _candidate in [_root, _root.parent]:
    _env_file = _candidate / ".env"
    if _env_file.is_file():
        load_dotenv(_env_file)
        break

from .config import NO_PARENT, UNREACHED_COST, configure_logging
from .graph import Edge, Graph, Node, add_node, add_or_set_edge, create_graph, heuristic_distance
from .heap import PathfindingHeap
from .algorithms import run_point_to_point_search, run_single_source_shortest_paths
from .paths import get_nodes_in_range, get_path, path_cost
from .interop import from_networkx, load_graph_json, save_graph_json, to_networkx
from .examples import build_grid_example, build_line_example

__all__ = [
    "NO_PARENT",
    "UNREACHED_COST",
    "configure_logging",
    "Edge",
    "Graph",
    "Node",
    "create_graph",
    "add_node",
    "add_or_set_edge",
    "heuristic_distance",
    "PathfindingHeap",
    "run_single_source_shortest_paths",
    "run_point_to_point_search",
    "get_path",
    "get_nodes_in_range",
    "path_cost",
    "to_networkx",
    "from_networkx",
    "save_graph_json",
    "load_graph_json",
    "build_line_example",
    "build_grid_example",
]
