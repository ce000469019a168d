from .dijkstra import run_single_source_shortest_paths
from .a_star import run_point_to_point_search

__all__ = ["run_single_source_shortest_paths", "run_point_to_point_search"]
