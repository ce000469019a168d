"""
Métricas para comparar os algoritmos de busca:

- Latência: tempo médio de execução de uma busca, em milissegundos.
- Caminho e custo obtidos por cada algoritmo para o mesmo par origem/destino.
"""

import time
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Tuple

from .algorithms import run_point_to_point_search, run_single_source_shortest_paths
from .config import NO_PARENT
from .graph import Graph
from .paths import get_path


def measure_latency_ms(
    fn: Callable[[], Any],
    repetitions: int = 1,
) -> Tuple[float, Any]:
    """
    Mede o tempo de execução de fn() em milissegundos.
    Retorna (tempo_medio_ms, resultado da última chamada).
    """
    start = time.perf_counter()
    result = None
    for _ in range(repetitions):
        result = fn()
    elapsed = (time.perf_counter() - start) / repetitions * 1000
    return elapsed, result


@dataclass
class AlgorithmReport:
    """Resultado de um algoritmo num par origem/destino."""

    name: str
    latency_ms: float
    found: bool
    cost: float
    path: List[int] = field(default_factory=list)


def _collect(graph: Graph, name: str, latency_ms: float, start_id: int, target_id: int) -> AlgorithmReport:
    target = graph.nodes[target_id]
    found = start_id == target_id or target.parent_id != NO_PARENT
    return AlgorithmReport(
        name=name,
        latency_ms=latency_ms,
        found=found,
        cost=float(target.cost) if found else float("inf"),
        path=get_path(graph, start_id, target_id) if found else [],
    )


def compare_algorithms(
    graph: Graph,
    start_id: int,
    target_id: int,
    repetitions: int = 1,
) -> Dict[str, AlgorithmReport]:
    """
    Executa Dijkstra (origem única) e A* (ponto a ponto) para o mesmo par e devolve um
    relatório por algoritmo. Cada busca sobrescreve o estado do grafo; o relatório é lido
    logo após a respectiva execução.
    """
    reports: Dict[str, AlgorithmReport] = {}

    latency, _ = measure_latency_ms(lambda: run_single_source_shortest_paths(graph, start_id), repetitions)
    reports["dijkstra"] = _collect(graph, "dijkstra", latency, start_id, target_id)

    latency, _ = measure_latency_ms(lambda: run_point_to_point_search(graph, start_id, target_id), repetitions)
    reports["a_star"] = _collect(graph, "a_star", latency, start_id, target_id)

    return reports
