#!/usr/bin/env python3
"""
Compara Dijkstra e A* numa grade de exemplo (canto superior esquerdo -> canto inferior direito).
Imprime latência média, custo e tamanho do caminho de cada algoritmo.

Uso (na raiz do projeto):
    python scripts/compare_algorithms.py [largura altura [repeticoes]]
"""
import sys
from pathlib import Path

_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

from graph_pathfinder import build_grid_example, configure_logging
from graph_pathfinder.metrics import compare_algorithms


def main() -> None:
    args = sys.argv[1:]
    if len(args) not in (0, 2, 3):
        print("Uso: python compare_algorithms.py [largura altura [repeticoes]]", file=sys.stderr)
        sys.exit(1)
    try:
        width, height = (int(args[0]), int(args[1])) if args else (30, 30)
        repetitions = int(args[2]) if len(args) == 3 else 5
    except ValueError:
        print("Erro: largura, altura e repeticoes devem ser inteiros", file=sys.stderr)
        sys.exit(1)

    configure_logging()
    graph = build_grid_example(width, height)
    start, goal = 0, width * height - 1
    print(f"Grade {width}x{height}: {len(graph)} nós, {graph.number_of_edges()} arestas.")

    for report in compare_algorithms(graph, start, goal, repetitions).values():
        print(
            f"{report.name:>8}: {report.latency_ms:8.3f} ms | custo={report.cost} | "
            f"passos={len(report.path)}"
        )


if __name__ == "__main__":
    main()
