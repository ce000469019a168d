#!/usr/bin/env python3
"""
Executa o A* num grafo salvo em JSON (formato node-link, ver graph_pathfinder.interop).

Uso:
    python scripts/run_search.py <grafo.json> <origem> <destino>

Exemplo:
    python scripts/run_search.py cache/grade_10x10.json 0 99
"""
import sys
from pathlib import Path

_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

from graph_pathfinder import (
    configure_logging,
    get_path,
    load_graph_json,
    path_cost,
    run_point_to_point_search,
)


def run_search(input_path: Path, start: int, goal: int) -> int:
    """Carrega o grafo, executa o A* e imprime caminho e custo. Retorna o código de saída."""
    graph = load_graph_json(input_path)
    if not (graph.is_valid_node(start) and graph.is_valid_node(goal)):
        print(f"Erro: ids fora do grafo (0..{len(graph) - 1}): {start}, {goal}", file=sys.stderr)
        return 1

    run_point_to_point_search(graph, start, goal)
    path = get_path(graph, start, goal)
    if start != goal and not path:
        print(f"Nenhum caminho de {start} até {goal}.")
        return 0
    print(f"Caminho: {' -> '.join(str(n) for n in [start] + path)}")
    print(f"Custo: {path_cost(graph, start, path)}")
    return 0


def main() -> None:
    if len(sys.argv) != 4:
        print("Uso: python run_search.py <grafo.json> <origem> <destino>", file=sys.stderr)
        sys.exit(1)

    configure_logging()
    input_path = Path(sys.argv[1])
    if not input_path.is_file():
        print(f"Erro: arquivo de entrada não encontrado: {input_path}", file=sys.stderr)
        sys.exit(1)
    try:
        start, goal = int(sys.argv[2]), int(sys.argv[3])
    except ValueError:
        print("Erro: origem e destino devem ser ids inteiros", file=sys.stderr)
        sys.exit(1)

    sys.exit(run_search(input_path, start, goal))


if __name__ == "__main__":
    main()
