"""
Heap binário mínimo indexado para as buscas (Dijkstra e A*).

Capacidade fixa (número de nós do grafo). Cada nó guarda em heap_slot o índice da posição
que ocupa no vetor do heap, o que permite:
- contains(node) em O(1), comparando o ocupante da posição com o próprio nó;
- notify_cost_decreased(node) em O(log n), subindo o nó a partir da sua posição.

Ordem: menor f = g + h primeiro; em empate, menor h (nó mais perto do alvo).
Na busca de origem única h = 0 em todos os nós, então o desempate não altera nada.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from .config import NO_HEAP_SLOT
from .graph import Node

logger = logging.getLogger(__name__)


def _parent(index: int) -> int:
    return (index - 1) // 2


def _left_child(index: int) -> int:
    return index * 2 + 1


def _right_child(index: int) -> int:
    return index * 2 + 2


def _precedes(a: Node, b: Node) -> bool:
    """True se a tem prioridade sobre b: (total_cost, heuristic_cost) estritamente menor."""
    fa, fb = a.total_cost, b.total_cost
    return fa < fb or (fa == fb and a.heuristic_cost < b.heuristic_cost)


class PathfindingHeap:
    """
    Fila de prioridade de nós do grafo.

    Os nós são referências para os objetos em Graph.nodes (não cópias): quando uma busca
    relaxa o custo de um nó, a mudança já está visível aqui e só falta chamar
    notify_cost_decreased para restaurar a ordem.
    """

    def __init__(self, capacity: int) -> None:
        self._items: List[Optional[Node]] = [None] * capacity
        self._size = 0

    @property
    def capacity(self) -> int:
        return len(self._items)

    def insert(self, node: Node) -> None:
        """Adiciona o nó na última posição e sobe até a posição correta. O(log n)."""
        if self._size >= len(self._items):
            raise IndexError(f"insert em heap cheio (capacidade {len(self._items)})")
        node.heap_slot = self._size
        self._items[self._size] = node
        self._size += 1
        self._sort_up(node)

    def extract_min(self) -> Node:
        """Remove e retorna o nó de menor (f, h). O(log n)."""
        if self._size == 0:
            raise IndexError("extract_min em heap vazio")
        first = self._items[0]
        self._size -= 1
        last = self._items[self._size]
        self._items[self._size] = None
        if self._size > 0:
            self._items[0] = last
            last.heap_slot = 0
            self._sort_down(last)
        first.heap_slot = NO_HEAP_SLOT
        return first

    def notify_cost_decreased(self, node: Node) -> None:
        """
        Reposiciona um nó cujo custo (f ou h) diminuiu desde que entrou no heap.
        Só sobe: nas buscas os custos apenas são relaxados para baixo. Chamar após um
        aumento de custo quebra a ordem do heap silenciosamente.
        """
        self._sort_up(node)

    def contains(self, node: Node) -> bool:
        slot = node.heap_slot
        return 0 <= slot < self._size and self._items[slot] is node

    def is_empty(self) -> bool:
        return self._size == 0

    def log_heap(self) -> None:
        """Despeja o conteúdo do heap no log (nível DEBUG), posição por posição."""
        for i in range(self._size):
            node = self._items[i]
            logger.debug("Heap posição: %d | custo: %d | id: %d", i, node.total_cost, node.node_id)

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __repr__(self) -> str:
        return f"PathfindingHeap(size={self._size}, capacity={len(self._items)})"

    # --- ordenação ---

    def _sort_up(self, node: Node) -> None:
        while node.heap_slot > 0:
            parent = self._items[_parent(node.heap_slot)]
            if not _precedes(node, parent):
                return
            self._swap(node, parent)

    def _sort_down(self, node: Node) -> None:
        while True:
            left = _left_child(node.heap_slot)
            right = _right_child(node.heap_slot)
            if left >= self._size:
                return
            swap_index = left
            # Troca com o filho de maior prioridade
            if right < self._size and _precedes(self._items[right], self._items[left]):
                swap_index = right
            child = self._items[swap_index]
            if not _precedes(child, node):
                return
            self._swap(node, child)

    def _swap(self, x: Node, y: Node) -> None:
        self._items[x.heap_slot] = y
        self._items[y.heap_slot] = x
        x.heap_slot, y.heap_slot = y.heap_slot, x.heap_slot
