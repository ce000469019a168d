"""
Testes do heap mínimo indexado.
"""

import logging
import random

import pytest

from graph_pathfinder.config import NO_HEAP_SLOT
from graph_pathfinder.graph import Node
from graph_pathfinder.heap import PathfindingHeap


def _node(node_id: int, cost: int, heuristic_cost: int = 0) -> Node:
    return Node(node_id=node_id, cost=cost, heuristic_cost=heuristic_cost)


def _drain(heap: PathfindingHeap):
    out = []
    while not heap.is_empty():
        out.append(heap.extract_min())
    return out


def _assert_slots_consistent(heap: PathfindingHeap, nodes):
    for node in nodes:
        if heap.contains(node):
            assert heap._items[node.heap_slot] is node


class TestOrdering:
    def test_extracts_in_total_cost_order(self):
        heap = PathfindingHeap(5)
        for node_id, cost in enumerate([7, 3, 9, 1, 5]):
            heap.insert(_node(node_id, cost))
        assert [n.cost for n in _drain(heap)] == [1, 3, 5, 7, 9]

    def test_tie_on_total_cost_prefers_lower_heuristic(self):
        heap = PathfindingHeap(3)
        heap.insert(_node(0, cost=2, heuristic_cost=8))
        heap.insert(_node(1, cost=7, heuristic_cost=3))
        heap.insert(_node(2, cost=5, heuristic_cost=5))
        assert [n.node_id for n in _drain(heap)] == [1, 2, 0]

    @pytest.mark.parametrize("seed", range(5))
    def test_random_inserts_and_extracts_are_non_decreasing(self, seed):
        rng = random.Random(seed)
        nodes = [_node(i, rng.randint(0, 50), rng.randint(0, 10)) for i in range(40)]
        heap = PathfindingHeap(len(nodes))
        resident = []
        pending = list(nodes)
        extracted = 0
        while pending or heap:
            if pending and (not heap or rng.random() < 0.6):
                node = pending.pop()
                heap.insert(node)
                resident.append(node)
                _assert_slots_consistent(heap, nodes)
            else:
                # Cada extração devolve o mínimo do que está no heap naquele momento
                smallest = min((n.total_cost, n.heuristic_cost) for n in resident)
                node = heap.extract_min()
                assert (node.total_cost, node.heuristic_cost) == smallest
                resident.remove(node)
                extracted += 1
        assert extracted == len(nodes)

    def test_full_drain_is_sorted(self):
        rng = random.Random(42)
        heap = PathfindingHeap(50)
        for i in range(50):
            heap.insert(_node(i, rng.randint(0, 30), rng.randint(0, 5)))
        keys = [(n.total_cost, n.heuristic_cost) for n in _drain(heap)]
        assert keys == sorted(keys)

    @pytest.mark.parametrize("seed", range(5))
    def test_decreasing_costs_keep_extraction_sorted(self, seed):
        rng = random.Random(seed)
        nodes = [_node(i, rng.randint(50, 100)) for i in range(30)]
        heap = PathfindingHeap(len(nodes))
        for node in nodes:
            heap.insert(node)
        for _ in range(60):
            node = rng.choice(nodes)
            node.cost = max(0, node.cost - rng.randint(1, 20))
            heap.notify_cost_decreased(node)
            _assert_slots_consistent(heap, nodes)
        costs = [n.cost for n in _drain(heap)]
        assert costs == sorted(costs)
        assert sorted(costs) == sorted(n.cost for n in nodes)


class TestMembership:
    def test_contains_tracks_insert_and_extract(self):
        heap = PathfindingHeap(2)
        a, b = _node(0, 1), _node(1, 2)
        assert not heap.contains(a)
        heap.insert(a)
        heap.insert(b)
        assert heap.contains(a) and heap.contains(b)
        assert heap.extract_min() is a
        assert not heap.contains(a)
        assert a.heap_slot == NO_HEAP_SLOT
        assert heap.contains(b)

    def test_contains_ignores_node_of_another_heap(self):
        first, second = PathfindingHeap(1), PathfindingHeap(1)
        a, b = _node(0, 1), _node(1, 1)
        first.insert(a)
        second.insert(b)
        assert not first.contains(b)
        assert not second.contains(a)

    def test_len_bool_and_repr(self):
        heap = PathfindingHeap(3)
        assert len(heap) == 0 and not heap
        heap.insert(_node(0, 1))
        assert len(heap) == 1 and heap
        assert repr(heap) == "PathfindingHeap(size=1, capacity=3)"


class TestErrors:
    def test_extract_from_empty_heap_raises(self):
        with pytest.raises(IndexError):
            PathfindingHeap(3).extract_min()

    def test_insert_beyond_capacity_raises(self):
        heap = PathfindingHeap(1)
        heap.insert(_node(0, 1))
        with pytest.raises(IndexError):
            heap.insert(_node(1, 1))


def test_log_heap_dumps_every_slot(caplog):
    heap = PathfindingHeap(3)
    for node_id, cost in enumerate([4, 2, 6]):
        heap.insert(_node(node_id, cost))
    with caplog.at_level(logging.DEBUG, logger="graph_pathfinder.heap"):
        heap.log_heap()
    assert len(caplog.records) == 3
    assert "custo: 2 | id: 1" in caplog.records[0].getMessage()
