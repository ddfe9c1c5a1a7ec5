import unittest

import pytest

from shader_nodes.errors import CyclicDependencyError
from shader_nodes.planner.analysis import get_topological_sort
from shader_nodes.planner.plan import ascii_plan

from conftest import make_edge, make_graph, make_node


def order_of(graph):
    return [n.id for n in get_topological_sort(graph)]


class TestTopologicalSort(unittest.TestCase):

    def test_independent_nodes_keep_array_order(self):
        graph = make_graph([make_node('c', 'time'), make_node('a', 'time'), make_node('b', 'time')])
        self.assertEqual(order_of(graph), ['c', 'a', 'b'])

    def test_producers_before_consumers(self):
        graph = make_graph(
            [make_node('out', 'pbr_output'), make_node('mul', 'multiply'),
             make_node('t', 'time'), make_node('uv', 'vertex_uv')],
            [
                make_edge('mul', 'result', 'out', 'metallic'),
                make_edge('t', 'time', 'mul', 'a'),
                make_edge('t', 'time', 'mul', 'b'),
            ],
        )
        order = order_of(graph)
        self.assertLess(order.index('t'), order.index('mul'))
        self.assertLess(order.index('mul'), order.index('out'))
        self.assertEqual(sorted(order), ['mul', 'out', 't', 'uv'])

    def test_same_graph_same_order(self):
        graph = make_graph(
            [make_node(str(i), 'add') for i in range(6)],
            [make_edge('0', 'result', '3', 'a'), make_edge('1', 'result', '3', 'b'),
             make_edge('3', 'result', '5', 'a')],
        )
        self.assertEqual(order_of(graph), order_of(graph))

    def test_edges_to_unknown_nodes_are_ignored(self):
        graph = make_graph(
            [make_node('a', 'add'), make_node('b', 'add')],
            [make_edge('ghost', 'result', 'a', 'a'), make_edge('b', 'result', 'nowhere', 'x')],
        )
        self.assertEqual(order_of(graph), ['a', 'b'])

    def test_duplicate_ids_cannot_be_ordered(self):
        graph = make_graph([make_node('a', 'add'), make_node('a', 'sin'), make_node('out', 'pbr_output')])
        with self.assertRaises(CyclicDependencyError) as info:
            get_topological_sort(graph)
        self.assertEqual(info.exception.node_ids, ['a'])


def test_cycle_reports_unordered_nodes(two_cycle_graph):
    with pytest.raises(CyclicDependencyError) as info:
        get_topological_sort(two_cycle_graph)
    assert info.value.node_ids == ['a', 'b']
    assert str(info.value) == "Cyclic dependency detected in shader graph."


def test_downstream_of_cycle_is_unordered():
    graph = make_graph(
        [make_node('a', 'add'), make_node('b', 'add'), make_node('c', 'sin')],
        [make_edge('a', 'result', 'b', 'a'), make_edge('b', 'result', 'a', 'a'),
         make_edge('b', 'result', 'c', 'value')],
    )
    with pytest.raises(CyclicDependencyError) as info:
        get_topological_sort(graph)
    assert info.value.node_ids == ['a', 'b', 'c']


def test_ascii_plan(add_to_roughness_graph):
    plan = ascii_plan(add_to_roughness_graph).splitlines()
    assert plan[0] == "# Test Graph (evaluation order)"
    assert plan[1] == "01. 1 [add: Add]"
    assert plan[2] == "    └─▶ 2  (result->roughness)"
    assert plan[3] == "02. 2 [pbr_output: PBR Output]"


def test_ascii_plan_marks_unknown_kinds():
    plan = ascii_plan(make_graph([make_node('x', 'hologram')]))
    assert "01. x [hologram: unknown]" in plan
