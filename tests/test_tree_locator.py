"""
Tests for the tree locator.

Verifies lookup across the forest, the nearest-first ancestor chain and the
flattened descendant set.
"""

import unittest

from coreselector.models import EntityGraph
from coreselector.services.tree_locator import (
    LocatedEntity,
    find_entity,
    collect_descendant_ids
)

from graph_builders import lineage_graph, wide_graph


class TestFindEntity(unittest.TestCase):
    """Test find_entity."""

    def setUp(self):
        self.graph = wide_graph()

    def test_find_root(self):
        located = find_entity("C1", self.graph)
        self.assertIsInstance(located, LocatedEntity)
        self.assertEqual(located.node.id, "C1")
        self.assertEqual(located.ancestors, ())

    def test_ancestors_nearest_parent_first(self):
        located = find_entity("D2", self.graph)
        self.assertEqual(located.ancestor_ids, ["P1", "S1", "C1"])

    def test_ancestors_are_nodes(self):
        located = find_entity("D3", self.graph)
        self.assertEqual(located.ancestors[0].child_ids, ["D3"])

    def test_descendants_all_levels(self):
        located = find_entity("C1", self.graph)
        self.assertEqual(
            located.descendant_ids,
            frozenset({"S1", "P1", "D1", "D2", "P2", "D3", "S2", "P3", "D4"})
        )

    def test_leaf_has_no_descendants(self):
        self.assertEqual(find_entity("D5", self.graph).descendant_ids, frozenset())

    def test_find_in_later_root(self):
        located = find_entity("D5", self.graph)
        self.assertEqual(located.ancestor_ids, ["P4", "S3", "C2"])

    def test_root_scenario_without_cycle(self):
        located = find_entity("S4", self.graph)
        self.assertEqual(located.ancestors, ())
        self.assertEqual(located.descendant_ids, frozenset())

    def test_unknown_id_returns_none(self):
        self.assertIsNone(find_entity("unknown-id", self.graph))

    def test_empty_and_missing_graph(self):
        self.assertIsNone(find_entity("C1", EntityGraph()))
        self.assertIsNone(find_entity("C1", None))

    def test_empty_id_returns_none(self):
        self.assertIsNone(find_entity("", self.graph))

    def test_lineage_scenario_lookup(self):
        located = find_entity("P1", lineage_graph())
        self.assertEqual(located.ancestor_ids, ["S1", "C1"])
        self.assertEqual(located.descendant_ids, frozenset({"D1", "D2"}))


class TestCollectDescendantIds(unittest.TestCase):
    """Test collect_descendant_ids."""

    def test_pre_order(self):
        root = wide_graph().roots[0]
        self.assertEqual(
            collect_descendant_ids(root),
            ["S1", "P1", "D1", "D2", "P2", "D3", "S2", "P3", "D4"]
        )

    def test_leaf(self):
        leaf = find_entity("D1", lineage_graph()).node
        self.assertEqual(collect_descendant_ids(leaf), [])


if __name__ == '__main__':
    unittest.main()
