"""Tests for PinController."""

import unittest

from coreselector.controllers import PinController
from coreselector.models import PinState, SelectorConfig

from graph_builders import lineage_graph


class TestPinController(unittest.TestCase):
    """Test pin events routed through the controller."""

    def setUp(self):
        self.controller = PinController()
        self.controller.set_entities(lineage_graph())
        self.emitted = []
        self.controller.pins_changed.connect(self.emitted.append)

    def test_toggle_pins_and_emits(self):
        state = self.controller.toggle("D1")
        self.assertTrue(self.controller.is_pinned("D1"))
        self.assertTrue(self.controller.is_visible("C1"))
        self.assertEqual(self.emitted, [state])

    def test_toggle_twice_restores_empty_state(self):
        self.controller.toggle("D1")
        self.controller.toggle("D1")
        self.assertEqual(self.controller.state, PinState())
        self.assertFalse(self.controller.has_pins())
        self.assertEqual(len(self.emitted), 2)

    def test_pin_both_leaves_pins_lineage(self):
        self.controller.pin("D1")
        self.controller.pin("D2")
        self.assertEqual(self.controller.state.pinned, {"D1", "D2", "P1", "S1", "C1"})

    def test_unpin_of_unpinned_node_is_silent(self):
        self.controller.unpin("D1")
        self.assertEqual(self.emitted, [])

    def test_apply_uses_button_flag(self):
        self.controller.apply("P1", False)
        self.assertTrue(self.controller.is_pinned("D2"))
        self.controller.apply("P1", True)
        self.assertFalse(self.controller.has_pins())

    def test_unknown_id_does_not_emit(self):
        before = self.controller.state
        self.assertIs(self.controller.toggle("unknown-id"), before)
        self.assertEqual(self.emitted, [])

    def test_empty_id_ignored(self):
        self.controller.toggle("")
        self.assertEqual(self.emitted, [])

    def test_no_graph_ignored(self):
        controller = PinController()
        controller.toggle("D1")
        self.assertFalse(controller.has_pins())

    def test_pins_disabled(self):
        controller = PinController(SelectorConfig(show_pins=False))
        controller.set_entities(lineage_graph())
        self.assertFalse(controller.enabled)
        controller.toggle("D1")
        self.assertFalse(controller.has_pins())

    def test_pins_survive_new_snapshot(self):
        self.controller.pin("D1")
        self.controller.set_entities(lineage_graph())
        self.assertTrue(self.controller.is_pinned("D1"))

    def test_clear(self):
        self.controller.pin("D1")
        self.controller.clear()
        self.assertEqual(self.controller.state, PinState())
        self.assertEqual(self.emitted[-1], PinState())

    def test_clear_when_empty_is_silent(self):
        self.controller.clear()
        self.assertEqual(self.emitted, [])


if __name__ == '__main__':
    unittest.main()
