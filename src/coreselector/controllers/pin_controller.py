"""
Pin Controller - owns the pin/visibility state for one selector.

Pin events are applied through the pin engine against the current entity
snapshot. Pin state is local to the selector: nothing is sent to the host.
"""

import logging
from typing import Optional

from PyQt5.QtCore import QObject, pyqtSignal

from coreselector.models.config import SelectorConfig
from coreselector.models.entity import EntityGraph
from coreselector.models.pin_state import PinState
from coreselector.services import pin_service


class PinController(QObject):
    """
    Controller for pin and visibility state.

    Signals:
        pins_changed: Emitted with the new PinState after any change
    """

    pins_changed = pyqtSignal(object)  # PinState

    def __init__(self, config: Optional[SelectorConfig] = None, parent=None):
        super().__init__(parent)
        self.logger = logging.getLogger(__name__)
        self._config = config or SelectorConfig()
        self._graph: Optional[EntityGraph] = None
        self._state = PinState()

    @property
    def state(self) -> PinState:
        return self._state

    @property
    def enabled(self) -> bool:
        return self._config.show_pins

    def set_entities(self, graph: Optional[EntityGraph]) -> None:
        """Replace the snapshot. Pins on ids that disappeared stay as harmless leftovers."""
        self._graph = graph

    def has_pins(self) -> bool:
        return self._state.has_pins

    def is_pinned(self, entity_id: str) -> bool:
        return self._state.is_pinned(entity_id)

    def is_visible(self, entity_id: str) -> bool:
        return self._state.is_visible(entity_id)

    def toggle(self, entity_id: str) -> PinState:
        """Pin or unpin an entity depending on its current pin flag."""
        return self.apply(entity_id, self._state.is_pinned(entity_id))

    def pin(self, entity_id: str) -> PinState:
        return self.apply(entity_id, False)

    def unpin(self, entity_id: str) -> PinState:
        return self.apply(entity_id, True)

    def apply(self, entity_id: str, currently_pinned: bool) -> PinState:
        """
        Apply a pin button event.

        Args:
            entity_id: Entity whose pin button was pressed
            currently_pinned: Pin flag the button showed

        Returns:
            The current PinState after the event
        """
        if not self._config.show_pins or not entity_id or self._graph is None:
            return self._state

        new_state = pin_service.apply_pin(entity_id, currently_pinned, self._graph, self._state)
        if new_state != self._state:
            self._state = new_state
            action = "unpinned" if currently_pinned else "pinned"
            self.logger.debug(f"Entity '{entity_id}' {action}: "
                              f"{len(new_state.pinned)} pinned, {len(new_state.visible)} visible")
            self.pins_changed.emit(new_state)
        return self._state

    def clear(self) -> None:
        """Drop every pin."""
        if self._state.pinned or self._state.visible:
            self._state = PinState()
            self.pins_changed.emit(self._state)
