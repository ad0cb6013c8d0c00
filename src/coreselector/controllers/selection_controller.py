"""
Selection Controller - tracks the single selected entity.

This controller handles:
- User selection of tree rows (leaf-type guard)
- External value / default value overrides from the host
- Auto-clearing the selection when the host's entity list becomes empty
- Requesting a fresh snapshot when the host broadcasts a core change
- The "pinned only" toggle
"""

import logging
from typing import Any, Dict, Optional, Sequence

from PyQt5.QtCore import QObject, pyqtSignal

from coreselector.core.errors import DataError
from coreselector.models.config import SelectorConfig
from coreselector.models.entity import EntityGraph
from coreselector.models.selection import SelectionState
from coreselector.services.tree_locator import find_entity
from coreselector.utils.value_parser import parse_default_value


class _Unset:
    """Marker for "the host did not send a value"."""

    def __repr__(self) -> str:
        return 'UNSET'


UNSET = _Unset()


class SelectionController(QObject):
    """
    Controller for the selection state.

    Signals:
        selection_changed: Emitted when the user selection changes
            (entity_id or None, propagate)
        refresh_requested: Emitted when the host should send a new entity list
        hide_non_pinned_changed: Emitted when the "pinned only" toggle flips (bool)
    """

    selection_changed = pyqtSignal(object, bool)  # entity_id or None, propagate
    refresh_requested = pyqtSignal()
    hide_non_pinned_changed = pyqtSignal(bool)

    def __init__(self, config: Optional[SelectorConfig] = None, parent=None):
        """
        Initialize selection controller.

        Args:
            config: Selector configuration (defaults to SelectorConfig())
            parent: Optional Qt parent
        """
        super().__init__(parent)
        self.logger = logging.getLogger(__name__)
        self._config = config or SelectorConfig()
        if self._config.multiple:
            self.logger.warning("Multiple selection is not supported; single selection is used")
        self._state = SelectionState()
        self._graph: Optional[EntityGraph] = None

    @property
    def config(self) -> SelectorConfig:
        return self._config

    @property
    def state(self) -> SelectionState:
        return self._state

    @property
    def selected(self) -> Optional[str]:
        return self._state.selected

    @property
    def hide_non_pinned(self) -> bool:
        return self._state.hide_non_pinned

    @property
    def graph(self) -> Optional[EntityGraph]:
        return self._graph

    # ---- Entity snapshots ----

    def set_entities(self, graph: Optional[EntityGraph]) -> None:
        """
        Replace the entity snapshot.

        An empty snapshot clears the selection. None means the host has not
        sent anything yet and is ignored.
        """
        if graph is None:
            return
        self._graph = graph
        self.logger.debug(f"Entity snapshot replaced: {len(graph)} roots")
        if not len(graph):
            self.unselect()

    def set_entities_payload(self, items: Optional[Sequence[Any]]) -> bool:
        """
        Parse a host payload and replace the snapshot.

        Returns:
            True if the payload was accepted; a malformed payload is logged
            and the previous snapshot is kept
        """
        if items is None:
            return False
        try:
            graph = EntityGraph.from_payload(items)
        except DataError as e:
            self.logger.warning(f"Rejected entity payload: {e.format_log_message()}")
            return False
        self.set_entities(graph)
        return True

    # ---- User selection ----

    def select(self, entity_id: str, selectable: Optional[bool] = None) -> None:
        """
        Select an entity.

        Args:
            entity_id: Id of the clicked entity
            selectable: Whether the entity is of the leaf type. When None it
                is resolved against the current snapshot.

        Entities that are not of the leaf type (or unknown) clear the
        selection; the notification then carries None.
        """
        if selectable is None:
            located = find_entity(entity_id, self._graph)
            selectable = (
                located is not None
                and located.node.node_type == self._config.leaf_type
            )

        new_selected = entity_id if selectable and entity_id else None
        self._state = self._state.with_selected(new_selected)
        self.selection_changed.emit(new_selected, self._config.propagate)

        if new_selected:
            self.logger.info(f"Selected '{new_selected}'")
        else:
            self.logger.info(f"Entity '{entity_id}' is not selectable; selection cleared")

    def unselect(self) -> None:
        """Clear the selection, notifying only if something was selected."""
        if not self._state.has_selection:
            return
        previous = self._state.selected
        self._state = self._state.with_selected(None)
        self.selection_changed.emit(None, self._config.propagate)
        self.logger.info(f"Selection '{previous}' cleared")

    # ---- External values ----

    def sync_external(self, value: Any = UNSET, default_value: Optional[str] = None) -> None:
        """
        Apply the host's controlled value or default value.

        A present, non-empty value always wins. Otherwise a default value is
        parsed (first element of a JSON array, a JSON scalar, or the raw
        string). An explicit None value with no default clears the
        selection. No notification is emitted: the value came from the host.
        """
        if value is not UNSET and value is not None and value != "":
            self._state = self._state.with_selected(str(value))
            self.logger.debug(f"External value applied: '{value}'")
        elif default_value:
            parsed = parse_default_value(default_value)
            if parsed is not None:
                self._state = self._state.with_selected(parsed)
                self.logger.debug(f"Default value applied: '{parsed}'")
        elif value is None or value == "":
            self._state = self._state.with_selected(None)
            self.logger.debug("External value cleared the selection")

    # ---- Host broadcasts ----

    def on_core_changed(self, payload: Optional[Dict[str, Any]]) -> bool:
        """
        Handle a core-change broadcast from the host.

        Returns:
            True if a refresh was requested
        """
        if payload and payload.get('scenario'):
            self.logger.debug("Core change affects scenarios; requesting refresh")
            self.refresh_requested.emit()
            return True
        return False

    # ---- Pinned-only toggle ----

    def toggle_hide_non_pinned(self, has_pins: bool) -> bool:
        """
        Flip the "pinned only" toggle.

        Turning it on requires at least one pin; turning it off is always
        allowed.

        Returns:
            The toggle's value after the call
        """
        if not self._state.hide_non_pinned and not has_pins:
            self.logger.debug("Nothing pinned; 'pinned only' stays off")
            return False
        self._state = self._state.with_hide_non_pinned(not self._state.hide_non_pinned)
        self.hide_non_pinned_changed.emit(self._state.hide_non_pinned)
        return self._state.hide_non_pinned
