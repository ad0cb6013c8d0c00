"""
Application Layer - Component Wiring

This module provides SelectorApplication, which creates the Qt application,
the controllers and the selector widget, and wires them together:

    Models (entity graph, configuration)
        ↓
    Controllers (selection, pins)
        ↓
    Views (selector widget)

The host side (sending the selection away, delivering new snapshots) is
stood in for by logging the notifications and re-reading the entity file
when a refresh is requested.
"""

import json
import sys
import logging
from pathlib import Path
from typing import Any, List, Optional, Union

from PyQt5.QtWidgets import QApplication

from coreselector.controllers import PinController, SelectionController
from coreselector.core.errors import DataError, ErrorCodes, wrap_external_error
from coreselector.models import EntityGraph, SelectorConfig
from coreselector.views import CoreSelectorWidget


def load_entities(path: Union[str, Path]) -> EntityGraph:
    """Read an entity graph from a JSON file holding the host's payload.

    Raises:
        DataError: If the file is missing, is not JSON or holds malformed entities
    """
    path = Path(path)
    if not path.exists():
        raise DataError(f"Entity file not found: {path}",
                        file_path=str(path), error_code=ErrorCodes.FILE_NOT_FOUND)
    try:
        with open(path, 'r', encoding='utf-8') as f:
            payload: Any = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise wrap_external_error(e, f"Failed to read entity file {path}", DataError,
                                  error_code=ErrorCodes.FILE_READ_ERROR, file_path=str(path))
    return EntityGraph.from_payload(payload)


class SelectorApplication:
    """Creates and wires the selector components.

    Example:
        app = SelectorApplication(entities_path="entities.json")
        sys.exit(app.run())
    """

    def __init__(self, config: Optional[SelectorConfig] = None,
                 entities_path: Optional[Union[str, Path]] = None,
                 initial_value: Optional[str] = None):
        """
        Args:
            config: Selector configuration (defaults to SelectorConfig())
            entities_path: JSON file with the entity payload
            initial_value: Entity id to select at start-up
        """
        self.config = config or SelectorConfig()
        self.entities_path = Path(entities_path) if entities_path else None
        self.initial_value = initial_value

        self.qt_app: Optional[QApplication] = None
        self.selection_controller: Optional[SelectionController] = None
        self.pin_controller: Optional[PinController] = None
        self.widget: Optional[CoreSelectorWidget] = None

        self.notifications: List[tuple] = []

        self.logger = logging.getLogger(__name__)

    def setup_dependencies(self):
        """Create controllers and the widget, then wire their signals."""
        self.logger.info("Setting up selector components...")

        self.selection_controller = SelectionController(self.config)
        self.pin_controller = PinController(self.config)
        self.widget = CoreSelectorWidget(
            self.selection_controller, self.pin_controller, self.config
        )
        self.widget.setWindowTitle("Core Selector")

        self.selection_controller.selection_changed.connect(self._on_selection_changed)
        self.selection_controller.refresh_requested.connect(self.reload_entities)

        self.reload_entities()
        if self.initial_value:
            self.selection_controller.sync_external(value=self.initial_value)
            self.widget.refresh()

        self.logger.info("Selector components ready")

    def reload_entities(self) -> bool:
        """Re-read the entity file and hand the snapshot to the widget.

        Returns:
            True if a snapshot was loaded; read errors keep the previous one
        """
        if self.entities_path is None:
            self.widget.set_entities(EntityGraph())
            return False
        try:
            graph = load_entities(self.entities_path)
        except DataError as e:
            self.logger.error(e.format_log_message())
            return False
        self.logger.info(f"Loaded {graph.node_count()} entities from {self.entities_path}")
        self.widget.set_entities(graph)
        return True

    def _on_selection_changed(self, entity_id: Optional[str], propagate: bool):
        self.notifications.append((entity_id, propagate))
        self.logger.info(f"Selection notification: {entity_id!r} (propagate={propagate})")

    def create_application(self) -> QApplication:
        self.qt_app = QApplication.instance() or QApplication(sys.argv)
        return self.qt_app

    def run(self) -> int:
        """Create the Qt application, show the selector and enter the event loop.

        Returns:
            Exit code from the Qt event loop
        """
        self.create_application()
        self.setup_dependencies()
        self.widget.resize(420, 520)
        self.widget.show()
        return self.qt_app.exec_()
