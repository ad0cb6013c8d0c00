"""
CoreSelectorWidget - tree view over an entity graph snapshot.

A thin consumer of the controllers: every state change rebuilds the tree
from the filter view's render rows. Clicking a row selects it, the pin
button on each row toggles its pin, and the "Pinned only" checkbox hides
entities outside the pinned lineage.
"""

import logging
from typing import Callable, Dict, Optional

from PyQt5.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QCheckBox, QTreeWidget, QTreeWidgetItem,
    QToolButton, QHeaderView
)
from PyQt5.QtCore import Qt
from PyQt5.QtGui import QFont

from coreselector.controllers.pin_controller import PinController
from coreselector.controllers.selection_controller import SelectionController
from coreselector.models.config import SelectorConfig
from coreselector.models.entity import EntityGraph, NodeType
from coreselector.services.filter_view import RenderItem, build_render_tree

logger = logging.getLogger(__name__)

ENTITY_ID_ROLE = Qt.UserRole
SELECTABLE_ROLE = Qt.UserRole + 1

LABEL_COLUMN = 0
PIN_COLUMN = 1

_TYPE_NAMES = {
    NodeType.CYCLE: "Cycle",
    NodeType.SCENARIO: "Scenario",
    NodeType.PIPELINE: "Pipeline",
    NodeType.NODE: "Data node",
}


class CoreSelectorWidget(QWidget):
    """Tree of cycles, scenarios, pipelines and data nodes with pins."""

    def __init__(self, selection_controller: SelectionController,
                 pin_controller: PinController,
                 config: Optional[SelectorConfig] = None,
                 edit_factory: Optional[Callable[[str], QWidget]] = None,
                 parent=None):
        """
        Args:
            selection_controller: Owner of the selection state
            pin_controller: Owner of the pin state
            config: Display options (defaults to the selection controller's)
            edit_factory: Optional callable building an edit widget for a
                selectable entity id
            parent: Optional parent widget
        """
        super().__init__(parent)
        self._selection = selection_controller
        self._pins = pin_controller
        self._config = config or selection_controller.config
        self._edit_factory = edit_factory
        self._graph: Optional[EntityGraph] = None

        self._items: Dict[str, QTreeWidgetItem] = {}
        self._pin_buttons: Dict[str, QToolButton] = {}
        self._editors: Dict[str, QWidget] = {}

        self._setup_ui()
        self._connect_signals()

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.pinned_only_checkbox: Optional[QCheckBox] = None
        if self._config.show_pins:
            self.pinned_only_checkbox = QCheckBox("Pinned only")
            self.pinned_only_checkbox.setEnabled(False)
            self.pinned_only_checkbox.clicked.connect(self._on_pinned_only_clicked)
            layout.addWidget(self.pinned_only_checkbox)

        self.tree = QTreeWidget()
        self.tree.setColumnCount(2 if self._config.show_pins else 1)
        self.tree.setHeaderHidden(True)
        self.tree.header().setStretchLastSection(False)
        self.tree.header().setSectionResizeMode(LABEL_COLUMN, QHeaderView.Stretch)
        self.tree.itemClicked.connect(self._on_item_clicked)
        layout.addWidget(self.tree)

    def _connect_signals(self):
        self._pins.pins_changed.connect(lambda _state: self.refresh())
        self._selection.hide_non_pinned_changed.connect(lambda _hide: self.refresh())
        self._selection.selection_changed.connect(lambda _id, _propagate: self._sync_current_item())

    # ---- Public API ----

    def set_entities(self, graph: Optional[EntityGraph]) -> None:
        """Hand a new snapshot to both controllers and redraw."""
        if graph is None:
            return
        self._graph = graph
        self._pins.set_entities(graph)
        self._selection.set_entities(graph)
        self.refresh()

    def item_for(self, entity_id: str) -> Optional[QTreeWidgetItem]:
        return self._items.get(entity_id)

    def pin_button_for(self, entity_id: str) -> Optional[QToolButton]:
        return self._pin_buttons.get(entity_id)

    def editor_for(self, entity_id: str) -> Optional[QWidget]:
        return self._editors.get(entity_id)

    def refresh(self) -> None:
        """Rebuild the tree from the current snapshot and state."""
        self.tree.clear()
        self._items.clear()
        self._pin_buttons.clear()
        self._editors.clear()

        rows = build_render_tree(
            self._graph, self._pins.state, self._selection.hide_non_pinned, self._config
        )
        for row in rows:
            item = self._create_item(row)
            self.tree.addTopLevelItem(item)
            self._attach_row_widgets(row)

        self.tree.expandAll()
        logger.debug(f"Selector tree rebuilt with {len(self._items)} rows")
        self._update_pinned_only_checkbox()
        self._sync_current_item()

    # ---- Building ----

    def _create_item(self, row: RenderItem) -> QTreeWidgetItem:
        item = QTreeWidgetItem([row.node.label])
        item.setData(LABEL_COLUMN, ENTITY_ID_ROLE, row.id)
        item.setData(LABEL_COLUMN, SELECTABLE_ROLE, row.selectable)

        tooltip = _TYPE_NAMES.get(row.node.node_type, "")
        if row.show_primary_flag:
            font = QFont(item.font(LABEL_COLUMN))
            font.setBold(True)
            item.setFont(LABEL_COLUMN, font)
            tooltip = f"{tooltip} (primary)"
        item.setToolTip(LABEL_COLUMN, tooltip)

        self._items[row.id] = item
        for child in row.children:
            item.addChild(self._create_item(child))
        return item

    def _attach_row_widgets(self, row: RenderItem) -> None:
        """Mount pin buttons and edit widgets once the item is in the tree."""
        item = self._items[row.id]

        if self._config.show_pins:
            button = QToolButton()
            button.setText("Pin")
            button.setCheckable(True)
            button.setChecked(row.pinned)
            button.setToolTip("Unpin" if row.pinned else "Pin")
            entity_id, pinned = row.id, row.pinned
            button.clicked.connect(lambda _checked, e=entity_id, p=pinned: self._on_pin_clicked(e, p))
            self.tree.setItemWidget(item, PIN_COLUMN, button)
            self._pin_buttons[row.id] = button

        if self._edit_factory is not None and row.editable:
            editor = self._edit_factory(row.id)
            if editor is not None:
                item.setText(LABEL_COLUMN, "")
                container = QWidget()
                container_layout = QHBoxLayout(container)
                container_layout.setContentsMargins(0, 0, 0, 0)
                container_layout.addWidget(QLabel(row.node.label))
                container_layout.addStretch()
                container_layout.addWidget(editor)
                self.tree.setItemWidget(item, LABEL_COLUMN, container)
                self._editors[row.id] = editor

        for child in row.children:
            self._attach_row_widgets(child)

    def _update_pinned_only_checkbox(self) -> None:
        if self.pinned_only_checkbox is None:
            return
        hide = self._selection.hide_non_pinned
        self.pinned_only_checkbox.blockSignals(True)
        self.pinned_only_checkbox.setChecked(hide)
        self.pinned_only_checkbox.setEnabled(hide or self._pins.has_pins())
        self.pinned_only_checkbox.blockSignals(False)

    def _sync_current_item(self) -> None:
        selected = self._selection.selected
        item = self._items.get(selected) if selected else None
        self.tree.blockSignals(True)
        if item is not None:
            self.tree.setCurrentItem(item)
        else:
            self.tree.clearSelection()
        self.tree.blockSignals(False)

    # ---- Slots ----

    def _on_item_clicked(self, item: QTreeWidgetItem, column: int):
        entity_id = item.data(LABEL_COLUMN, ENTITY_ID_ROLE)
        selectable = bool(item.data(LABEL_COLUMN, SELECTABLE_ROLE))
        self._selection.select(entity_id, selectable)

    def _on_pin_clicked(self, entity_id: str, currently_pinned: bool):
        before = self._pins.state
        self._pins.apply(entity_id, currently_pinned)
        if self._pins.state is before:
            # Unchanged state emits nothing; restore the button's checked flag
            self.refresh()

    def _on_pinned_only_clicked(self, _checked: bool):
        self._selection.toggle_hide_non_pinned(self._pins.has_pins())
        self._update_pinned_only_checkbox()
