"""
Filter view: decide which entities the render layer should draw.

Cycle flattening is applied first (when cycles are not displayed, a CYCLE's
children take its place), then the "pinned only" filter. A node that is not
renderable hides its whole subtree.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from coreselector.models.config import SelectorConfig
from coreselector.models.entity import EntityGraph, EntityNode, NodeType
from coreselector.models.pin_state import PinState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderItem:
    """One row handed to the render layer.

    Attributes:
        node: The entity to draw
        children: Rows nested under this one, in order
        pinned: Whether the pin button shows as pressed
        selectable: node_type equals the configured leaf type
        show_primary_flag: Draw the primary-scenario marker
        editable: The host may mount an edit widget on this row
    """
    node: EntityNode
    children: Tuple['RenderItem', ...] = ()
    pinned: bool = False
    selectable: bool = False
    show_primary_flag: bool = False
    editable: bool = False

    @property
    def id(self) -> str:
        return self.node.id

    def iter_items(self):
        """Yield this row and every nested row in pre-order."""
        yield self
        for child in self.children:
            yield from child.iter_items()


def is_renderable(node: EntityNode, state: PinState, hide_non_pinned: bool) -> bool:
    """Return True if node passes the "pinned only" filter."""
    if not hide_non_pinned:
        return True
    return node.id in state.visible


def flatten_cycles(nodes: Iterable[EntityNode], display_cycles: bool) -> List[EntityNode]:
    """Replace CYCLE nodes by their children (recursively) when cycles are hidden."""
    result: List[EntityNode] = []
    for node in nodes:
        if not display_cycles and node.node_type == NodeType.CYCLE:
            result.extend(flatten_cycles(node.children, display_cycles))
        else:
            result.append(node)
    return result


def _build_items(nodes: Iterable[EntityNode], state: PinState,
                 hide_non_pinned: bool, config: SelectorConfig) -> Tuple[RenderItem, ...]:
    items = []
    for node in flatten_cycles(nodes, config.display_cycles):
        if not is_renderable(node, state, hide_non_pinned):
            continue
        selectable = node.node_type == config.leaf_type
        items.append(RenderItem(
            node=node,
            children=_build_items(node.children, state, hide_non_pinned, config),
            pinned=node.id in state.pinned,
            selectable=selectable,
            show_primary_flag=(
                config.show_primary_flag
                and node.node_type == NodeType.SCENARIO
                and node.primary
            ),
            editable=selectable,
        ))
    return tuple(items)


def build_render_tree(graph: Optional[EntityGraph], state: PinState,
                      hide_non_pinned: bool,
                      config: Optional[SelectorConfig] = None) -> List[RenderItem]:
    """
    Derive the rows to render from a graph snapshot and the current state.

    Args:
        graph: Current snapshot (None renders nothing)
        state: Current pin state
        hide_non_pinned: The "pinned only" toggle
        config: Display options (defaults to SelectorConfig())

    Returns:
        Top-level rows in render order
    """
    if graph is None:
        return []
    config = config or SelectorConfig()
    items = list(_build_items(graph.roots, state, hide_non_pinned, config))
    logger.debug(f"Render tree built: {len(items)} top-level rows "
                 f"(hide_non_pinned={hide_non_pinned})")
    return items
