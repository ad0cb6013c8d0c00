# coreselector package
"""
Selection and pin state for a Cycle -> Scenario -> Pipeline -> DataNode
entity tree, with a PyQt5 selector widget on top.
"""

__version__ = "0.1.0"

from .models import (
    NodeType,
    EntityNode,
    EntityGraph,
    PinState,
    SelectionState,
    SelectorConfig,
    load_config
)
from .services import (
    LocatedEntity,
    find_entity,
    pin,
    unpin,
    apply_pin,
    toggle_pin,
    RenderItem,
    is_renderable,
    build_render_tree
)

__all__ = [
    "NodeType",
    "EntityNode",
    "EntityGraph",
    "PinState",
    "SelectionState",
    "SelectorConfig",
    "load_config",
    "LocatedEntity",
    "find_entity",
    "pin",
    "unpin",
    "apply_pin",
    "toggle_pin",
    "RenderItem",
    "is_renderable",
    "build_render_tree",
]
