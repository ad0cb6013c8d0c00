"""
Data models for the core selector.

This package contains the entity graph snapshot, the pin and selection
state records and the selector configuration.
"""

from .entity import (
    NodeType,
    EntityNode,
    EntityGraph
)

from .pin_state import PinState

from .selection import SelectionState

from .config import (
    SelectorConfig,
    load_config
)

__all__ = [
    # Entity graph
    'NodeType',
    'EntityNode',
    'EntityGraph',

    # State
    'PinState',
    'SelectionState',

    # Configuration
    'SelectorConfig',
    'load_config'
]
