"""
Services for the core selector.

Pure data-in/data-out algorithms over an entity graph snapshot: locating
entities, propagating pins and deriving the renderable rows.
"""

from .tree_locator import (
    LocatedEntity,
    find_entity,
    collect_descendant_ids
)

from .pin_service import (
    pin,
    unpin,
    apply_pin,
    toggle_pin
)

from .filter_view import (
    RenderItem,
    is_renderable,
    flatten_cycles,
    build_render_tree
)

__all__ = [
    'LocatedEntity',
    'find_entity',
    'collect_descendant_ids',
    'pin',
    'unpin',
    'apply_pin',
    'toggle_pin',
    'RenderItem',
    'is_renderable',
    'flatten_cycles',
    'build_render_tree'
]
