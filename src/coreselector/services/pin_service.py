"""
Pin propagation engine.

Pinning covers the whole subtree of the pinned entity and reveals all of its
ancestors. An ancestor is pinned only while all of its direct children are
pinned. Unpinning mirrors the visibility walk but drops every ancestor from
the pinned set.

All functions take the prior PinState and return a new one. An id that is
not in the graph leaves the state unchanged.
"""

import logging
from typing import Optional, Set

from coreselector.models.entity import EntityGraph
from coreselector.models.pin_state import PinState
from coreselector.services.tree_locator import find_entity

logger = logging.getLogger(__name__)


def pin(entity_id: str, graph: Optional[EntityGraph], state: PinState) -> PinState:
    """Pin an entity, its subtree and every ancestor that becomes complete."""
    located = find_entity(entity_id, graph)
    if located is None:
        logger.debug(f"Ignoring pin of unknown entity '{entity_id}'")
        return state

    pinned: Set[str] = set(state.pinned)
    visible: Set[str] = set(state.visible)

    pinned.add(entity_id)
    visible.add(entity_id)

    # Nearest ancestor first; stop at the first one with an unpinned child
    for ancestor in located.ancestors:
        if all(child.id in pinned for child in ancestor.children):
            pinned.add(ancestor.id)
        else:
            break

    visible.update(ancestor.id for ancestor in located.ancestors)

    pinned.update(located.descendant_ids)
    visible.update(located.descendant_ids)

    logger.debug(f"Pinned '{entity_id}' ({len(located.descendant_ids)} descendants)")
    return PinState(pinned=frozenset(pinned), visible=frozenset(visible))


def unpin(entity_id: str, graph: Optional[EntityGraph], state: PinState) -> PinState:
    """Unpin an entity and its subtree; hide ancestors left without visible children."""
    located = find_entity(entity_id, graph)
    if located is None:
        logger.debug(f"Ignoring unpin of unknown entity '{entity_id}'")
        return state

    pinned: Set[str] = set(state.pinned)
    visible: Set[str] = set(state.visible)

    pinned.discard(entity_id)
    visible.discard(entity_id)

    # Nearest ancestor first; stop at the first one still showing a child
    for ancestor in located.ancestors:
        if any(child.id in visible for child in ancestor.children):
            break
        visible.discard(ancestor.id)

    pinned.difference_update(ancestor.id for ancestor in located.ancestors)

    pinned.difference_update(located.descendant_ids)
    visible.difference_update(located.descendant_ids)

    logger.debug(f"Unpinned '{entity_id}' ({len(located.descendant_ids)} descendants)")
    return PinState(pinned=frozenset(pinned), visible=frozenset(visible))


def apply_pin(entity_id: str, currently_pinned: bool,
              graph: Optional[EntityGraph], state: PinState) -> PinState:
    """
    Apply a pin button event.

    Args:
        entity_id: Entity whose pin button was pressed
        currently_pinned: Pin flag shown on the button when it was pressed
        graph: Current snapshot
        state: Prior pin state

    Returns:
        The new PinState (the same object when nothing applies)
    """
    if currently_pinned:
        return unpin(entity_id, graph, state)
    return pin(entity_id, graph, state)


def toggle_pin(entity_id: str, graph: Optional[EntityGraph], state: PinState) -> PinState:
    """Pin or unpin depending on the entity's current flag in state."""
    return apply_pin(entity_id, state.is_pinned(entity_id), graph, state)
