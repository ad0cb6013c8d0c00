"""
Tree locator: find an entity, its ancestor chain and its descendants.

The search is a depth-first walk over the forest in child order. Nothing is
cached between calls since every host refresh brings a new graph.
"""

import logging
from dataclasses import dataclass
from typing import FrozenSet, List, Optional, Tuple

from coreselector.models.entity import EntityGraph, EntityNode

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LocatedEntity:
    """Result of a successful lookup.

    Attributes:
        node: The entity that matched
        ancestors: Ancestor chain from the immediate parent outward to the root
        descendant_ids: Ids of every entity below node, at all levels
    """
    node: EntityNode
    ancestors: Tuple[EntityNode, ...]
    descendant_ids: FrozenSet[str]

    @property
    def ancestor_ids(self) -> List[str]:
        return [ancestor.id for ancestor in self.ancestors]


def collect_descendant_ids(node: EntityNode) -> List[str]:
    """Return ids of all descendants of node, in pre-order."""
    ids: List[str] = []
    stack = list(reversed(node.children))
    while stack:
        child = stack.pop()
        ids.append(child.id)
        stack.extend(reversed(child.children))
    return ids


def find_entity(entity_id: str, graph: Optional[EntityGraph]) -> Optional[LocatedEntity]:
    """
    Locate an entity in the forest.

    Args:
        entity_id: Id to look for
        graph: Current snapshot (None is treated as empty)

    Returns:
        LocatedEntity, or None when the id matches nothing. Callers treat
        None as a no-op.
    """
    if not entity_id or graph is None:
        return None

    # (node, parents nearest-first)
    stack: List[Tuple[EntityNode, Tuple[EntityNode, ...]]] = [
        (root, ()) for root in reversed(graph.roots)
    ]
    while stack:
        node, parents = stack.pop()
        if node.id == entity_id:
            return LocatedEntity(
                node=node,
                ancestors=parents,
                descendant_ids=frozenset(collect_descendant_ids(node)),
            )
        if node.children:
            chain = (node,) + parents
            stack.extend((child, chain) for child in reversed(node.children))

    logger.debug(f"Entity '{entity_id}' not found in current graph")
    return None
