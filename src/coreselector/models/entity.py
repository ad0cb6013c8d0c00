"""
Entity graph model: the Cycle -> Scenario -> Pipeline -> DataNode forest.

A graph is an immutable snapshot handed over by the host each time its data
changes. It is replaced wholesale, never mutated in place.
"""

import logging
from enum import Enum
from dataclasses import dataclass, field
from typing import Any, Iterator, List, Optional, Sequence, Set, Tuple

from coreselector.core.errors import DataError, ErrorCodes

logger = logging.getLogger(__name__)


class NodeType(Enum):
    """Entity kinds. Values match the host's integer codes."""
    CYCLE = 0
    SCENARIO = 1
    PIPELINE = 2
    NODE = 3

    @classmethod
    def parse(cls, raw: Any) -> 'NodeType':
        """Accept a NodeType, its integer code or its name (case-insensitive).

        Raises:
            ValueError: If the value names no node type
        """
        if isinstance(raw, cls):
            return raw
        if isinstance(raw, bool):
            raise ValueError(f"Invalid node type: {raw!r}")
        if isinstance(raw, int):
            return cls(raw)
        if isinstance(raw, str):
            name = raw.strip().upper()
            if name.isdigit():
                return cls(int(name))
            try:
                return cls[name]
            except KeyError:
                raise ValueError(f"Invalid node type: {raw!r}") from None
        raise ValueError(f"Invalid node type: {raw!r}")


@dataclass(frozen=True)
class EntityNode:
    """A single entity in the hierarchy.

    Attributes:
        id: Unique identifier within one graph snapshot
        label: Display name (opaque to the state logic)
        children: Child entities in render order
        node_type: Which level of the hierarchy this entity belongs to
        primary: Primary-scenario flag, meaningful for SCENARIO only
    """
    id: str
    label: str
    children: Tuple['EntityNode', ...] = ()
    node_type: NodeType = NodeType.NODE
    primary: bool = False

    def __post_init__(self):
        if not isinstance(self.children, tuple):
            object.__setattr__(self, 'children', tuple(self.children or ()))

    @property
    def is_leaf(self) -> bool:
        return not self.children

    @property
    def child_ids(self) -> List[str]:
        return [child.id for child in self.children]

    def to_payload(self) -> List[Any]:
        """Return the host's positional shape: [id, label, children, type, primary]."""
        return [
            self.id,
            self.label,
            [child.to_payload() for child in self.children],
            self.node_type.value,
            self.primary,
        ]

    @classmethod
    def from_payload(cls, item: Sequence[Any]) -> 'EntityNode':
        """Build a node (recursively) from the host's positional array.

        Raises:
            DataError: If the array is too short or holds invalid values
        """
        if not isinstance(item, (list, tuple)) or len(item) < 4:
            raise DataError(
                f"Entity must be an array of at least 4 items, got {item!r}",
                error_code=ErrorCodes.INVALID_FORMAT
            )

        entity_id, label, raw_children, raw_type = item[0], item[1], item[2], item[3]
        primary = item[4] if len(item) > 4 else False

        if not isinstance(entity_id, str) or not entity_id:
            raise DataError(
                f"Entity id must be a non-empty string, got {entity_id!r}",
                error_code=ErrorCodes.INVALID_FORMAT
            )

        try:
            node_type = NodeType.parse(raw_type)
        except ValueError as e:
            raise DataError(
                f"Unknown node type for entity '{entity_id}': {raw_type!r}",
                entity_id=entity_id,
                error_code=ErrorCodes.INVALID_FORMAT,
                cause=e
            )

        if raw_children is None:
            raw_children = []
        if not isinstance(raw_children, (list, tuple)):
            raise DataError(
                f"Children of entity '{entity_id}' must be an array",
                entity_id=entity_id,
                error_code=ErrorCodes.INVALID_FORMAT
            )

        return cls(
            id=entity_id,
            label=str(label) if label is not None else entity_id,
            children=tuple(cls.from_payload(child) for child in raw_children),
            node_type=node_type,
            primary=bool(primary),
        )


@dataclass(frozen=True)
class EntityGraph:
    """An ordered forest of root entities (one snapshot).

    Node ids are checked for uniqueness across the whole forest on creation.
    """
    roots: Tuple[EntityNode, ...] = field(default_factory=tuple)

    def __post_init__(self):
        if not isinstance(self.roots, tuple):
            object.__setattr__(self, 'roots', tuple(self.roots))
        seen: Set[str] = set()
        for node in self.iter_nodes():
            if node.id in seen:
                raise DataError(
                    f"Duplicate entity id in graph: '{node.id}'",
                    entity_id=node.id,
                    error_code=ErrorCodes.DUPLICATE_ID
                )
            seen.add(node.id)

    def __len__(self) -> int:
        return len(self.roots)

    def __iter__(self) -> Iterator[EntityNode]:
        return iter(self.roots)

    def iter_nodes(self) -> Iterator[EntityNode]:
        """Yield every node in pre-order, following child order."""
        stack = list(reversed(self.roots))
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def node_count(self) -> int:
        return sum(1 for _ in self.iter_nodes())

    def to_payload(self) -> List[List[Any]]:
        return [root.to_payload() for root in self.roots]

    @classmethod
    def from_payload(cls, items: Optional[Sequence[Any]]) -> 'EntityGraph':
        """Build a graph from the host's list of positional arrays.

        Raises:
            DataError: If the payload is not a list or any entity is malformed
        """
        if items is None:
            items = []
        if not isinstance(items, (list, tuple)):
            raise DataError(
                f"Entity payload must be an array, got {type(items).__name__}",
                error_code=ErrorCodes.INVALID_FORMAT
            )
        graph = cls(roots=tuple(EntityNode.from_payload(item) for item in items))
        logger.debug(f"Parsed entity graph: {len(graph)} roots, {graph.node_count()} nodes")
        return graph
