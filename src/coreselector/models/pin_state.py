"""Pin and visibility state owned by the pin engine."""

from dataclasses import dataclass
from typing import FrozenSet, Iterable


@dataclass(frozen=True)
class PinState:
    """
    Immutable pair of id sets.

    Attributes:
        pinned: Entities pinned explicitly or through propagation
        visible: Entities shown while the "pinned only" filter is active.
            Every pinned entity is visible; ancestors of pinned entities are
            visible without necessarily being pinned.

    Transitions never mutate a PinState; they return a new one.
    """

    pinned: FrozenSet[str] = frozenset()
    visible: FrozenSet[str] = frozenset()

    def __post_init__(self):
        # Accept any iterable of ids
        if not isinstance(self.pinned, frozenset):
            object.__setattr__(self, 'pinned', frozenset(self.pinned))
        if not isinstance(self.visible, frozenset):
            object.__setattr__(self, 'visible', frozenset(self.visible))

    @classmethod
    def empty(cls) -> 'PinState':
        return cls()

    @classmethod
    def of(cls, pinned: Iterable[str] = (), visible: Iterable[str] = ()) -> 'PinState':
        return cls(pinned=frozenset(pinned), visible=frozenset(visible))

    def is_pinned(self, entity_id: str) -> bool:
        return entity_id in self.pinned

    def is_visible(self, entity_id: str) -> bool:
        return entity_id in self.visible

    @property
    def has_pins(self) -> bool:
        return bool(self.pinned)
