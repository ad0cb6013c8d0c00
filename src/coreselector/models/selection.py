"""Selection state owned by the selection controller."""

from dataclasses import dataclass, replace
from typing import Optional


@dataclass(frozen=True)
class SelectionState:
    """
    Current selection and the "pinned only" toggle.

    Attributes:
        selected: Id of the selected leaf-type entity, None when nothing is selected
        hide_non_pinned: Whether only visible (pinned or pin-context) entities render
    """

    selected: Optional[str] = None
    hide_non_pinned: bool = False

    @property
    def has_selection(self) -> bool:
        return bool(self.selected)

    def with_selected(self, entity_id: Optional[str]) -> 'SelectionState':
        return replace(self, selected=entity_id or None)

    def with_hide_non_pinned(self, hide: bool) -> 'SelectionState':
        return replace(self, hide_non_pinned=hide)
