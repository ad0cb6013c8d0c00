"""
Controllers for the core selector.

Qt-facing owners of the selection and pin state. Each controller owns its
state exclusively and reports changes through Qt signals.
"""

from .selection_controller import SelectionController, UNSET
from .pin_controller import PinController

__all__ = [
    'SelectionController',
    'PinController',
    'UNSET'
]
