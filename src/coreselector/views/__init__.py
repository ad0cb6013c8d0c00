"""
Views for the core selector.

PyQt5 widgets that draw the filter view's render rows.
"""

from .core_selector_widget import CoreSelectorWidget

__all__ = [
    'CoreSelectorWidget'
]
