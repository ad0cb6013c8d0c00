"""
Core layer for the core selector.

Holds the error hierarchy shared by the models, services and controllers.
"""

from .errors import (
    SelectorError,
    DataError,
    ConfigurationError,
    ErrorCodes,
    wrap_external_error
)

__all__ = [
    'SelectorError',
    'DataError',
    'ConfigurationError',
    'ErrorCodes',
    'wrap_external_error'
]
