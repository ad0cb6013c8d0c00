"""Utility helpers for the core selector."""

from .value_parser import parse_default_value

__all__ = ['parse_default_value']
