"""Typeclass utilities for ad-hoc polymorphism."""

from klaw_collections.typeclass.core import TypeClass, typeclass

__all__ = [
    'TypeClass',
    'typeclass',
]
