"""
Type Registration Module

This module provides the centralized registry of opaque types: types that the structural encoder must never
traverse field by field. The module maintains a stateful `type_registry` object.
"""

from .registration.type_registry import TypeRegistry

# Module-level stateful variable - populated at import time by reql_codec.term and by create_type_registry()
type_registry: TypeRegistry = TypeRegistry()

# Expose these at the module level
from .registration.create_type_registry import create_type_registry
from .registration.get_type_id import get_type_id
from ..utilities.unsupported_type_error import UnsupportedTypeError


def register_opaque(cls: type) -> None:
	""" Registers cls as opaque in the module-level type_registry. """
	type_registry.register_opaque(cls)

def is_opaque(cls: type | str) -> bool:
	""" Queries the module-level type_registry. """
	return type_registry.is_opaque(cls)
