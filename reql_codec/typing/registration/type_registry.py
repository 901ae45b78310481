import threading
from typing import Any
from bidict import bidict

from .get_type_id import get_type_id
from ...utilities import logger


class OpaqueTypeIdDict(bidict[str, type]):
    def add(self, type_: type) -> None:
        """Register a single type by its type id. A later class with the same type id replaces the earlier one here."""
        self.forceput(get_type_id(type_), type_)
    def add_list(self, types: list[type]) -> None:
        """Register multiple types by their type ids."""
        for type_ in types:
            self.add(type_)

class TypeRegistry:
    """ A registry of the types that the structural encoder must treat as opaque.
    
    Opaque types are never traversed field by field. obj_to_datum and datum_to_obj consult is_opaque() before
    looking inside a value, and hand opaque values to the type's own to_datum() / from_datum() instead.
    
    Lifecycle: created empty when reql_codec.typing is imported, populated during startup (see reql_codec.term and
    create_type_registry), and only read afterwards. Registration is additive; nothing is ever removed.
    
    The registry is keyed by the class object. Type ids are a secondary lookup: when distinct classes share one,
    the last registered wins the lookup, and every one of them stays opaque.
    
    Writes are serialized by a lock and publish a new frozenset snapshot in a single assignment. Reads take no lock
    and only ever see a complete snapshot.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._opaque_types: frozenset[type] = frozenset()
        self._opaque_type_id_dict: OpaqueTypeIdDict = OpaqueTypeIdDict()

    @property
    def opaque_types(self) -> frozenset[type]:
        """ Snapshot of all registered opaque types. """
        return self._opaque_types

    def register_opaque(self, cls: type) -> None:
        """ Mark cls as opaque. Registering the same class twice is a no-op. """
        if not isinstance(cls, type):
            raise TypeError(f"Only classes can be registered as opaque. Received {cls!r}.")

        with self._lock:
            if cls in self._opaque_types:
                return
            
            # Copy on write, so readers never see a half-updated mapping
            opaque_type_id_dict = OpaqueTypeIdDict(self._opaque_type_id_dict)
            opaque_type_id_dict.add(cls)
            self._opaque_type_id_dict = opaque_type_id_dict
            self._opaque_types = self._opaque_types | {cls}
        
        logger.logger.debug(f"Registered opaque type '{get_type_id(cls)}'.")

    def register_opaque_list(self, types: list[type]) -> None:
        for cls in types:
            self.register_opaque(cls)

    def is_opaque(self, cls: type | str) -> bool:
        """ Returns True if cls (a class or a type id) was registered as opaque. Never raises. 
        Subclasses of an opaque class are not opaque themselves; they must be registered on their own. """
        if isinstance(cls, str):
            return cls in self._opaque_type_id_dict
        try:
            return cls in self._opaque_types
        except TypeError: # Unhashable values can never be registered
            return False

    def is_opaque_instance(self, obj: Any) -> bool:
        return type(obj) in self._opaque_types

    def type_to_type_id(self, cls: type) -> str | None:
        """ Return the type id for an opaque type, or None if it was never registered. """
        if not self.is_opaque(cls):
            return None
        return get_type_id(cls)

    def lookup_type_by_type_id(self, type_id: str) -> type | None:
        """ Returns the most recently registered opaque type with this type id, or None. 
        Distinct classes can share a type id (classes built inside a function, a reloaded module); membership is always decided by the class itself. """
        return self._opaque_type_id_dict.get(type_id)

    def __contains__(self, cls: Any) -> bool:
        return self.is_opaque(cls)

    def __len__(self) -> int:
        return len(self._opaque_types)

    def __repr__(self) -> str:
        type_ids = ", ".join(sorted(self._opaque_type_id_dict.keys()))
        return f"TypeRegistry(opaque_types=[{type_ids}])"
