from dataclasses import fields, is_dataclass
from datetime import datetime
from enum import Enum
import math
from typing import Any

from .encoding_context import EncodingContext
from .time_datum import datetime_to_datum
from .. import type_registry
from ..registration.type_registry import TypeRegistry
from ...utilities.unsupported_type_error import UnsupportedTypeError


PRIMITIVES = (str, int, float, bool)

def obj_to_datum(obj: Any, *, registry: TypeRegistry | None = None) -> Any:
	"""
	Serializes a Python object into a JSON-compatible datum.
	
	Opaque types (see TypeRegistry) are never traversed; they must provide their own to_datum().
	"""
	return _obj_to_datum(obj, registry if registry is not None else type_registry, EncodingContext(), set())

def _obj_to_datum(obj: Any, registry: TypeRegistry, context: EncodingContext, active_ids: set[int]) -> Any:
	if obj is None:
		return None

	# Opaque types must be checked before anything that looks inside a value
	if registry.is_opaque_instance(obj):
		to_datum = getattr(obj, "to_datum", None)
		if not callable(to_datum):
			raise UnsupportedTypeError(type(obj), f"Opaque type {type(obj).__name__} does not define to_datum().\n{context}")
		return to_datum()

	# Enums first, since IntEnum and StrEnum members are also instances of int and str
	elif isinstance(obj, Enum):
		return _obj_to_datum(obj.value, registry, context, active_ids)

	# Primitives match on exact type, no subclasses
	elif type(obj) in PRIMITIVES:
		if type(obj) is float and not math.isfinite(obj):
			raise ValueError(f"Non-finite float {obj} cannot be encoded.\n{context}")
		return obj

	elif type(obj) is datetime:
		return datetime_to_datum(obj, context)

	elif isinstance(obj, type):
		raise UnsupportedTypeError(obj, f"Classes cannot be encoded. Received {obj!r}.\n{context}")

	# Containers
	if id(obj) in active_ids:
		raise ValueError(f"Circular reference detected while encoding {type(obj).__name__}.\n{context}")
	active_ids.add(id(obj))
	try:
		if type(obj) in (list, tuple):
			return [_obj_to_datum(item, registry, context.subidx(idx), active_ids) for idx, item in enumerate(obj)]
		
		elif type(obj) is dict:
			output = {}
			for key, value in obj.items():
				if not isinstance(key, str):
					raise UnsupportedTypeError(type(key), f"Object keys must be str. Received key {key!r}.\n{context}")
				output[key] = _obj_to_datum(value, registry, context.subpath(key), active_ids)
			return output
		
		elif is_dataclass(obj):
			return {
				field.name: _obj_to_datum(getattr(obj, field.name), registry, context.subpath(field.name), active_ids)
				for field in fields(obj)
			}
		
		else:
			raise UnsupportedTypeError(type(obj), f"Type {type(obj).__name__} not serializable.\n{context}")
	finally:
		active_ids.discard(id(obj))
