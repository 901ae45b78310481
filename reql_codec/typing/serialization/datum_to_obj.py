from dataclasses import MISSING, fields, is_dataclass
from datetime import datetime
from enum import Enum
from typing import Any, get_type_hints

from .encoding_context import EncodingContext
from .time_datum import datum_to_datetime
from .. import type_registry
from ..registration.type_registry import TypeRegistry
from ..registration.type_expectation import TypeExpectation
from ..registration.get_type_expectation import get_type_expectation
from ...utilities.unsupported_type_error import UnsupportedTypeError
from ...utilities import logger


def datum_to_obj(datum: Any, type_annotation: Any, *, registry: TypeRegistry | None = None) -> Any:
	""" Deserializes a datum into a Python object of the annotated type.
	
	Opaque types (see TypeRegistry) are never built field by field; they must provide a from_datum() classmethod. """
	return _datum_to_type_annotation(datum, type_annotation, registry if registry is not None else type_registry, EncodingContext())

def _datum_to_type_annotation(datum: Any, type_annotation: Any, registry: TypeRegistry, context: EncodingContext) -> Any:
	return _datum_to_type_expectation(datum, get_type_expectation(type_annotation), registry, context)

def _datum_to_type_expectation(datum: Any, type_expectation: TypeExpectation, registry: TypeRegistry, context: EncodingContext) -> Any:
	# Handle valid null cases
	if datum is None:
		if type_expectation.is_nullable:
			return None
		raise ValueError(f"Received None for type expectation {type_expectation} which is not nullable.\n{context}")

	type_ = type_expectation.type_info.type_
	sub_types = type_expectation.type_info.sub_types

	# Handle types from specific (complex) to general (simple)
	if registry.is_opaque(type_):
		from_datum = getattr(type_, "from_datum", None)
		if not callable(from_datum):
			raise UnsupportedTypeError(type_, f"Opaque type {type_.__name__} does not define from_datum().\n{context}")
		return from_datum(datum)

	elif type_ is Any:
		return datum

	elif isinstance(type_, type) and issubclass(type_, Enum):
		try:
			return type_(datum)
		except ValueError as e:
			raise ValueError(f"Error decoding Enum {type_.__name__}: {e}.\n{context}") from e

	elif type_ is bool:
		if not isinstance(datum, bool):
			raise ValueError(f"{datum!r} not of the expected type bool.\n{context}")
		return datum

	elif type_ is int:
		if isinstance(datum, bool) or not isinstance(datum, (int, float)) or (isinstance(datum, float) and not datum.is_integer()):
			raise ValueError(f"{datum!r} not of the expected type int.\n{context}")
		return int(datum) # Numbers arrive as floats on the wire

	elif type_ is float:
		if isinstance(datum, bool) or not isinstance(datum, (int, float)):
			raise ValueError(f"{datum!r} not convertible to expected type float.\n{context}")
		return float(datum)

	elif type_ is str:
		if not isinstance(datum, str):
			raise ValueError(f"{datum!r} not of the expected type str.\n{context}")
		return datum

	elif type_ is datetime:
		return datum_to_datetime(datum, context)

	elif type_ in (list, tuple):
		if not isinstance(datum, list):
			raise ValueError(f"Expected an array for {type_expectation}. Instead received {type(datum).__name__}.\n{context}")
		item_types = _sequence_item_types(type_, sub_types, len(datum), context)
		items = [
			_datum_to_type_annotation(item, item_type, registry, context.subidx(idx))
			for idx, (item, item_type) in enumerate(zip(datum, item_types))
		]
		return type_(items)

	elif type_ is dict:
		if not isinstance(datum, dict):
			raise ValueError(f"Expected an object for {type_expectation}. Instead received {type(datum).__name__}.\n{context}")
		if sub_types and sub_types[0] is not str:
			raise UnsupportedTypeError(type_, f"Object keys must be annotated as str, not {sub_types[0]!r}.\n{context}")
		value_type = sub_types[1] if sub_types else Any
		return {
			key: _datum_to_type_annotation(value, value_type, registry, context.subpath(key))
			for key, value in datum.items()
		}

	elif isinstance(type_, type) and is_dataclass(type_):
		return _datum_to_dataclass(datum, type_, registry, context)

	else:
		raise UnsupportedTypeError(type_, f"Unable to decode unsupported expected type {type_expectation}.\n{context}")

def _sequence_item_types(type_: type, sub_types: tuple[Any, ...], length: int, context: EncodingContext) -> list[Any]:
	""" Returns the annotation for each element of a list or tuple datum of the given length. """
	if not sub_types:
		return [Any] * length
	if type_ is list:
		return [sub_types[0]] * length
	if len(sub_types) == 2 and sub_types[1] is Ellipsis:
		return [sub_types[0]] * length
	if len(sub_types) != length:
		raise ValueError(f"Expected an array of length {len(sub_types)}. Instead received length {length}.\n{context}")
	return list(sub_types)

def _datum_to_dataclass(datum: Any, cls: type, registry: TypeRegistry, context: EncodingContext) -> Any:
	if not isinstance(datum, dict):
		raise ValueError(f"Expected an object for {cls.__name__}. Instead received {type(datum).__name__}.\n{context}")

	type_hints = get_type_hints(cls)
	obj_dict = {}
	for field in fields(cls):
		if not field.init:
			continue
		
		if field.name in datum:
			obj_dict[field.name] = _datum_to_type_annotation(datum[field.name], type_hints[field.name], registry, context.subpath(field.name))
		
		# Fields with defaults are left to the constructor
		elif field.default is not MISSING or field.default_factory is not MISSING:
			logger.logger.info(f"Using default value for {cls.__name__}.{field.name}.\n{context}")
		
		else:
			raise ValueError(f"Error converting datum to object of type {cls.__name__}. Datum missing a value for field {field.name}.\n{context}")

	extra_keys = datum.keys() - {field.name for field in fields(cls)}
	if extra_keys:
		logger.logger.info(f"Ignoring unexpected keys {sorted(extra_keys)} for {cls.__name__}.\n{context}")

	return cls(**obj_dict)
