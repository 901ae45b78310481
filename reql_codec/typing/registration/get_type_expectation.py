from types import NoneType, UnionType
from typing import Annotated, Any, Union, get_args, get_origin

from .type_info import TypeInfo
from .type_expectation import TypeExpectation
from ...utilities.unsupported_type_error import UnsupportedTypeError


def get_type_info(type_: Any) -> TypeInfo:
	""" Extracts type and type arguments (if present) for a **single** (non-Union) type. """
	origin = get_origin(type_)

	if origin is Annotated:
		# Annotated[list[int], ...] is interpreted as list[int]
		return get_type_info(get_args(type_)[0])
	elif origin in {Union, UnionType}:
		raise ValueError("This function should only be used for single types.")
	elif origin is None:
		return TypeInfo(type_=type_)
	else:
		return TypeInfo(type_=origin, sub_types=get_args(type_))


def get_type_expectation(type_annotation: Any) -> TypeExpectation:
	"""	Interpret a type annotation, including nullable (X | None) annotations.
	Unions of more than one non-None type are ambiguous for decoding and are rejected. """
	origin = get_origin(type_annotation)

	if origin is Annotated:
		return get_type_expectation(get_args(type_annotation)[0])

	if origin not in {Union, UnionType}:
		return TypeExpectation(type_info=get_type_info(type_annotation), is_nullable=False)

	unioned_types = [arg for arg in get_args(type_annotation) if arg is not NoneType]
	is_nullable = len(unioned_types) != len(get_args(type_annotation))
	if len(unioned_types) != 1:
		raise UnsupportedTypeError(type_annotation, f"Unable to decode ambiguous union annotation {type_annotation}.")

	return TypeExpectation(
		type_info=get_type_info(unioned_types[0]),
		is_nullable=is_nullable
	)
