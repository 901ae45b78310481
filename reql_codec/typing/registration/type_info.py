from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class TypeInfo:
	""" Stores type information. If the type is generic, its type arguments are stored within the sub_types field.
	For example dict[str, int] will produce: type_ = dict, sub_types = (str, int)
	"""
	type_: Any
	sub_types: tuple[Any, ...] = ()
