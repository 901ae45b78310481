from dataclasses import dataclass

from .type_info import TypeInfo


@dataclass(frozen=True)
class TypeExpectation:
	type_info: TypeInfo
	is_nullable: bool

	def __str__(self) -> str:
		output = getattr(self.type_info.type_, "__name__", repr(self.type_info.type_))
		if self.type_info.sub_types:
			output += f"[{', '.join(getattr(sub_type, '__name__', repr(sub_type)) for sub_type in self.type_info.sub_types)}]"
		if self.is_nullable:
			output += " | None"
		return output
