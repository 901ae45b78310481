from dataclasses import dataclass


@dataclass(frozen=True)
class EncodingContext:
	""" The location of the value currently being encoded or decoded, relative to the root value. Used in error messages. """
	path: tuple[str | int, ...] = ()

	def subpath(self, field_name: str) -> 'EncodingContext':
		""" Returns a new EncodingContext one field deeper. """
		return EncodingContext(path=self.path + (field_name,))

	def subidx(self, idx: int) -> 'EncodingContext':
		""" Returns a new EncodingContext one list element deeper. """
		return EncodingContext(path=self.path + (idx,))

	def __str__(self) -> str:
		""" Printable to logs. """
		output = "Path: $"
		for part in self.path:
			if isinstance(part, int):
				output += f"[{part}]"
			else:
				output += f".{part}"
		return output
