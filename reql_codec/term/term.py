from dataclasses import dataclass, field
import inspect
import itertools
from typing import Any, Callable

from .term_type import TermType
from ..typing.serialization.obj_to_datum import obj_to_datum
from ..utilities.unsupported_type_error import UnsupportedTypeError


_var_ids = itertools.count(1)

@dataclass(eq=False)
class Term:
	""" A node in a query.
	
	Terms know how to build their own wire representation (to_datum()) and must never be walked field by field:
	they carry a back-reference to the root of their chain, and FUNC terms keep the Python callable they were built from.
	reql_codec.term registers Term as opaque at import time for that reason.
	"""
	term_type: TermType
	args: list[Any] = field(default_factory=list)
	optargs: dict[str, Any] = field(default_factory=dict)
	name: str = ""
	data: Any = None
	root_term: 'Term | None' = field(default=None, repr=False)

	def to_datum(self) -> Any:
		""" Builds the wire representation:
			- DATUM: the encoded data
			- MAKE_OBJ: an object of built optargs
			- otherwise: [term_type, [args...]] or [term_type, [args...], {optargs...}]
		"""
		if self.term_type == TermType.DATUM:
			return obj_to_datum(self.data)

		optargs = {key: expr(value).to_datum() for key, value in self.optargs.items()}
		if self.term_type == TermType.MAKE_OBJ:
			return optargs

		args = [expr(arg).to_datum() for arg in self.args]
		if optargs:
			return [int(self.term_type), args, optargs]
		return [int(self.term_type), args]

	def _chain(self, term_type: TermType, name: str, *args: Any, **optargs: Any) -> 'Term':
		return Term(
			term_type=term_type,
			args=[self, *args],
			optargs=optargs,
			name=name,
			root_term=self.root_term if self.root_term is not None else self
		)

	def table(self, name: str, **optargs: Any) -> 'Term':
		return self._chain(TermType.TABLE, "table", name, **optargs)

	def get(self, key: Any) -> 'Term':
		return self._chain(TermType.GET, "get", key)

	def get_all(self, *keys: Any, **optargs: Any) -> 'Term':
		return self._chain(TermType.GET_ALL, "get_all", *keys, **optargs)

	def get_field(self, field_name: str) -> 'Term':
		return self._chain(TermType.GET_FIELD, "get_field", field_name)

	def eq(self, *values: Any) -> 'Term':
		return self._chain(TermType.EQ, "eq", *values)

	def ne(self, *values: Any) -> 'Term':
		return self._chain(TermType.NE, "ne", *values)

	def lt(self, *values: Any) -> 'Term':
		return self._chain(TermType.LT, "lt", *values)

	def gt(self, *values: Any) -> 'Term':
		return self._chain(TermType.GT, "gt", *values)

	def add(self, *values: Any) -> 'Term':
		return self._chain(TermType.ADD, "add", *values)

	def filter(self, predicate: Any, **optargs: Any) -> 'Term':
		return self._chain(TermType.FILTER, "filter", func_wrap(predicate), **optargs)

	def order_by(self, *keys: Any, **optargs: Any) -> 'Term':
		return self._chain(TermType.ORDER_BY, "order_by", *keys, **optargs)

	def count(self) -> 'Term':
		return self._chain(TermType.COUNT, "count")

	def limit(self, n: int) -> 'Term':
		return self._chain(TermType.LIMIT, "limit", n)

	def insert(self, documents: Any, **optargs: Any) -> 'Term':
		return self._chain(TermType.INSERT, "insert", documents, **optargs)

	def __str__(self) -> str:
		""" Readable rendering of the query, e.g. r.db("test").table("users").get(1) """
		if self.term_type == TermType.DATUM:
			return repr(self.data)
		elif self.term_type == TermType.MAKE_ARRAY:
			return f"[{', '.join(str(expr(arg)) for arg in self.args)}]"
		elif self.term_type == TermType.MAKE_OBJ:
			return "{" + ", ".join(f"{key!r}: {expr(value)}" for key, value in self.optargs.items()) + "}"
		elif self.term_type == TermType.VAR:
			return f"var_{self.args[0]}"
		elif self.term_type == TermType.IMPLICIT_VAR:
			return "r.row"
		elif self.term_type == TermType.FUNC:
			var_ids, body = self.args
			return f"func({', '.join(f'var_{var_id}' for var_id in var_ids.args)}) => {expr(body)}"

		rendered_optargs = [f"{key}={expr(value)}" for key, value in self.optargs.items()]
		if self.args and isinstance(self.args[0], Term) and self.root_term is not None:
			rendered_args = [str(expr(arg)) for arg in self.args[1:]] + rendered_optargs
			return f"{self.args[0]}.{self.name}({', '.join(rendered_args)})"
		rendered_args = [str(expr(arg)) for arg in self.args] + rendered_optargs
		return f"r.{self.name}({', '.join(rendered_args)})"


def expr(value: Any) -> Term:
	""" Converts a Python value into a Term. Terms are returned unchanged. """
	if isinstance(value, Term):
		return value
	elif type(value) in (list, tuple):
		return Term(term_type=TermType.MAKE_ARRAY, args=[expr(item) for item in value], name="make_array")
	elif type(value) is dict:
		for key in value:
			if not isinstance(key, str):
				raise UnsupportedTypeError(type(key), f"Object keys must be str. Received key {key!r}.")
		return Term(term_type=TermType.MAKE_OBJ, optargs={key: expr(item) for key, item in value.items()}, name="make_obj")
	elif inspect.isfunction(value) or inspect.ismethod(value):
		return make_func(value)
	else:
		return Term(term_type=TermType.DATUM, data=value, name="datum")

def make_func(func: Callable[..., Any]) -> Term:
	""" Builds a FUNC term by calling func once with one VAR term per parameter. """
	arity = len(inspect.signature(func).parameters)
	var_ids = [next(_var_ids) for _ in range(arity)]
	variables = [Term(term_type=TermType.VAR, args=[var_id], name="var") for var_id in var_ids]
	body = expr(func(*variables))
	return Term(
		term_type=TermType.FUNC,
		args=[Term(term_type=TermType.MAKE_ARRAY, args=var_ids, name="make_array"), body],
		name="func",
		data=func
	)

def func_wrap(value: Any) -> Any:
	""" Plain values and callables pass through; expressions built on r.row are wrapped in a one-argument function. """
	if isinstance(value, Term) and _contains_implicit_var(value):
		return Term(
			term_type=TermType.FUNC,
			args=[Term(term_type=TermType.MAKE_ARRAY, args=[1], name="make_array"), value],
			name="func"
		)
	return value

def _contains_implicit_var(term: Term) -> bool:
	if term.term_type == TermType.IMPLICIT_VAR:
		return True
	children = list(term.args) + list(term.optargs.values())
	return any(isinstance(child, Term) and _contains_implicit_var(child) for child in children)

def db(name: str) -> Term:
	return Term(term_type=TermType.DB, args=[name], name="db")

def table(name: str, **optargs: Any) -> Term:
	return Term(term_type=TermType.TABLE, args=[name], optargs=optargs, name="table")

row: Term = Term(term_type=TermType.IMPLICIT_VAR, name="row")
""" The implicit variable, usable inside filter(). """
