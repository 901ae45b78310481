"""
Query terms.

Importing this module registers Term as an opaque type, so the structural encoder hands Terms to Term.to_datum()
instead of walking their fields. reql_codec/__init__.py imports this module, so the registration is in place before
any user code can reach the encoder.
"""

from .term import Term, expr, db, table, row
from .term_type import TermType
from ..typing import type_registry

type_registry.register_opaque(Term)
