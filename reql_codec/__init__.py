"""
reql_codec

Encodes Python values into query datums. Types registered as opaque in the type registry are never traversed
field by field; they encode themselves.

Importing this package registers Term as opaque (see reql_codec.term), so the registration is always in place
before the encoder is first used.
"""

from .typing import type_registry, TypeRegistry, create_type_registry, register_opaque, is_opaque, get_type_id, UnsupportedTypeError
from .typing.serialization.obj_to_datum import obj_to_datum
from .typing.serialization.datum_to_obj import datum_to_obj
from .term import Term, TermType, expr, db, table, row
from .utilities.setup_error import SetupError
from .utilities.logger import set_logger, set_log_level
