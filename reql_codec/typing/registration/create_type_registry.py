from ...utilities import logger
from ...utilities.setup_error import SetupError
"""
Documentation:
	- Opaque types are configuration. Declare them here (or register them at import time, the way reql_codec.term does for Term)
	  rather than teaching the encoder about any one type.
"""

def create_type_registry(opaque_types: list[type] | None = None) -> None:
	""" Registers the declared opaque types into the module-level type_registry.
	Call this once during application startup, before the first obj_to_datum / datum_to_obj call. Calling it again only adds types. """
	
	logger.logger.debug("Creating type registry...")
	
	if opaque_types is None:
		opaque_types = []
	
	# Validate the configuration before touching the registry, so a bad list leaves it unchanged
	for opaque_type in opaque_types:
		if not isinstance(opaque_type, type):
			raise SetupError(f"Opaque types must be classes. Received {opaque_type!r}.")

	# Update the module-level type registry
	from .. import type_registry
	type_registry.register_opaque_list(opaque_types)
	
	logger.logger.debug(f"Registered opaque types: {', '.join([cls.__name__ for cls in opaque_types])}")
	logger.logger.debug(f"Opaque type registry: {type_registry}")
