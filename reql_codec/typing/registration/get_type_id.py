def get_type_id(cls: type) -> str:
	""" Returns the stable type identifier for a class, "<module>.<qualname>". 
	Two distinct classes only share an identifier if one shadows the other in its module (for example a class redefined inside a reloaded module). """
	return f"{cls.__module__}.{cls.__qualname__}"
