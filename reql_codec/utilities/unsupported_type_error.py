from typing import Any


class UnsupportedTypeError(TypeError):
    """ Raised by the encoder when a value can neither be traversed structurally nor marshalled by its own type.
    Opaque types without a to_datum() / from_datum() end up here as well. """

    def __init__(self, type_: Any, message: str | None = None) -> None:
        self.type_ = type_
        self.message = message if message else f"Type {type_!r} not serializable."
        super().__init__(self.message)
