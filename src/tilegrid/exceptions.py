"""Exceptions raised by tilegrid."""


class TileGridError(Exception):
    """Base exception for tilegrid."""


class UnknownProjectionError(TileGridError, KeyError):
    """A projection identifier could not be resolved."""

    def __init__(self, code):
        super().__init__(code)
        self.code = code

    def __str__(self):
        return f"Unknown projection: {self.code!r}"
