"""Exceptions raised by the AviList accessors."""


class InvalidArgumentError(ValueError):
    """Raised when a caller passes an unrecognised version, rank or table name."""


class DataUnavailableError(RuntimeError):
    """Raised when a bundled table cannot be located or parsed."""
