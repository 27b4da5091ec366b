"""Exceptions raised by the Playground XYZ adapter.

The mapping operations never raise on bad bid params or partner responses;
these are reserved for setup problems such as a broken settings file.
"""


class AdapterError(Exception):
    """Base exception for adapter errors."""
    pass


class AdapterConfigError(AdapterError):
    """Raised when adapter settings cannot be loaded or are invalid."""
    pass
