"""
Exception hierarchy for typekit.

Every error raised by the library derives from TypekitError and also from the
matching built-in exception, so callers can catch either.
"""


class TypekitError(Exception):
    """Base class for all typekit errors."""
    pass


class TypeMismatchError(TypekitError, TypeError):
    """Raised when an element does not satisfy a collection's element kind."""
    pass


class InvalidArgumentError(TypekitError, ValueError):
    """Raised when an argument is malformed (negative index, unknown kind, bad date...)."""
    pass


class OutOfRangeError(TypekitError, IndexError):
    """Raised when an index is well-formed but outside the collection."""
    pass
