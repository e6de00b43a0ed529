"""Exception types raised by filepaths.

Parsing and serialization never raise; these only come out of the
operations that compare paths, validate variants or edit extensions.
"""

from typing import Any


class PathError(ValueError):
    """Base class for every error raised by filepaths."""


class IncomparableRoots(PathError):
    """Two paths have no lexical relation (absolute vs relative, or different prefixes)."""

    def __init__(self, target: Any, base: Any, reason: str = ""):
        self.target = target
        self.base = base
        self.reason = reason
        message = f"cannot relate {str(target)!r} to {str(base)!r}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class InvalidVariant(PathError):
    """A path variant breaks its own invariants."""


class InvalidExtension(PathError):
    """An extension argument cannot be applied to a file name."""
