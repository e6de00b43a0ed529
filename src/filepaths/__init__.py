"""
Work with file paths by text only.

Paths are parsed under a PathVariant describing a platform's syntax and
then joined, normalized and related to each other lexically. Three
tiers expose the same operations:

- ``filepaths.common``: generic ``/`` syntax with no prefixes
- ``filepaths.argumented``: the variant is passed to every call
- ``filepaths.native``: bound to the running platform's variant

    >>> from filepaths import common
    >>> common.normalize("a/./b/../c")
    'a/c'
    >>> common.relative_to("/a/b/c", "/a/x/y")
    '../../b/c'
"""

from . import argumented, common, native
from .core import (
    COMMON,
    NATIVE,
    UNIX,
    VARIANTS,
    WINDOWS,
    Component,
    ComponentKind,
    IncomparableRoots,
    InvalidExtension,
    InvalidVariant,
    Path,
    PathError,
    PathVariant,
    PrefixSyntax,
)

__version__ = "0.1.0"

__all__ = [
    "argumented",
    "common",
    "native",
    "Path",
    "Component",
    "ComponentKind",
    "PathVariant",
    "PrefixSyntax",
    "COMMON",
    "UNIX",
    "WINDOWS",
    "NATIVE",
    "VARIANTS",
    "PathError",
    "IncomparableRoots",
    "InvalidVariant",
    "InvalidExtension",
]
