"""Core components for filepaths."""

from .errors import IncomparableRoots, InvalidExtension, InvalidVariant, PathError
from .models import (
    COMMON,
    NATIVE,
    UNIX,
    VARIANTS,
    WINDOWS,
    Component,
    ComponentKind,
    Path,
    PathVariant,
    PrefixSyntax,
)
from .parser import parse, to_string
from .operations import common_prefix, equivalent, join, normalize, relative_to, resolve, resolve_n

__all__ = [
    "PathError",
    "IncomparableRoots",
    "InvalidVariant",
    "InvalidExtension",
    "PathVariant",
    "PrefixSyntax",
    "Component",
    "ComponentKind",
    "Path",
    "COMMON",
    "UNIX",
    "WINDOWS",
    "NATIVE",
    "VARIANTS",
    "parse",
    "to_string",
    "normalize",
    "join",
    "resolve",
    "resolve_n",
    "relative_to",
    "common_prefix",
    "equivalent",
]
