"""
Path operations over the generic variant.

Only ``/`` separates components and a path is absolute when it starts
with one. There are no drive or UNC prefixes.
"""

from typing import Iterable, List

from . import argumented
from .core.models import COMMON, Component, Path, PathLike

VARIANT = COMMON


def parse(path: str) -> Path:
    return argumented.parse(path, VARIANT)


def to_string(path: PathLike) -> str:
    return argumented.to_string(path, VARIANT)


def parts(path: PathLike) -> List[Component]:
    return argumented.parts(path, VARIANT)


def is_absolute(path: PathLike) -> bool:
    return argumented.is_absolute(path, VARIANT)


def is_relative(path: PathLike) -> bool:
    return argumented.is_relative(path, VARIANT)


def normalize(path: PathLike) -> str:
    """Normalize lexically: 'a/./b/../c' becomes 'a/c'."""
    return argumented.normalize(path, VARIANT)


def join(base: PathLike, other: PathLike) -> str:
    return argumented.join(base, other, VARIANT)


def resolve(base: PathLike, other: PathLike) -> str:
    return argumented.resolve(base, other, VARIANT)


def resolve_n(paths: Iterable[PathLike]) -> str:
    return argumented.resolve_n(paths, VARIANT)


def relative_to(target: PathLike, base: PathLike) -> str:
    """
    Find the path leading from ``base`` to ``target``.

    Both must be absolute or both relative; otherwise IncomparableRoots
    is raised.
    """
    return argumented.relative_to(target, base, VARIANT)


def common_prefix(paths: Iterable[PathLike]) -> str:
    return argumented.common_prefix(paths, VARIANT)


def equivalent(left: PathLike, right: PathLike) -> bool:
    return argumented.equivalent(left, right, VARIANT)


def base_name(path: PathLike) -> str:
    return argumented.base_name(path, VARIANT)


def base_name_without_ext(path: PathLike, exts: Iterable[str]) -> str:
    return argumented.base_name_without_ext(path, exts, VARIANT)


def change_extension(path: PathLike, extension: str) -> str:
    return argumented.change_extension(path, extension, VARIANT)


def change_last_extension(path: PathLike, extension: str) -> str:
    return argumented.change_last_extension(path, extension, VARIANT)


def has_extension(path: PathLike, extension: str) -> bool:
    return argumented.has_extension(path, extension, VARIANT)


def has_extensions(path: PathLike, exts: Iterable[str]) -> bool:
    return argumented.has_extensions(path, exts, VARIANT)
