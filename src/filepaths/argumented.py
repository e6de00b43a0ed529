"""
Path operations taking an explicit PathVariant.

This is the tier the others are built on: ``filepaths.common`` and
``filepaths.native`` call these functions with a fixed variant. Every
function accepts text or a parsed Path and returns text (or a bool).
"""

from typing import Iterable, List

from .core import operations
from .core.errors import InvalidVariant
from .core.models import Component, Path, PathLike, PathVariant
from .core.parser import ensure_path
from .core.parser import parse as _parse
from .core.parser import to_string as _to_string
from .utils import extensions


def _check(variant: PathVariant) -> PathVariant:
    if not isinstance(variant, PathVariant):
        raise InvalidVariant(f"expected a PathVariant, got {type(variant).__name__}")
    return variant


def parse(path: str, variant: PathVariant) -> Path:
    """Parse ``path`` into its components."""
    return _parse(path, _check(variant))


def to_string(path: PathLike, variant: PathVariant) -> str:
    """Render ``path`` with the variant's primary separator."""
    return _to_string(path, _check(variant))


def parts(path: PathLike, variant: PathVariant) -> List[Component]:
    """List the components of ``path``."""
    return list(ensure_path(path, _check(variant)))


def is_absolute(path: PathLike, variant: PathVariant) -> bool:
    return ensure_path(path, _check(variant)).is_absolute


def is_relative(path: PathLike, variant: PathVariant) -> bool:
    return not is_absolute(path, variant)


def normalize(path: PathLike, variant: PathVariant) -> str:
    """Eliminate ``.`` and resolvable ``..`` portions of ``path``."""
    return _to_string(operations.normalize(path, _check(variant)), variant)


def join(base: PathLike, other: PathLike, variant: PathVariant) -> str:
    """Append ``other`` to ``base``; an absolute ``other`` replaces ``base``."""
    return _to_string(operations.join(base, other, _check(variant)), variant)


def resolve(base: PathLike, other: PathLike, variant: PathVariant) -> str:
    """Join ``other`` onto ``base`` and normalize the result."""
    return _to_string(operations.resolve(base, other, _check(variant)), variant)


def resolve_n(paths: Iterable[PathLike], variant: PathVariant) -> str:
    """Resolve several paths left to right. No paths resolve to ''."""
    return _to_string(operations.resolve_n(paths, _check(variant)), variant)


def relative_to(target: PathLike, base: PathLike, variant: PathVariant) -> str:
    """
    Find the relative path from ``base`` to ``target``.

    Raises:
        IncomparableRoots: If the two paths have no lexical relation.
    """
    return _to_string(operations.relative_to(target, base, _check(variant)), variant)


def common_prefix(paths: Iterable[PathLike], variant: PathVariant) -> str:
    return _to_string(operations.common_prefix(paths, _check(variant)), variant)


def equivalent(left: PathLike, right: PathLike, variant: PathVariant) -> bool:
    return operations.equivalent(left, right, _check(variant))


def base_name(path: PathLike, variant: PathVariant) -> str:
    return extensions.base_name(path, _check(variant))


def base_name_without_ext(path: PathLike, exts: Iterable[str], variant: PathVariant) -> str:
    return extensions.base_name_without_ext(path, exts, _check(variant))


def change_extension(path: PathLike, extension: str, variant: PathVariant) -> str:
    return _to_string(extensions.change_extension(path, extension, _check(variant)), variant)


def change_last_extension(path: PathLike, extension: str, variant: PathVariant) -> str:
    return _to_string(extensions.change_last_extension(path, extension, _check(variant)), variant)


def has_extension(path: PathLike, extension: str, variant: PathVariant) -> bool:
    return extensions.has_extension(path, extension, _check(variant))


def has_extensions(path: PathLike, exts: Iterable[str], variant: PathVariant) -> bool:
    return extensions.has_extensions(path, exts, _check(variant))
