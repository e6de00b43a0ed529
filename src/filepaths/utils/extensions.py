"""
File name and extension helpers.

These work on the final component of a parsed path. An extension is
the trailing run of ``.something`` groups of the name (``.tar.gz``), and
leading dots never count, so ``.bashrc`` has no extension.
"""

import re
from typing import Iterable, List, Tuple

from ..core.errors import InvalidExtension, PathError
from ..core.models import Path, PathLike, PathVariant
from ..core.parser import ensure_path

EXTENSION_RUN = re.compile(r"(\.[^.]+)+$")
LAST_EXTENSION = re.compile(r"\.[^.]+$")
EXTENSION = re.compile(r"\.[^.]+")


def _dotted(extension: str, variant: PathVariant) -> str:
    """Add the missing leading dot to ``extension`` and reject separators."""
    if any(sep in extension for sep in variant.separators):
        raise InvalidExtension(f"extension {extension!r} contains a path separator")
    if extension and not extension.startswith("."):
        extension = "." + extension
    if extension == ".":
        raise InvalidExtension("extension cannot be a lone dot")
    return extension


def split_name(name: str, pattern=EXTENSION_RUN) -> Tuple[str, str]:
    """
    Split a file name into (stem, extension).

    ``pattern`` selects the whole extension run by default; pass
    LAST_EXTENSION to split off only the final one.
    """
    body = name.lstrip(".")
    leading = name[:len(name) - len(body)]
    match = pattern.search(body)
    if match is None:
        return name, ""
    return leading + body[:match.start()], match.group(0)


def _extension_tails(run: str) -> List[str]:
    """Trailing groups of an extension run, longest first (.tar.gz, .gz)."""
    groups = EXTENSION.findall(run)
    return ["".join(groups[i:]) for i in range(len(groups))]


def _require_name(path: Path) -> str:
    if not path.name:
        raise PathError(f"{str(path)!r} has no file name to change the extension of")
    return path.name


def base_name(path: PathLike, variant: PathVariant) -> str:
    """Return the text of the last component, or '' if the path ends at its anchor."""
    path = ensure_path(path, variant)
    if not path.tail:
        return ""
    return path.tail[-1].text


def base_name_without_ext(path: PathLike, extensions: Iterable[str], variant: PathVariant) -> str:
    """
    Return the base name with one of ``extensions`` removed.

    The longest extension the name ends with wins, and the stem that is
    left is never empty.
    """
    name = base_name(path, variant)
    stem, run = split_name(name)
    if not run:
        return name

    wanted = {variant.fold(_dotted(ext, variant)) for ext in extensions}
    for tail in _extension_tails(run):
        if variant.fold(tail) in wanted:
            return name[:len(name) - len(tail)]
    return name


def change_extension(path: PathLike, extension: str, variant: PathVariant) -> Path:
    """
    Replace the whole extension run of the file name (``a.x.y`` -> ``a.z``).

    An empty ``extension`` removes the run.
    """
    path = ensure_path(path, variant)
    extension = _dotted(extension, variant)
    stem, _ = split_name(_require_name(path))
    return path.with_name(stem + extension)


def change_last_extension(path: PathLike, extension: str, variant: PathVariant) -> Path:
    """
    Replace only the last extension of the file name (``a.x.y`` -> ``a.x.z``).

    Raises:
        InvalidExtension: If ``extension`` holds more than one dot.
    """
    path = ensure_path(path, variant)
    extension = _dotted(extension, variant)
    if extension.count(".") > 1:
        raise InvalidExtension(f"{extension!r} must contain a single extension")
    stem, _ = split_name(_require_name(path), LAST_EXTENSION)
    return path.with_name(stem + extension)


def has_extension(path: PathLike, extension: str, variant: PathVariant) -> bool:
    """Check whether the file name ends with ``extension``."""
    extension = _dotted(extension, variant)
    if not extension:
        return False
    _, run = split_name(ensure_path(path, variant).name)
    wanted = variant.fold(extension)
    return any(variant.fold(tail) == wanted for tail in _extension_tails(run))


def has_extensions(path: PathLike, extensions: Iterable[str], variant: PathVariant) -> bool:
    """Check whether the file name ends with any of ``extensions``."""
    return any(has_extension(path, ext, variant) for ext in extensions)
