"""
Parsing and serialization of path text.

Any string parses: there is no invalid input. The parser only tags
segments; interpreting ``..`` is left to normalization.
"""

import re
from functools import lru_cache
from typing import List, Optional, Tuple

from .models import (
    CUR_DIR,
    PARENT_DIR,
    ROOT,
    Component,
    Path,
    PathLike,
    PathVariant,
)


@lru_cache(maxsize=64)
def _separator_class(variant: PathVariant) -> str:
    return "[" + "".join(re.escape(sep) for sep in variant.separators) + "]"


@lru_cache(maxsize=64)
def _splitter(variant: PathVariant) -> re.Pattern:
    return re.compile(_separator_class(variant) + "+")


@lru_cache(maxsize=64)
def _prefix_pattern(variant: PathVariant) -> Optional[re.Pattern]:
    """Compile the prefix recognizer for ``variant``, or None if it has none."""
    if not variant.has_prefix:
        return None
    chars = "".join(re.escape(s) for s in variant.separators)
    sep = f"[{chars}]"
    not_sep = f"[^{chars}]"
    forms = []
    if variant.recognizes_unc:
        forms.append(
            rf"(?P<unc>{sep}{{2}}(?P<server>{not_sep}+)(?:{sep}+(?P<share>{not_sep}+))?)"
        )
    if variant.recognizes_drives:
        marker = re.escape(variant.prefix_syntax.drive_marker)
        forms.append(rf"(?P<drive>[A-Za-z]{marker})")
    return re.compile("^(?:" + "|".join(forms) + ")")


def split_prefix(text: str, variant: PathVariant) -> Tuple[Optional[Component], bool, str]:
    """
    Consume a leading prefix from ``text``.

    Returns:
        Tuple of (prefix component or None, whether the prefix implies a
        root, remaining text).
    """
    pattern = _prefix_pattern(variant)
    if pattern is None:
        return None, False, text
    match = pattern.match(text)
    if match is None:
        return None, False, text

    rest = text[match.end():]
    groups = match.groupdict()
    if groups.get("unc"):
        return Component.unc_head(groups["server"], groups["share"]), True, rest

    drive = groups["drive"]
    if not variant.case_sensitive:
        drive = drive.upper()
    return Component.prefix(drive), False, rest


def _classify(segment: str) -> Component:
    if segment == ".":
        return CUR_DIR
    if segment == "..":
        return PARENT_DIR
    return Component.normal(segment)


def parse(text: str, variant: PathVariant) -> Path:
    """
    Parse ``text`` into a Path under ``variant``.

    A prefix is matched first (drive letter or UNC head), then a leading
    separator becomes Root. The rest splits on any separator, dropping
    the empty segments left by runs of separators.
    """
    components: List[Component] = []

    prefix, rooted, rest = split_prefix(text, variant)
    if prefix is not None:
        components.append(prefix)

    if rest and rest[0] in variant.separators:
        rooted = True
    if rooted:
        components.append(ROOT)

    components.extend(
        _classify(segment) for segment in _splitter(variant).split(rest) if segment
    )
    return Path(tuple(components))


def ensure_path(path: PathLike, variant: PathVariant) -> Path:
    """Return ``path`` as a Path, parsing it under ``variant`` if it is text."""
    if isinstance(path, Path):
        return path
    return parse(path, variant)


def to_string(path: PathLike, variant: PathVariant) -> str:
    """
    Render ``path`` with the primary separator of ``variant``.

    The empty path renders as an empty string.
    """
    return ensure_path(path, variant).render(variant.primary_separator)
