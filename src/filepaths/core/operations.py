"""
Lexical path operations.

Every function here is pure: it reads Path values and a variant and
returns new Path values. Nothing touches a file system, so ``..`` can
only cancel a Normal component that precedes it in the same path.
"""

import logging
from typing import Iterable, List, Optional, Sequence, Tuple

from .errors import IncomparableRoots
from .models import CUR_DIR, PARENT_DIR, Component, ComponentKind, Path, PathLike, PathVariant
from .parser import ensure_path, split_prefix

logger = logging.getLogger(__name__)


def _looks_like_prefix(component: Component, variant: PathVariant) -> bool:
    prefix, _, _ = split_prefix(component.text, variant)
    return prefix is not None


def _protect_leading(components: Tuple[Component, ...], variant: PathVariant) -> Tuple[Component, ...]:
    """
    Keep a relative, unanchored sequence from reading back as a prefix.

    ``a/../C:x`` normalizes to the single segment ``C:x``, which would
    re-parse as a drive. A leading CurDir keeps it a plain segment.
    """
    if components and components[0].is_normal and _looks_like_prefix(components[0], variant):
        return (CUR_DIR,) + components
    return components


def _strip_cur_dir(components: Sequence[Component]) -> Tuple[Component, ...]:
    return tuple(c for c in components if c.kind is not ComponentKind.CUR_DIR)


def _same_text(a: Component, b: Component, variant: PathVariant) -> bool:
    if a.kind is not b.kind or len(a.unc) != len(b.unc):
        return False
    if a.unc:
        return all(variant.fold(x) == variant.fold(y) for x, y in zip(a.unc, b.unc))
    return variant.fold(a.text) == variant.fold(b.text)


def _same_prefix(a: Optional[Component], b: Optional[Component], variant: PathVariant) -> bool:
    if a is None or b is None:
        return a is b
    return _same_text(a, b, variant)


def _common_length(left: Sequence[Component], right: Sequence[Component], variant: PathVariant) -> int:
    count = 0
    for a, b in zip(left, right):
        if not _same_text(a, b, variant):
            break
        count += 1
    return count


def normalize(path: PathLike, variant: PathVariant) -> Path:
    """
    Lexically normalize ``path``.

    CurDir components are dropped and each ParentDir cancels the Normal
    component before it. A ParentDir with nothing to cancel is kept on a
    relative path (``../../x``) and discarded on an absolute one, which
    cannot climb above its root. The anchor is never touched.
    """
    path = ensure_path(path, variant)
    stack: List[Component] = []
    for component in path.tail:
        if component.kind is ComponentKind.CUR_DIR:
            continue
        if component.kind is ComponentKind.PARENT_DIR:
            if stack and stack[-1].is_normal:
                stack.pop()
            elif not path.is_absolute:
                stack.append(component)
            continue
        stack.append(component)

    body = tuple(stack)
    if not path.anchor:
        body = _protect_leading(body, variant)
    return Path(path.anchor + body)


def join(base: PathLike, addition: PathLike, variant: PathVariant) -> Path:
    """
    Append ``addition`` to ``base`` without normalizing.

    An absolute addition replaces the base, as does a relative one that
    names a different drive (``D:x``).
    """
    base = ensure_path(base, variant)
    addition = ensure_path(addition, variant)

    if addition.is_absolute:
        return addition
    if addition.has_prefix:
        if not _same_prefix(base.prefix, addition.prefix, variant):
            return addition
        return Path(base.components + addition.tail)
    return Path(base.components + addition.components)


def resolve(base: PathLike, addition: PathLike, variant: PathVariant) -> Path:
    """Join ``addition`` onto ``base`` and normalize the result."""
    return normalize(join(base, addition, variant), variant)


def resolve_n(paths: Iterable[PathLike], variant: PathVariant) -> Path:
    """
    Resolve each path against the accumulation of the ones before it.

    An absolute path discards everything before it. No paths at all
    resolves to the empty path.
    """
    result = Path()
    for path in paths:
        result = join(result, path, variant)
    return normalize(result, variant)


def relative_to(target: PathLike, base: PathLike, variant: PathVariant) -> Path:
    """
    Find the relative path that leads from ``base`` to ``target``.

    Both paths are normalized first. The result climbs out of whatever
    part of ``base`` is not shared with ``target`` and descends into the
    rest of ``target``. It is always relative and is empty when both
    paths coincide.

    Raises:
        IncomparableRoots: If exactly one path is absolute, the prefixes
            differ, or ``base`` climbs further above its start than
            ``target`` does, so the walk back cannot be named.
    """
    target = normalize(target, variant)
    base = normalize(base, variant)

    if target.is_absolute != base.is_absolute:
        logger.debug(f"relative_to: absoluteness differs for {target!r} and {base!r}")
        raise IncomparableRoots(target, base, "one path is absolute and the other is relative")
    if not _same_prefix(target.prefix, base.prefix, variant):
        logger.debug(f"relative_to: prefixes differ for {target!r} and {base!r}")
        raise IncomparableRoots(target, base, "the paths have different prefixes")

    target_tail = _strip_cur_dir(target.tail)
    base_tail = _strip_cur_dir(base.tail)
    common = _common_length(target_tail, base_tail, variant)

    base_rest = base_tail[common:]
    if PARENT_DIR in base_rest:
        logger.debug(f"relative_to: {base!r} climbs above {target!r}")
        raise IncomparableRoots(target, base, "the base climbs above the start of the target")

    components = (PARENT_DIR,) * len(base_rest) + target_tail[common:]
    return Path(_protect_leading(components, variant))


def common_prefix(paths: Iterable[PathLike], variant: PathVariant) -> Path:
    """
    Return the longest leading run shared by every path, after normalizing.

    Raises:
        IncomparableRoots: If the paths mix absolute and relative ones or
            carry different prefixes.
    """
    normalized = [normalize(path, variant) for path in paths]
    if not normalized:
        return Path()

    first = normalized[0]
    first_tail = _strip_cur_dir(first.tail)
    length = len(first_tail)
    for other in normalized[1:]:
        if other.is_absolute != first.is_absolute:
            raise IncomparableRoots(other, first, "one path is absolute and the other is relative")
        if not _same_prefix(other.prefix, first.prefix, variant):
            raise IncomparableRoots(other, first, "the paths have different prefixes")
        length = min(length, _common_length(first_tail, _strip_cur_dir(other.tail), variant))

    body = first_tail[:length]
    if not first.anchor:
        body = _protect_leading(body, variant)
    return Path(first.anchor + body)


def equivalent(left: PathLike, right: PathLike, variant: PathVariant) -> bool:
    """Tell whether two paths normalize to the same components under ``variant``."""
    left = normalize(left, variant)
    right = normalize(right, variant)
    if len(left) != len(right):
        return False
    return _common_length(left.components, right.components, variant) == len(left)
