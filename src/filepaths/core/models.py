"""
Core data models for filepaths.

This module holds the immutable values every operation passes around:
the platform path variant that describes a syntax, the component
taxonomy a path decomposes into, and the parsed Path itself.
"""

import logging
import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Optional, Tuple, Union

from .errors import InvalidVariant

logger = logging.getLogger(__name__)

# Separator used inside the canonical text of a UNC prefix.
CANONICAL_SEPARATOR = "/"


@dataclass(frozen=True)
class PrefixSyntax:
    """How a variant recognizes a leading drive or volume token."""

    drive_marker: Optional[str] = ":"  # letter followed by this char, e.g. C:
    unc: bool = True                    # \\server\share heads


@dataclass(frozen=True)
class PathVariant:
    """
    Syntax rules for one platform family.

    A variant is plain data: the parser and the lexical operations read
    it, nothing mutates it, and it can be shared freely between threads.
    Invalid combinations are rejected at construction time.

    Attributes:
        name: Label used in reprs and by the CLI.
        separators: Characters that delimit components. The first one is
            the primary separator used when rendering.
        has_prefix: Whether drive/volume prefixes are recognized.
        prefix_syntax: Which prefix forms are recognized. Only consulted
            when ``has_prefix`` is true.
        case_sensitive: Whether component text compares case-sensitively.
        allows_multiple_separators: Whether a run of separators reads as
            one boundary. Parsing always collapses runs; the flag is kept
            so callers rendering paths themselves know the platform rule.
    """

    name: str
    separators: Tuple[str, ...] = ("/",)
    has_prefix: bool = False
    prefix_syntax: Optional[PrefixSyntax] = None
    case_sensitive: bool = True
    allows_multiple_separators: bool = True

    def __post_init__(self):
        separators = self.separators
        if isinstance(separators, str):
            separators = tuple(separators)
        # Keep first occurrence order; the first entry is the primary separator.
        separators = tuple(dict.fromkeys(separators))
        object.__setattr__(self, "separators", separators)
        self._validate()

    def _validate(self) -> None:
        if not self.separators:
            self._reject("separator set is empty")
        for sep in self.separators:
            if not isinstance(sep, str) or len(sep) != 1:
                self._reject(f"separator {sep!r} is not a single character")
            if sep == ".":
                self._reject("'.' cannot be a separator")

        if not self.has_prefix:
            return

        syntax = self.prefix_syntax
        if syntax is None or (not syntax.drive_marker and not syntax.unc):
            self._reject("prefixes are enabled but no prefix form is recognized")
        marker = syntax.drive_marker
        if marker is not None:
            if len(marker) != 1 or marker.isalpha() or marker == ".":
                self._reject(f"drive marker {marker!r} is not a single punctuation character")
            if marker in self.separators:
                self._reject(f"drive marker {marker!r} is also a separator")
            for sep in self.separators:
                if sep.isascii() and sep.isalpha():
                    self._reject(f"separator {sep!r} can also be a drive letter")

    def _reject(self, reason: str) -> None:
        logger.debug(f"Rejected path variant {self.name!r}: {reason}")
        raise InvalidVariant(f"invalid path variant {self.name!r}: {reason}")

    @property
    def primary_separator(self) -> str:
        """Separator used to render Root and component boundaries."""
        return self.separators[0]

    @property
    def recognizes_drives(self) -> bool:
        return self.has_prefix and bool(self.prefix_syntax.drive_marker)

    @property
    def recognizes_unc(self) -> bool:
        return self.has_prefix and self.prefix_syntax.unc

    def fold(self, text: str) -> str:
        """Return ``text`` in the form used for comparisons under this variant."""
        return text if self.case_sensitive else text.casefold()


class ComponentKind(Enum):
    """The closed set of things a path component can be."""
    PREFIX = "prefix"
    ROOT = "root"
    CUR_DIR = "cur_dir"
    PARENT_DIR = "parent_dir"
    NORMAL = "normal"


@dataclass(frozen=True)
class Component:
    """One element of a parsed path."""

    kind: ComponentKind
    text: str = ""
    unc: Tuple[str, ...] = ()  # (server,) or (server, share) for UNC prefixes

    def __post_init__(self):
        if self.kind is ComponentKind.NORMAL:
            if not self.text:
                raise ValueError("normal component text cannot be empty")
            if self.text in (".", ".."):
                raise ValueError(f"{self.text!r} is not a normal component")
        elif self.kind is ComponentKind.PREFIX:
            unc = tuple(self.unc)
            if unc:
                if len(unc) > 2 or not all(unc):
                    raise ValueError(f"invalid UNC head {unc!r}")
                object.__setattr__(self, "unc", unc)
                object.__setattr__(self, "text", CANONICAL_SEPARATOR * 2 + CANONICAL_SEPARATOR.join(unc))
            elif not self.text:
                raise ValueError("prefix component text cannot be empty")
        elif self.kind is ComponentKind.ROOT:
            object.__setattr__(self, "text", "")
        elif self.kind is ComponentKind.CUR_DIR:
            object.__setattr__(self, "text", ".")
        elif self.kind is ComponentKind.PARENT_DIR:
            object.__setattr__(self, "text", "..")

    @classmethod
    def normal(cls, text: str) -> "Component":
        return cls(ComponentKind.NORMAL, text)

    @classmethod
    def prefix(cls, text: str) -> "Component":
        return cls(ComponentKind.PREFIX, text)

    @classmethod
    def unc_head(cls, server: str, share: Optional[str] = None) -> "Component":
        """A UNC prefix naming ``server`` and, optionally, ``share``."""
        parts = (server, share) if share else (server,)
        return cls(ComponentKind.PREFIX, unc=parts)

    def render(self, separator: str = CANONICAL_SEPARATOR) -> str:
        """Text of this component with UNC heads joined by ``separator``."""
        if self.unc:
            return separator * 2 + separator.join(self.unc)
        return self.text

    @property
    def is_normal(self) -> bool:
        return self.kind is ComponentKind.NORMAL

    @property
    def is_anchor(self) -> bool:
        """Root and Prefix anchor a path; they can only lead it."""
        return self.kind in (ComponentKind.ROOT, ComponentKind.PREFIX)

    def __repr__(self) -> str:
        if self.kind in (ComponentKind.NORMAL, ComponentKind.PREFIX):
            return f"{self.kind.name.title()}({self.text!r})"
        return self.kind.name.title().replace("_", "")


ROOT = Component(ComponentKind.ROOT)
CUR_DIR = Component(ComponentKind.CUR_DIR)
PARENT_DIR = Component(ComponentKind.PARENT_DIR)


@dataclass(frozen=True)
class Path:
    """
    A parsed path: an ordered, immutable sequence of components.

    ``is_absolute`` and ``has_prefix`` are derived once from the sequence.
    A Path keeps no reference to the variant that produced it, so it can
    be rendered under any variant. The empty sequence is the current
    directory and is relative.
    """

    components: Tuple[Component, ...] = ()
    is_absolute: bool = field(init=False, compare=False)
    has_prefix: bool = field(init=False, compare=False)

    def __post_init__(self):
        components = tuple(self.components)
        object.__setattr__(self, "components", components)
        self._check_anchors(components)

        has_prefix = bool(components) and components[0].kind is ComponentKind.PREFIX
        anchor_end = 1 if has_prefix else 0
        is_absolute = (
            len(components) > anchor_end
            and components[anchor_end].kind is ComponentKind.ROOT
        )
        object.__setattr__(self, "has_prefix", has_prefix)
        object.__setattr__(self, "is_absolute", is_absolute)

    @staticmethod
    def _check_anchors(components: Tuple[Component, ...]) -> None:
        for index, component in enumerate(components):
            if not isinstance(component, Component):
                raise TypeError(f"expected Component, got {type(component).__name__}")
            if component.kind is ComponentKind.PREFIX and index != 0:
                raise ValueError("a prefix can only be the first component")
            if component.kind is ComponentKind.ROOT:
                leading = index == 0 or (
                    index == 1 and components[0].kind is ComponentKind.PREFIX
                )
                if not leading:
                    raise ValueError("a root can only follow a prefix or lead the path")

    @property
    def is_relative(self) -> bool:
        return not self.is_absolute

    @property
    def prefix(self) -> Optional[Component]:
        return self.components[0] if self.has_prefix else None

    @property
    def anchor(self) -> Tuple[Component, ...]:
        """The leading Prefix/Root components, possibly empty."""
        count = 0
        for component in self.components[:2]:
            if not component.is_anchor:
                break
            count += 1
        return self.components[:count]

    @property
    def tail(self) -> Tuple[Component, ...]:
        """Everything after the anchor."""
        return self.components[len(self.anchor):]

    @property
    def name(self) -> str:
        """Text of the final Normal component, or an empty string."""
        if self.components and self.components[-1].is_normal:
            return self.components[-1].text
        return ""

    def with_name(self, name: str) -> "Path":
        """Return a copy whose final Normal component reads ``name``."""
        if not self.name:
            raise ValueError(f"{self!s} has an empty name")
        return Path(self.components[:-1] + (Component.normal(name),))

    def render(self, separator: str = CANONICAL_SEPARATOR) -> str:
        """
        Serialize the path using ``separator`` between components.

        The empty path renders as an empty string.
        """
        text = ""
        body = []
        for component in self.components:
            if component.kind is ComponentKind.PREFIX:
                text += component.render(separator)
            elif component.kind is ComponentKind.ROOT:
                text += separator
            else:
                body.append(component.text)
        return text + separator.join(body)

    def __iter__(self) -> Iterator[Component]:
        return iter(self.components)

    def __len__(self) -> int:
        return len(self.components)

    def __bool__(self) -> bool:
        return bool(self.components)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Path({self.render()!r})"


PathLike = Union[str, Path]


UNIX = PathVariant(
    name="unix",
    separators=("/",),
    case_sensitive=True,
)

WINDOWS = PathVariant(
    name="windows",
    separators=("/", "\\"),
    has_prefix=True,
    prefix_syntax=PrefixSyntax(drive_marker=":", unc=True),
    case_sensitive=False,
)

# Generic syntax used by the common tier: one separator, no prefixes.
COMMON = PathVariant(
    name="common",
    separators=("/",),
    case_sensitive=True,
)

# Fixed for the lifetime of the process.
NATIVE = WINDOWS if sys.platform == "win32" else UNIX

VARIANTS = {
    "common": COMMON,
    "unix": UNIX,
    "windows": WINDOWS,
    "native": NATIVE,
}

logger.debug(f"Native path variant bound to {NATIVE.name!r} for platform {sys.platform!r}")
