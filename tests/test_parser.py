"""Tests for parsing path text into components and rendering it back."""

import pytest

from filepaths import (
    COMMON,
    UNIX,
    WINDOWS,
    Component,
    ComponentKind,
    Path,
    PathVariant,
    PrefixSyntax,
)
from filepaths.core.models import CUR_DIR, PARENT_DIR, ROOT
from filepaths.core.operations import normalize
from filepaths.core.parser import (
    _prefix_pattern,
    _separator_class,
    _splitter,
    ensure_path,
    parse,
    split_prefix,
    to_string,
)

from conftest import SAMPLE_PATHS


def kinds(path):
    return [component.kind for component in path]


def texts(path):
    return [component.text for component in path if component.is_normal]


class TestParseCommon:
    def test_empty_string(self):
        """The empty string is the relative, zero-component path."""
        path = parse("", COMMON)
        assert path == Path()
        assert path.is_absolute is False

    def test_relative(self):
        path = parse("a/b", COMMON)
        assert path.components == (Component.normal("a"), Component.normal("b"))
        assert path.is_relative

    def test_absolute(self):
        path = parse("/a/b", COMMON)
        assert path.components[0] == ROOT
        assert path.is_absolute

    def test_root_only(self):
        assert parse("/", COMMON).components == (ROOT,)
        assert parse("///", COMMON).components == (ROOT,)

    def test_consecutive_separators_are_one_boundary(self):
        assert texts(parse("a//b///c/", COMMON)) == ["a", "b", "c"]

    def test_dots_are_tagged_not_resolved(self):
        path = parse("a/./b/../c", COMMON)
        assert path.components == (
            Component.normal("a"),
            CUR_DIR,
            Component.normal("b"),
            PARENT_DIR,
            Component.normal("c"),
        )

    def test_backslash_is_plain_text(self):
        path = parse("a\\b", COMMON)
        assert path.components == (Component.normal("a\\b"),)

    def test_drive_is_plain_text(self):
        path = parse("C:/a", COMMON)
        assert path.has_prefix is False
        assert path.is_relative
        assert texts(path) == ["C:", "a"]

    def test_dotted_names_are_normal(self):
        assert kinds(parse("...", COMMON)) == [ComponentKind.NORMAL]
        assert kinds(parse(".hidden", COMMON)) == [ComponentKind.NORMAL]


class TestParseWindows:
    def test_drive_with_root(self):
        path = parse("C:\\Users", WINDOWS)
        assert path.components == (Component.prefix("C:"), ROOT, Component.normal("Users"))
        assert path.is_absolute

    def test_drive_without_root(self):
        """A drive not followed by a separator is a relative path with a prefix."""
        path = parse("C:Users", WINDOWS)
        assert path.components == (Component.prefix("C:"), Component.normal("Users"))
        assert path.is_absolute is False
        assert path.has_prefix is True

    def test_bare_drive(self):
        path = parse("C:", WINDOWS)
        assert path.components == (Component.prefix("C:"),)
        assert path.is_relative

    def test_drive_letter_is_upper_cased(self):
        assert parse("c:/a", WINDOWS).prefix == Component.prefix("C:")

    def test_mixed_separators(self):
        path = parse("C:/a\\b/c", WINDOWS)
        assert texts(path) == ["a", "b", "c"]

    def test_root_without_drive(self):
        path = parse("\\a", WINDOWS)
        assert path.components == (ROOT, Component.normal("a"))
        assert path.is_absolute

    def test_unc_head(self):
        path = parse("\\\\server\\share\\dir\\file.txt", WINDOWS)
        assert path.prefix == Component.unc_head("server", "share")
        assert path.components[1] == ROOT
        assert texts(path) == ["dir", "file.txt"]
        assert path.is_absolute

    def test_unc_head_is_always_rooted(self):
        path = parse("\\\\server\\share", WINDOWS)
        assert path.components == (Component.unc_head("server", "share"), ROOT)
        assert path.is_absolute

    def test_unc_with_forward_slashes(self):
        assert parse("//server/share/x", WINDOWS).prefix == Component.unc_head("server", "share")

    def test_unc_server_only(self):
        path = parse("\\\\server", WINDOWS)
        assert path.components == (Component.unc_head("server"), ROOT)

    def test_three_separators_are_a_root(self):
        path = parse("///a", WINDOWS)
        assert path.components == (ROOT, Component.normal("a"))

    def test_drive_marker_later_in_path(self):
        path = parse("a/C:b", WINDOWS)
        assert path.has_prefix is False
        assert texts(path) == ["a", "C:b"]

    def test_non_letter_drive(self):
        path = parse("1:/a", WINDOWS)
        assert path.has_prefix is False
        assert texts(path) == ["1:", "a"]


class TestParseCustomVariants:
    def test_colon_separated(self, colon_variant):
        path = parse(":usr:lib", colon_variant)
        assert path.is_absolute
        assert texts(path) == ["usr", "lib"]

    def test_slash_is_text_under_colon_variant(self, colon_variant):
        """Characters outside the separator set never split."""
        assert texts(parse("a/b:c", colon_variant)) == ["a/b", "c"]

    def test_dollar_drive(self, drive_only_variant):
        path = parse("d$\\x", drive_only_variant)
        assert path.prefix == Component.prefix("D$")
        assert path.is_absolute

    def test_no_unc_when_disabled(self, drive_only_variant):
        path = parse("\\\\server\\share", drive_only_variant)
        assert path.has_prefix is False
        assert path.components[0] == ROOT
        assert texts(path) == ["server", "share"]


class TestSplitPrefix:
    def test_no_prefix_support(self):
        assert split_prefix("C:/a", UNIX) == (None, False, "C:/a")

    def test_drive(self):
        prefix, rooted, rest = split_prefix("C:/a", WINDOWS)
        assert prefix == Component.prefix("C:")
        assert rooted is False
        assert rest == "/a"

    def test_unc(self):
        prefix, rooted, rest = split_prefix("\\\\srv\\shr\\a", WINDOWS)
        assert prefix == Component.unc_head("srv", "shr")
        assert rooted is True
        assert rest == "\\a"


class TestToString:
    def test_empty_path_renders_empty(self):
        assert to_string(Path(), COMMON) == ""
        assert to_string(Path(), WINDOWS) == ""

    def test_cur_dir(self):
        assert to_string(parse(".", COMMON), COMMON) == "."

    def test_windows_uses_forward_slash(self):
        assert to_string("C:\\a\\b", WINDOWS) == "C:/a/b"

    def test_unc(self):
        assert to_string("\\\\server\\share\\a", WINDOWS) == "//server/share/a"

    def test_render_under_other_variant(self):
        """A Path carries no variant; any variant can render it."""
        backslash = PathVariant(name="bs", separators=("\\", "/"))
        path = parse("/a/b", UNIX)
        assert to_string(path, backslash) == "\\a\\b"

    def test_ensure_path_passthrough(self):
        path = parse("a", COMMON)
        assert ensure_path(path, WINDOWS) is path


class TestParseProperties:
    @pytest.mark.parametrize("variant_name,variant", [("common", COMMON), ("windows", WINDOWS)])
    def test_round_trip_and_stable_absoluteness(self, variant_name, variant):
        for text in SAMPLE_PATHS[variant_name]:
            path = parse(text, variant)
            reparsed = parse(to_string(path, variant), variant)
            assert reparsed == path, text
            assert reparsed.is_absolute == path.is_absolute, text

    def test_parse_never_fails(self):
        odd_inputs = ["\x00", "::", "\\\\", "C:C:", "..\\..", " ", "a\tb", "\u00e9/\u00df"]
        for variant in (COMMON, UNIX, WINDOWS):
            for text in odd_inputs:
                assert isinstance(parse(text, variant), Path)


# Backslash-only variant recognizing UNC heads, so '/' is plain text.
BACKSLASH_UNC = PathVariant(
    name="backslash-unc",
    separators=("\\",),
    has_prefix=True,
    prefix_syntax=PrefixSyntax(drive_marker=":", unc=True),
)

# Drives written as a letter followed by '/', which is not a separator here.
SLASH_MARKER = PathVariant(
    name="slash-marker",
    separators=("\\",),
    has_prefix=True,
    prefix_syntax=PrefixSyntax(drive_marker="/", unc=False),
)


class TestCustomVariantRoundTrip:
    def test_unc_server_containing_slash(self):
        path = parse("\\\\ser/ver\\share\\x", BACKSLASH_UNC)
        assert path.prefix == Component.unc_head("ser/ver", "share")
        assert to_string(path, BACKSLASH_UNC) == "\\\\ser/ver\\share\\x"
        assert parse(to_string(path, BACKSLASH_UNC), BACKSLASH_UNC) == path

    def test_unc_server_containing_slash_after_normalize(self):
        path = normalize("\\\\ser/ver\\share\\x\\..\\y", BACKSLASH_UNC)
        assert to_string(path, BACKSLASH_UNC) == "\\\\ser/ver\\share\\y"
        assert parse(to_string(path, BACKSLASH_UNC), BACKSLASH_UNC) == path

    def test_slash_drive_marker(self):
        path = parse("C/\\a", SLASH_MARKER)
        assert path.prefix == Component.prefix("C/")
        assert path.is_absolute
        assert to_string(path, SLASH_MARKER) == "C/\\a"
        assert parse(to_string(path, SLASH_MARKER), SLASH_MARKER) == path

    def test_custom_variants_round_trip(self, colon_variant, drive_only_variant):
        samples = {
            colon_variant: [":usr:lib", "a::b:", "a/b:c", "..:x", ""],
            drive_only_variant: ["d$\\x", "D$x", "\\\\server\\share", "a\\..\\c$y", "x/y\\z"],
            BACKSLASH_UNC: ["\\\\a/b\\c/d\\e", "\\\\srv", "c:x/y", "\\a/b"],
            SLASH_MARKER: ["C/", "c/x\\y", "a\\C/b", "\\\\x"],
        }
        for variant, texts_ in samples.items():
            for text in texts_:
                path = parse(text, variant)
                assert parse(to_string(path, variant), variant) == path, (variant.name, text)


class TestPatternCache:
    def test_caches_are_bounded(self):
        for cached in (_separator_class, _splitter, _prefix_pattern):
            assert cached.cache_info().maxsize == 64

    def test_many_variants_do_not_grow_cache(self):
        for index in range(200):
            parse("a/b", PathVariant(name=f"v{index}", separators=("/",)))
        assert _splitter.cache_info().currsize <= 64
