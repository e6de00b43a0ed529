import pytest

from filepaths import COMMON, UNIX, WINDOWS, PathVariant, PrefixSyntax


# Inputs shared by the property tests, per variant name.
SAMPLE_PATHS = {
    "common": [
        "", ".", "..", "/", "//", "a", "a/b", "a/./b/../c", "../../x", "/a/b/../../..",
        "a//b/", "/a/./b/", "a/../..", "./a", "x/y/z/..",
    ],
    "windows": [
        "", ".", "C:", "C:\\", "C:Users", "C:\\Users\\..\\Admin", "c:/a/b",
        "\\\\server\\share\\dir", "//server/share", "\\\\server", "\\a\\b",
        "a\\..\\C:x", "..\\..\\y", "D:..\\x", "C:\\a\\.\\b\\..",
    ],
}


@pytest.fixture
def common_variant():
    return COMMON


@pytest.fixture
def unix_variant():
    return UNIX


@pytest.fixture
def windows_variant():
    return WINDOWS


@pytest.fixture
def colon_variant():
    """Custom variant using ':' as its only separator."""
    return PathVariant(name="colon", separators=(":",))


@pytest.fixture
def drive_only_variant():
    """Backslash-only variant recognizing drives with '$' and no UNC heads."""
    return PathVariant(
        name="dollar",
        separators=("\\",),
        has_prefix=True,
        prefix_syntax=PrefixSyntax(drive_marker="$", unc=False),
        case_sensitive=False,
    )
