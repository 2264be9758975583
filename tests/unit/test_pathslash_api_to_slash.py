"""Unit tests for pathslash.api.to_slash and to_slash_lossy."""

from pathlib import PurePosixPath, PureWindowsPath

import pytest

from pathslash import EncodingError, from_slash, to_slash, to_slash_lossy


class TestToSlashPosix:
    """Encoding on the separator-identical flavour is text extraction."""

    @pytest.mark.parametrize(
        "native, expected",
        [
            ("/", "/"),
            ("foo", "foo"),
            ("/foo", "/foo"),
            ("foo/", "foo"),
            ("/foo/", "/foo"),
            ("../foo", "../foo"),
            ("foo/..", "foo/.."),
            ("foo/bar", "foo/bar"),
            ("foo//bar", "foo/bar"),
            ("foo/../bar", "foo/../bar"),
            ("foo/bar/piyo.txt", "foo/bar/piyo.txt"),
        ],
    )
    def test_to_slash(self, native, expected):
        assert to_slash(PurePosixPath(native), flavour="posix") == expected

    def test_empty_path_is_current_directory(self):
        assert to_slash(PurePosixPath(""), flavour="posix") == "."

    def test_accepts_plain_string(self):
        assert to_slash("foo/bar", flavour="posix") == "foo/bar"

    def test_backslash_is_an_ordinary_character(self):
        assert to_slash(PurePosixPath("foo\\bar"), flavour="posix") == "foo\\bar"

    def test_lossy_matches_strict_for_valid_text(self):
        path = PurePosixPath("/usr/local/lib")
        assert to_slash_lossy(path, flavour="posix") == to_slash(path, flavour="posix")

    def test_round_trip(self):
        for slash in ["/", "foo", "/foo/bar", "../foo", "foo/../bar", "a b/c.txt"]:
            assert to_slash(from_slash(slash, flavour="posix"), flavour="posix") == slash

    @pytest.mark.parametrize("slash", ["./foo", "foo/./bar", "foo/.", "foo//bar/"])
    def test_string_input_is_returned_verbatim(self, slash):
        assert to_slash(slash, flavour="posix") == slash
        assert to_slash_lossy(slash, flavour="posix") == slash

    @pytest.mark.parametrize(
        "slash, decoded",
        [("./foo", "foo"), ("foo/./bar", "foo/bar"), ("foo/.", "foo")],
    )
    def test_decoded_path_drops_current_directory_segments(self, slash, decoded):
        # PurePosixPath keeps no "." segment, so the decoded value renders without it
        path = from_slash(slash, flavour="posix")
        assert path == PurePosixPath(decoded)
        assert to_slash(path, flavour="posix") == decoded


class TestToSlashPosixNonUnicode:
    """Undecodable bytes arrive as surrogateescape code points."""

    def test_strict_raises_encoding_error(self):
        path = PurePosixPath("foo/\udcffbar")

        with pytest.raises(EncodingError, match="not valid Unicode") as exc_info:
            to_slash(path, flavour="posix")

        assert exc_info.value.position == 4
        assert exc_info.value.text == "foo/\udcffbar"

    def test_lossy_substitutes_replacement_character(self):
        path = PurePosixPath("foo/\udcffbar")
        assert to_slash_lossy(path, flavour="posix") == "foo/\ufffdbar"

    def test_lossy_one_replacement_per_malformed_unit(self):
        path = PurePosixPath("/\udce3\udc81/x")
        assert to_slash_lossy(path, flavour="posix") == "/\ufffd\ufffd/x"


class TestToSlashWindows:
    """Encoding on the separator-divergent flavour walks components."""

    @pytest.mark.parametrize(
        "native, expected",
        [
            ("\\", "/"),
            ("foo", "foo"),
            ("\\foo", "/foo"),
            ("foo\\", "foo"),
            ("\\foo\\", "/foo"),
            ("..\\foo", "../foo"),
            ("foo\\..", "foo/.."),
            ("foo\\bar", "foo/bar"),
            ("foo\\\\bar", "foo/bar"),
            ("foo\\..\\bar", "foo/../bar"),
            ("foo/bar", "foo/bar"),
            (r"foo\bar\piyo.txt", "foo/bar/piyo.txt"),
        ],
    )
    def test_to_slash(self, native, expected):
        assert to_slash(PureWindowsPath(native), flavour="windows") == expected

    def test_empty_path_is_current_directory(self):
        assert to_slash(PureWindowsPath(""), flavour="windows") == "."

    def test_drive_letter_has_no_doubled_separator(self):
        assert to_slash(PureWindowsPath(r"C:\foo\bar"), flavour="windows") == "C:/foo/bar"

    def test_drive_relative_path(self):
        assert to_slash(PureWindowsPath("C:foo"), flavour="windows") == "C:foo"

    def test_drive_root_keeps_its_separator(self):
        assert to_slash(PureWindowsPath("C:\\"), flavour="windows") == "C:/"

    def test_unc_prefix_keeps_backslashes(self):
        path = PureWindowsPath(r"\\server\share\foo\bar")
        assert to_slash(path, flavour="windows") == r"\\server\share/foo/bar"

    def test_prefix_cases(self, windows_prefix_cases):
        for native, slash in windows_prefix_cases:
            assert to_slash(PureWindowsPath(native), flavour="windows") == slash
            assert to_slash_lossy(PureWindowsPath(native), flavour="windows") == slash

    def test_prefix_round_trip(self, windows_prefix_cases):
        for native, slash in windows_prefix_cases:
            decoded = from_slash(slash, flavour="windows")
            assert decoded == PureWindowsPath(native)
            assert str(decoded) == str(PureWindowsPath(native))

    def test_forward_slash_input_string(self):
        assert to_slash("C:/foo/bar", flavour="windows") == "C:/foo/bar"


class TestToSlashWindowsNonUnicode:
    """Unpaired UTF-16 units arrive as lone surrogate code points."""

    def test_strict_raises_on_normal_segment(self):
        with pytest.raises(EncodingError):
            to_slash(PureWindowsPath("C:\\foo\\\ud800bar"), flavour="windows")

    def test_lossy_normal_segment(self):
        path = PureWindowsPath("C:\\foo\\\ud800bar")
        assert to_slash_lossy(path, flavour="windows") == "C:/foo/\ufffdbar"

    def test_strict_raises_on_prefix(self):
        with pytest.raises(EncodingError):
            to_slash(PureWindowsPath("\\\\ser\udc80ver\\share\\foo"), flavour="windows")

    def test_lossy_prefix(self):
        path = PureWindowsPath("\\\\ser\udc80ver\\share\\foo")
        assert to_slash_lossy(path, flavour="windows") == "\\\\ser\ufffdver\\share/foo"

    def test_lossy_continues_after_substitution(self):
        path = PureWindowsPath("\udc00a\\\udc00b\\c")
        assert to_slash_lossy(path, flavour="windows") == "\ufffda/\ufffdb/c"
