"""
Tests for platform rules and component decomposition.
"""
from __future__ import annotations

from pathlib import PurePosixPath, PureWindowsPath

import pytest

from path_ratchet.platforms import Component, ComponentKind, Platform, components, to_pure_path


class TestPlatform:
    """Test Platform parsing and lookup."""

    def test_parse_none_is_native(self):
        assert Platform.parse(None) is Platform.native()

    def test_parse_names_and_aliases(self):
        assert Platform.parse("posix") is Platform.POSIX
        assert Platform.parse("Linux") is Platform.POSIX
        assert Platform.parse("WINDOWS") is Platform.WINDOWS
        assert Platform.parse(" nt ") is Platform.WINDOWS
        assert Platform.parse(Platform.WINDOWS) is Platform.WINDOWS

    def test_parse_unknown_raises(self):
        with pytest.raises(ValueError, match="Unknown platform"):
            Platform.parse("plan9")

    def test_of_and_path_class(self):
        assert Platform.of(PurePosixPath("a")) is Platform.POSIX
        assert Platform.of(PureWindowsPath("a")) is Platform.WINDOWS
        assert Platform.POSIX.path_class is PurePosixPath
        assert Platform.WINDOWS.path_class is PureWindowsPath


class TestToPurePath:
    """Test adapting path-like input to pure paths."""

    def test_matching_pure_path_is_not_copied(self):
        path = PurePosixPath("foo")
        assert to_pure_path(path, "posix") is path
        assert to_pure_path(path) is path

    def test_pure_path_keeps_its_rules_without_platform(self):
        path = PureWindowsPath("C:\\x")
        assert to_pure_path(path) is path

    def test_string_is_parsed_by_target(self):
        assert to_pure_path("a/b", "posix") == PurePosixPath("a/b")
        assert to_pure_path("a\\b", "windows") == PureWindowsPath("a", "b")

    def test_foreign_pure_path_is_reparsed(self):
        """A Windows path reparsed with POSIX rules keeps its backslashes as text."""
        result = to_pure_path(PureWindowsPath("a/b"), "posix")
        assert isinstance(result, PurePosixPath)
        assert result.parts == ("a\\b",)

    def test_bytes_input(self):
        assert to_pure_path(b"a/b", "posix") == PurePosixPath("a/b")

    def test_non_path_input_raises_type_error(self):
        with pytest.raises(TypeError):
            to_pure_path(42, "posix")  # type: ignore[arg-type]


class TestComponents:
    """Test component classification."""

    def test_posix_absolute(self):
        assert list(components(PurePosixPath("/etc/shadow"))) == [
            Component(ComponentKind.ROOT_DIR, "/"),
            Component(ComponentKind.NORMAL, "etc"),
            Component(ComponentKind.NORMAL, "shadow"),
        ]

    def test_posix_parent_and_current(self):
        assert [c.kind for c in components(PurePosixPath("./../a/."))] == [
            ComponentKind.PARENT_DIR,
            ComponentKind.NORMAL,
        ]

    def test_empty_path_has_no_components(self):
        assert list(components(PurePosixPath(""))) == []
        assert list(components(PurePosixPath("."))) == []

    def test_trailing_separator_is_ignored(self):
        assert list(components(PurePosixPath("foo/"))) == list(components(PurePosixPath("foo")))

    def test_windows_drive_and_root(self):
        assert list(components(PureWindowsPath("C:\\x"))) == [
            Component(ComponentKind.PREFIX, "C:"),
            Component(ComponentKind.ROOT_DIR, "\\"),
            Component(ComponentKind.NORMAL, "x"),
        ]

    def test_windows_drive_relative(self):
        assert [c.kind for c in components(PureWindowsPath("C:x"))] == [
            ComponentKind.PREFIX,
            ComponentKind.NORMAL,
        ]

    def test_windows_unc_share(self):
        kinds = [c.kind for c in components(PureWindowsPath("\\\\server\\share\\x"))]
        assert kinds == [ComponentKind.PREFIX, ComponentKind.ROOT_DIR, ComponentKind.NORMAL]

    def test_drive_letter_is_plain_text_under_posix(self):
        assert list(components(PurePosixPath("C:\\x"))) == [Component(ComponentKind.NORMAL, "C:\\x")]
