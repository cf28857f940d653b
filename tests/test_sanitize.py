"""
Tests for the sanitize convenience.

Exact outputs are not a stable contract; most tests check the guarantee that
the result is always a single component.
"""
from __future__ import annotations

import logging
import re

import pytest

from path_ratchet import SanitizerError, SingleComponentPathBuf
from path_ratchet import sanitize as sanitize_module
from path_ratchet.sanitize import FALLBACK_NAME, MAX_COMPONENT_BYTES, check_replacement, sanitize_component

NASTY_INPUTS = [
    "",
    " ",
    ".",
    "..",
    "...",
    "/",
    "\\",
    "C:",
    "C:\\Windows\\System32",
    "//server/share/x",
    "a/../b",
    "../../etc/shadow",
    "\x00",
    "nul.tar.gz",
    "name. . .",
    "é" * 300,
    'file<>:"|?*.txt',
]


class TestSanitizeComponent:
    """Test sanitize_component rewriting rules."""

    def test_separators_are_replaced(self):
        assert sanitize_component("../../etc/shadow", "posix").name == ".._.._etc_shadow"

    def test_reserved_characters_are_replaced(self):
        assert sanitize_component('file<>:"|?*.txt', "posix").name == "file_______.txt"

    def test_control_characters_are_replaced(self):
        assert sanitize_component("a\x00b\nc", "posix").name == "a_b_c"

    def test_dot_names_are_replaced(self):
        assert sanitize_component(".", "posix").name == "_"
        assert sanitize_component("..", "posix").name == "_"

    def test_empty_falls_back(self):
        assert sanitize_component("", "posix").name == FALLBACK_NAME
        assert sanitize_component("///", "posix", replacement="").name == FALLBACK_NAME

    def test_windows_reserved_names(self):
        for raw in ("CON", "con.txt", "LPT1", "Nul.tar.gz"):
            assert sanitize_component(raw, "posix").name == "_"
        assert sanitize_component("console", "posix").name == "console"

    def test_trailing_dots_and_spaces(self):
        assert sanitize_component("report. ", "posix").name == "report_"

    def test_custom_replacement(self):
        assert sanitize_component("a/b", "posix", replacement="").name == "ab"
        assert sanitize_component("a/b", "posix", replacement="+").name == "a+b"

    def test_long_names_are_truncated_to_bytes(self):
        assert len(sanitize_component("a" * 300, "posix").name) == MAX_COMPONENT_BYTES
        name = sanitize_component("é" * 200, "posix").name
        assert len(name.encode("utf-8")) <= MAX_COMPONENT_BYTES
        assert set(name) == {"é"}

    def test_replacements_never_push_past_the_byte_limit(self):
        name = sanitize_component("a" * 254 + ".", "posix", replacement="__").name
        assert len(name.encode("utf-8")) <= MAX_COMPONENT_BYTES
        assert name == "a" * 254 + "_"

    def test_truncation_drops_exposed_trailing_spaces(self):
        name = sanitize_component("a" * 254 + " x", "posix").name
        assert name == "a" * 254

    def test_truncation_does_not_expose_reserved_name(self):
        assert sanitize_component("con" + " " * 300 + "x", "windows").name == "_"

    def test_truncation_of_leading_dots_falls_back(self):
        assert sanitize_component("." * 300 + "x", "posix").name == FALLBACK_NAME

    def test_valid_name_is_unchanged(self):
        assert sanitize_component("report.pdf", "posix").name == "report.pdf"

    @pytest.mark.parametrize("platform", ["posix", "windows"])
    @pytest.mark.parametrize("raw", NASTY_INPUTS)
    def test_output_is_always_a_single_component(self, raw, platform):
        result = sanitize_component(raw, platform)
        assert isinstance(result, SingleComponentPathBuf)
        assert SingleComponentPathBuf.new(str(result), platform) is not None

    def test_logs_rewrites(self, caplog):
        caplog.set_level(logging.DEBUG, logger="path_ratchet.sanitize")
        sanitize_component("a/b", "posix")
        assert "Sanitized component 'a/b' -> 'a_b'" in caplog.text


class TestReplacementValidation:
    """Test that replacement text is itself checked."""

    @pytest.mark.parametrize("bad", ["/", "\\", ":", ".", " ", "x.", "\x00", "NUL", "com1", "Aux.txt", "x" * 300])
    def test_illegal_replacement_raises(self, bad):
        with pytest.raises(ValueError, match="Invalid replacement"):
            check_replacement(bad)
        with pytest.raises(ValueError, match="Invalid replacement"):
            sanitize_component("a/b", "posix", replacement=bad)

    def test_legal_replacements(self):
        for good in ("_", "-", "", "+x"):
            assert check_replacement(good) == good


class TestSanitizerBug:
    """Test that inconsistent sanitizer output is fatal."""

    def test_invalid_output_raises_sanitizer_error(self, monkeypatch):
        # Disable character replacement so the separator survives
        monkeypatch.setattr(sanitize_module, "_ILLEGAL", re.compile(r"(?!)"))
        with pytest.raises(SanitizerError, match="invalid component"):
            sanitize_component("a/b", "posix")


class TestReplacementBounds:
    """Test that the replacement cannot produce reserved or oversized names."""

    def test_reserved_replacement_is_rejected_for_reserved_input(self):
        with pytest.raises(ValueError, match="Invalid replacement"):
            sanitize_component("CON.txt", "windows", replacement="NUL")

    def test_oversized_replacement_is_rejected(self):
        with pytest.raises(ValueError, match="Invalid replacement"):
            sanitize_component("CON", "posix", replacement="x" * 300)

    def test_longest_replacement_is_accepted(self):
        replacement = "x" * MAX_COMPONENT_BYTES
        assert sanitize_component("CON", "posix", replacement=replacement).name == replacement
