"""Tests for manifest line parsing."""

import pytest

from sumcheck.models.manifest import Algorithm
from sumcheck.verifier.parser import infer_algorithm, parse_line

SHA256_HEX = "a" * 64


class TestParseLine:
    """Tests for parse_line."""

    def test_gnu_text_mode(self):
        """Test two-space separated GNU line."""
        entry = parse_line(f"{SHA256_HEX}  file.txt\n", 1)

        assert entry.digest == SHA256_HEX
        assert entry.path == "file.txt"
        assert entry.line_number == 1
        assert entry.valid is True

    def test_gnu_binary_mode(self):
        """Test space-asterisk separated GNU line."""
        entry = parse_line(f"{SHA256_HEX} *image.iso", 3)

        assert entry.digest == SHA256_HEX
        assert entry.path == "image.iso"
        assert entry.line_number == 3

    def test_gnu_path_with_spaces(self):
        """Test that the path keeps embedded and leading spaces."""
        entry = parse_line(f"{SHA256_HEX}   my file  name.txt", 1)

        assert entry.digest == SHA256_HEX
        assert entry.path == " my file  name.txt"

    def test_bsd_format(self):
        """Test BSD tag line."""
        entry = parse_line(f"SHA256 (dir/foo.bin) = {SHA256_HEX}", 2)

        assert entry.digest == SHA256_HEX
        assert entry.path == "dir/foo.bin"

    def test_bsd_path_with_parentheses(self):
        """Test BSD line whose path contains parentheses."""
        entry = parse_line(f"MD5 (a (copy).txt) = {'0' * 32}", 1)

        assert entry.path == "a (copy).txt"
        assert entry.digest == "0" * 32

    def test_crlf_terminator(self):
        """Test that a Windows line ending isn't part of the path."""
        entry = parse_line(f"{SHA256_HEX}  file.txt\r\n", 1)

        assert entry.path == "file.txt"

    @pytest.mark.parametrize(
        "line",
        [
            "",
            "not a checksum line",
            f"{SHA256_HEX} file.txt",  # single space
            f"{SHA256_HEX}\tfile.txt",
            "SHA256 (file.txt) =",
        ],
    )
    def test_unrecognised_lines(self, line: str):
        """Test lines matching neither format are invalid."""
        entry = parse_line(line, 5)

        assert entry.digest == ""
        assert entry.path == ""
        assert entry.valid is False

    def test_gnu_empty_path_is_invalid(self):
        """Test digest with separator but no path."""
        entry = parse_line(f"{SHA256_HEX}  ", 1)

        assert entry.digest == SHA256_HEX
        assert entry.path == ""
        assert entry.valid is False


class TestInferAlgorithm:
    """Tests for algorithm inference from digest length."""

    @pytest.mark.parametrize(
        "length,expected",
        [
            (32, Algorithm.MD5),
            (40, Algorithm.SHA1),
            (64, Algorithm.SHA256),
            (96, Algorithm.SHA384),
            (128, Algorithm.SHA512),
        ],
    )
    def test_known_lengths(self, length: int, expected: Algorithm):
        """Test each supported digest length."""
        assert infer_algorithm("f" * length) == expected

    @pytest.mark.parametrize("length", [1, 7, 31, 56, 65])
    def test_unknown_lengths(self, length: int):
        """Test lengths with no matching algorithm."""
        assert infer_algorithm("f" * length) is None
