"""Tests for the command-line entry point."""

import pytest

from diacritic_remapper.__main__ import main

JOINER_FILE = (
    "# Test language\n"
    'diacritics_joinable_range = "az"\n'
    'left_joining_diacritics = "^"\n'
    "Hello = ab^c\n"
    "Plain = abc\n"
)

PLAIN_FILE = "Hello = Hello\n"


@pytest.fixture
def joiner_file(tmp_path):
    path = tmp_path / "Joiner.properties"
    path.write_text(JOINER_FILE, encoding="utf-8")
    return str(path)


@pytest.fixture
def plain_file(tmp_path):
    path = tmp_path / "English.properties"
    path.write_text(PLAIN_FILE, encoding="utf-8")
    return str(path)


class TestMain:
    def test_usage_without_input(self, capsys):
        assert main([]) == 0
        assert "Usage:" in capsys.readouterr().out

    def test_show_remapped_entries(self, joiner_file, capsys):
        assert main(["--input", joiner_file]) == 0
        out = capsys.readouterr().out
        assert "Original:  ab^c" in out
        assert "Remapped:  a<U+F8FF>c" in out
        assert "Original:  abc" not in out
        assert "Length 2 - example b^" in out
        assert "Next free code: U+F8FE" in out

    def test_verify(self, joiner_file, capsys):
        assert main(["--input", joiner_file, "--verify"]) == 0
        assert "Verified 2 entries, 0 mismatches." in capsys.readouterr().out

    def test_limit(self, joiner_file, capsys):
        assert main(["--input", joiner_file, "--verify", "--limit", "1"]) == 0
        assert "Verified 1 entries" in capsys.readouterr().out

    def test_benchmark(self, joiner_file, capsys):
        assert main(["--input", joiner_file, "--benchmark"]) == 0
        out = capsys.readouterr().out
        assert "Remap Benchmark (2 entries" in out
        assert "Placeholders in use: 1" in out

    def test_language_without_diacritics(self, plain_file, capsys):
        assert main(["--input", plain_file]) == 0
        out = capsys.readouterr().out
        assert "No diacritic setup" in out
        assert "No clusters needed placeholders." in out

    def test_missing_file(self, tmp_path, capsys):
        assert main(["--input", str(tmp_path / "nope.properties")]) == 1
        assert "Error: Translation file not found" in capsys.readouterr().out
