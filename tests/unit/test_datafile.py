"""
Unit tests for the .casefix.txt data file.
"""

from pathlib import Path

from casefix.context import CasefixContext
from casefix.datafile import (
    default_data_file_path,
    load_data_file,
    save_default_directory_to_data_file,
    save_stop_words,
)
from casefix.options import CaseStyle, CharType, ConversionOptions, Scope


def _write(path, text):
    path.write_text(text, encoding="utf-8")
    return path


class TestLoadDataFile:
    """Tests for load_data_file()."""

    def test_missing_file_gives_defaults(self, data_file):
        ctx = load_data_file(path=data_file)

        assert isinstance(ctx, CasefixContext)
        assert ctx.options == ConversionOptions()
        assert ctx.default_file_directory is None

    def test_full_file(self, data_file, tmp_path):
        _write(data_file, (
            "# STYLE\n"
            "Chicago\n"
            "\n"
            "# SCOPE\n"
            "lines\n"
            "\n"
            "# OPTIONS\n"
            "skip_first_word = true\n"
            "skip_shorter_than = 3\n"
            "line_prefix = #\n"
            "\n"
            "# STOP_WORDS\n"
            "Cat\n"
            "dog\n"
            "\n"
            "# CHAR_TYPES\n"
            "capitals\n"
            "\n"
            "# DEFAULT_FILE_DIR\n"
            f"{tmp_path}\n"
        ))

        ctx = load_data_file(path=data_file)

        assert ctx.options.style is CaseStyle.CHICAGO
        assert ctx.options.scope is Scope.LINES
        assert ctx.options.skip_first_word is True
        assert ctx.options.skip_shorter_than == 3
        assert ctx.options.line_prefix == "#"
        assert ctx.options.stop_words == frozenset({"cat", "dog"})
        assert ctx.options.char_types == frozenset({CharType.CAPITALS})
        assert ctx.default_file_directory == tmp_path

    def test_populates_given_context(self, data_file, ctx):
        _write(data_file, "# STYLE\nUPPERCASE\n")
        ctx.text = "keep me"

        result = load_data_file(ctx, data_file)

        assert result is ctx
        assert ctx.text == "keep me"
        assert ctx.options.style is CaseStyle.UPPERCASE

    def test_malformed_option_lines_skipped(self, data_file):
        _write(data_file, (
            "# OPTIONS\n"
            "no equals sign\n"
            "shout = true\n"
            "style = AP\n"
            "skip_numbers = yes\n"
        ))

        ctx = load_data_file(path=data_file)

        assert ctx.options.skip_numbers is True
        assert ctx.options.style is None

    def test_invalid_value_falls_back_to_defaults(self, data_file):
        _write(data_file, "# STYLE\nHarvard\n# OPTIONS\nskip_numbers = true\n")

        ctx = load_data_file(path=data_file)

        assert ctx.options == ConversionOptions()

    def test_invalid_directory_ignored(self, data_file, tmp_path):
        _write(data_file, f"# DEFAULT_FILE_DIR\n{tmp_path / 'missing'}\n")

        assert load_data_file(path=data_file).default_file_directory is None

    def test_text_outside_sections_ignored(self, data_file):
        _write(data_file, "stray line\n# STYLE\n# a comment\nAP\n")

        assert load_data_file(path=data_file).options.style is CaseStyle.AP


class TestSaveSections:
    """Tests for rewriting single sections."""

    def test_save_stop_words_creates_file(self, data_file):
        save_stop_words(["b", "a", "b"], data_file)

        assert data_file.read_text(encoding="utf-8") == "# STOP_WORDS\na\nb\n"
        assert load_data_file(path=data_file).options.stop_words == frozenset({"a", "b"})

    def test_save_stop_words_replaces_only_its_section(self, data_file):
        _write(data_file, "# STYLE\nAP\n\n# STOP_WORDS\nold\n\n# SCOPE\nlines\n")

        save_stop_words(["new"], data_file)

        ctx = load_data_file(path=data_file)
        assert ctx.options.stop_words == frozenset({"new"})
        assert ctx.options.style is CaseStyle.AP
        assert ctx.options.scope is Scope.LINES

    def test_save_stop_words_appends_missing_section(self, data_file):
        _write(data_file, "# STYLE\nAP")

        save_stop_words(["x"], data_file)

        lines = data_file.read_text(encoding="utf-8").splitlines()
        assert lines == ["# STYLE", "AP", "", "# STOP_WORDS", "x"]

    def test_save_default_directory(self, data_file, tmp_path):
        _write(data_file, "# DEFAULT_FILE_DIR\n/nowhere\n")

        save_default_directory_to_data_file(tmp_path, data_file)

        assert load_data_file(path=data_file).default_file_directory == tmp_path


def test_default_path_is_beside_package():
    path = Path(default_data_file_path())

    assert path.name == ".casefix.txt"
    assert (path.parent / "casefix").is_dir()
