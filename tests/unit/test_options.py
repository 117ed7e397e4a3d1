"""
Unit tests for conversion options.
"""

import dataclasses

import pytest

from casefix.options import (
    EXCLUSIVE_PAIRS,
    MAX_STOP_WORDS,
    CaseStyle,
    CharType,
    ConversionOptions,
    Scope,
    option_names,
    parse_stop_words,
)


class TestCaseStyle:

    @pytest.mark.parametrize("value,expected", [
        ("AP", CaseStyle.AP),
        ("Chicago", CaseStyle.CHICAGO),
        ("CHICAGO", CaseStyle.CHICAGO),
        ("chicago", CaseStyle.CHICAGO),
        ("BB", CaseStyle.BLUEBOOK),
        ("Bluebook", CaseStyle.BLUEBOOK),
        ("Sentence case", CaseStyle.SENTENCE),
        ("upper", CaseStyle.UPPERCASE),
        (CaseStyle.MLA, CaseStyle.MLA),
    ])
    def test_parse(self, value, expected):
        assert CaseStyle.parse(value) is expected

    @pytest.mark.parametrize("value", [None, "", "  "])
    def test_parse_empty_is_none(self, value):
        assert CaseStyle.parse(value) is None

    def test_parse_unknown_raises(self):
        with pytest.raises(ValueError):
            CaseStyle.parse("Harvard")

    def test_title_styles(self):
        assert CaseStyle.AMA.is_title_style is True
        assert CaseStyle.SENTENCE.is_title_style is False
        assert CaseStyle.UPPERCASE.is_title_style is False


def test_scope_parse():
    assert Scope.parse("IDENTIFIERS") is Scope.IDENTIFIERS
    assert Scope.parse(None) is Scope.ENTIRE
    with pytest.raises(ValueError):
        Scope.parse("paragraphs")


def test_char_type_parse():
    assert CharType.parse("Capitals") is CharType.CAPITALS
    with pytest.raises(ValueError):
        CharType.parse("emoji")


class TestConversionOptions:
    """Tests for the immutable options value."""

    def test_defaults(self, options):
        assert options.style is None
        assert options.scope is Scope.ENTIRE
        assert options.selected_lines is None
        assert options.apply_filters_active is False

    def test_frozen(self, options):
        with pytest.raises(dataclasses.FrozenInstanceError):
            options.skip_first_word = True

    def test_negative_count_rejected(self):
        with pytest.raises(ValueError):
            ConversionOptions(skip_first_n_words=-1)

    @pytest.mark.parametrize("first,second", EXCLUSIVE_PAIRS)
    def test_conflicting_pair_rejected(self, first, second):
        values = {first: True, second: True}
        if second.endswith("_words") or second.endswith("_sentences"):
            values[second] = 2
        with pytest.raises(ValueError):
            ConversionOptions(**values)

    def test_updated_returns_new_value(self, options):
        changed = options.updated(skip_numbers=True)

        assert changed.skip_numbers is True
        assert options.skip_numbers is False

    def test_flag_then_count(self, options):
        """The last exclusive option set wins."""
        changed = options.updated(skip_first_word=True).updated(skip_first_n_words=3)

        assert changed.skip_first_word is False
        assert changed.skip_first_n_words == 3

    def test_count_then_flag(self, options):
        changed = options.updated(skip_first_n_words=3).updated(skip_first_word=True)

        assert changed.skip_first_word is True
        assert changed.skip_first_n_words == 0

    def test_one_call_applies_in_order(self, options):
        changed = options.updated(skip_all_caps=True, convert_only_all_caps=True)

        assert changed.skip_all_caps is False
        assert changed.convert_only_all_caps is True

    def test_clearing_keeps_counterpart(self):
        options = ConversionOptions(skip_last_n_sentences=2)

        assert options.updated(skip_last_sentence=False).skip_last_n_sentences == 2

    def test_updated_unknown_option(self, options):
        with pytest.raises(ValueError):
            options.updated(shout=True)

    def test_updated_negative_count(self, options):
        with pytest.raises(ValueError):
            options.updated(skip_longer_than=-5)

    def test_from_dict_coerces_strings(self):
        options = ConversionOptions.from_dict({
            "style": "chicago",
            "scope": "lines",
            "skip_first_word": "true",
            "ignore_quotes": "no",
            "skip_shorter_than": "3",
            "stop_words": ["The", "A", ""],
            "char_types": ["capitals", "numbers"],
            "selected_lines": [0, 2],
        })

        assert options.style is CaseStyle.CHICAGO
        assert options.scope is Scope.LINES
        assert options.skip_first_word is True
        assert options.ignore_quotes is False
        assert options.skip_shorter_than == 3
        assert options.stop_words == frozenset({"the", "a"})
        assert options.char_types == frozenset({CharType.CAPITALS, CharType.NUMBERS})
        assert options.selected_lines == frozenset({0, 2})

    def test_from_dict_bad_style(self):
        with pytest.raises(ValueError):
            ConversionOptions.from_dict({"style": "Harvard"})

    def test_option_names(self):
        names = option_names()

        assert "style" in names
        assert "preserve_capitalization" in names
        assert len(names) == len(dataclasses.fields(ConversionOptions))


class TestParseStopWords:

    def test_comma_and_space_separated(self):
        assert parse_stop_words("The, a  an") == (None, ["the", "a", "an"])

    def test_duplicates_removed(self):
        assert parse_stop_words("A a, A") == (None, ["a"])

    @pytest.mark.parametrize("raw", [None, "", " , "])
    def test_empty(self, raw):
        assert parse_stop_words(raw) == (None, [])

    def test_limit(self):
        raw = " ".join(f"w{i}" for i in range(MAX_STOP_WORDS + 1))
        selection = parse_stop_words(raw)

        assert selection.error is not None
        assert selection.words == []

    def test_at_limit_is_allowed(self):
        raw = " ".join(f"w{i}" for i in range(MAX_STOP_WORDS))

        assert parse_stop_words(raw).error is None

    def test_no_limit(self):
        raw = " ".join(f"w{i}" for i in range(50))

        assert len(parse_stop_words(raw, limit=None).words) == 50
