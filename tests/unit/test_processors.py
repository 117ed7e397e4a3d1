"""
Unit tests for the text processors.
"""

import pytest

from casefix.context import CasefixContext, FormatOptions
from casefix.options import CaseStyle, ConversionOptions
from casefix.processors.cleanup import (
    find_replace,
    remove_blank_lines,
    remove_characters,
    remove_duplicate_lines,
    remove_underscores,
)
from casefix.processors.conversion import apply_case_conversion
from casefix.processors.formatting import is_emoji, is_punctuation, remove_formatting, strip_html
from casefix.processors.quickcase import QUICK_CASES, apply_quick_case


def _ctx(text, **kwargs):
    return CasefixContext(text=text, **kwargs)


class TestCleanup:

    def test_remove_blank_lines(self):
        ctx = remove_blank_lines(_ctx("a\n\n  \nb\n"))

        assert ctx.text == "a\nb"
        assert ctx.processing_log[0]['step'] == 'remove_blank_lines'

    def test_remove_duplicate_lines(self):
        assert remove_duplicate_lines(_ctx("a\nb\na\nc\nb")).text == "a\nb\nc"

    def test_remove_characters(self):
        assert remove_characters(_ctx("axbyc", chars_to_remove="xy")).text == "abc"

    def test_remove_regex_special_characters(self):
        assert remove_characters(_ctx("a]b-c^d", chars_to_remove="]-^")).text == "abcd"

    def test_remove_characters_nothing_listed(self):
        ctx = remove_characters(_ctx("abc"))

        assert ctx.text == "abc"
        assert ctx.processing_log == []

    def test_remove_underscores(self):
        assert remove_underscores(_ctx("snake_case_name")).text == "snake case name"

    def test_find_replace(self):
        ctx = find_replace(_ctx("a.b.c.d", find_text=".", replace_text="-"))

        assert ctx.text == "a-b-c-d"
        assert "3 occurrences" in ctx.changes_made[0]

    def test_find_replace_empty_find(self):
        assert find_replace(_ctx("abc", replace_text="x")).text == "abc"


class TestFormatting:

    def test_strip_html(self):
        assert strip_html("<p>Hello <b>world</b></p>") == "Hello world"

    def test_is_emoji(self):
        assert is_emoji("🙂") is True
        assert is_emoji("a") is False

    def test_is_punctuation(self):
        assert is_punctuation("!") is True
        assert is_punctuation("a") is False

    def test_no_options_is_no_op(self):
        assert remove_formatting(_ctx(" a\tb ")).text == " a\tb "

    @pytest.mark.parametrize("flag,text,expected", [
        ("trim", "  a b  ", "a b"),
        ("trim_lines", " a \n b ", "a\nb"),
        ("remove_whitespace", "a b\tc\nd", "abcd"),
        ("strip_html", "<i>x</i> y", "x y"),
        ("strip_extra_spaces", "a    b", "a b"),
        ("strip_empty_lines", "a\n\n \nb", "a\nb"),
        ("strip_tabs", "a\tb", "ab"),
        ("remove_non_alphanumeric", "a-b c!", "ab c"),
        ("remove_emojis", "hi 🙂", "hi "),
        ("remove_punctuation", "a, b!", "a b"),
    ])
    def test_each_option(self, flag, text, expected):
        ctx = _ctx(text, format_options=FormatOptions(**{flag: True}))

        assert remove_formatting(ctx).text == expected


class TestQuickCase:

    @pytest.mark.parametrize("mode,text,expected", [
        ("sentence", "hELLO WORLD. bYE now", "Hello world. Bye now"),
        ("lower", "HeLLo", "hello"),
        ("upper", "HeLLo", "HELLO"),
        ("capitalized", "hello wORLD", "Hello World"),
        ("alternating", "abcd", "aBcD"),
        ("title", "hello wORLD", "Hello World"),
        ("inverse", "Hello", "hELLO"),
    ])
    def test_modes(self, mode, text, expected):
        assert apply_quick_case(_ctx(text), mode).text == expected

    def test_all_modes_listed(self):
        assert set(QUICK_CASES) == {
            "sentence", "lower", "upper", "capitalized", "alternating", "title", "inverse",
        }

    def test_unknown_mode(self):
        ctx = apply_quick_case(_ctx("Hello"), "shouting")

        assert ctx.text == "Hello"
        assert ctx.processing_log == []


class TestCaseConversion:

    def test_no_style(self):
        ctx = apply_case_conversion(_ctx("hello"))

        assert ctx.text == "hello"
        assert ctx.processing_log == []

    def test_converts_with_context_options(self):
        ctx = _ctx("the cat of the hat", options=ConversionOptions(style=CaseStyle.CHICAGO))

        ctx = apply_case_conversion(ctx)

        assert ctx.text == "The Cat of the Hat"
        assert ctx.processing_log[0]['step'] == 'case_conversion'
