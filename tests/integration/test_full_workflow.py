"""
Integration tests for complete conversions through convert_text.
"""

import pytest

from casefix import (
    CaseStyle,
    CharType,
    ConversionOptions,
    Scope,
    analyze_text,
    convert_text,
    parse_line_selection,
)
from casefix.context import CasefixContext
from casefix.datafile import load_data_file
from casefix.engine.tokenizer import join_tokens, tokenize
from casefix.pipeline import run_processing

ALL_STYLES = list(CaseStyle)

TEXTS = [
    "",
    "   ",
    "the cat of the hat",
    "Hello, World! How are YOU today?",
    "naïve café 東京 🙂 end-to-end rock'n'roll",
    'He said "stop (now)" <b>then</b> `left`',
    "line one\n\nline three\r\n",
]


class TestInvariants:
    """Properties that hold for every input."""

    @pytest.mark.parametrize("text", TEXTS)
    def test_no_style_is_lossless(self, text):
        options = ConversionOptions(ignore_quotes=True, skip_first_word=True)

        assert convert_text(text, options) == text

    @pytest.mark.parametrize("text", TEXTS)
    def test_tokenize_rejoin(self, text):
        assert join_tokens(tokenize(text)) == text

    @pytest.mark.parametrize("style", ALL_STYLES)
    @pytest.mark.parametrize("text", TEXTS)
    def test_skipping_every_word_is_identity(self, style, text):
        options = ConversionOptions(style=style, skip_shorter_than=1000)

        assert convert_text(text, options) == text

    @pytest.mark.parametrize("style", ALL_STYLES)
    def test_empty_text(self, style):
        assert convert_text("", ConversionOptions(style=style)) == ""

    @pytest.mark.parametrize("style", [s for s in ALL_STYLES if s.is_title_style])
    def test_title_first_and_last_capitalized(self, style):
        assert convert_text("the cat of the hat", ConversionOptions(style=style)) == "The Cat of the Hat"

    @pytest.mark.parametrize("text", TEXTS)
    def test_length_preserved_for_ascii_styles(self, text):
        options = ConversionOptions(style=CaseStyle.CHICAGO, ignore_html=True, ignore_quotes=True)

        assert len(convert_text(text, options)) == len(text)


class TestScenarios:
    """Documented end-to-end conversions."""

    def test_chicago_title(self, chicago):
        assert convert_text("the cat of the hat", chicago) == "The Cat of the Hat"

    def test_identifier_scope(self, identifiers_upper):
        text = "A $$$START$$$ hello world $$$END$$$ B"

        assert convert_text(text, identifiers_upper) == "A $$$START$$$ HELLO WORLD $$$END$$$ B"

    def test_identifier_scope_missing_end(self, identifiers_upper):
        text = "A $$$START$$$ hello world B"

        assert convert_text(text, identifiers_upper) == text

    def test_identifier_pairs_are_separate_titles(self):
        options = ConversionOptions(style=CaseStyle.CHICAGO, scope=Scope.IDENTIFIERS)
        text = "x $$$START$$$of mice$$$END$$$ and $$$START$$$the end of$$$END$$$"

        assert convert_text(text, options) == (
            "x $$$START$$$Of Mice$$$END$$$ and $$$START$$$The End Of$$$END$$$"
        )

    def test_quotes_protected(self, upper):
        options = upper.updated(ignore_quotes=True)

        assert convert_text('Say "do not shout" now', options) == 'SAY "do not shout" NOW'

    def test_contractions_convert_with_quotes_ignored(self, upper):
        options = upper.updated(ignore_quotes=True)

        assert convert_text("don't say it's fine", options) == "DON'T SAY IT'S FINE"
        assert convert_text("it's 'quiet' now", options) == "IT'S 'quiet' NOW"

    def test_nested_protection(self, upper):
        options = upper.updated(ignore_quotes=True, ignore_parentheses=True)

        assert convert_text('a ("b") c', options) == 'A ("b") C'

    def test_html_tags_protected(self, upper):
        options = upper.updated(ignore_html=True)

        assert convert_text('<a href="x">link</a> text', options) == '<a href="x">LINK</a> TEXT'

    def test_unterminated_quote_not_protected(self, upper):
        options = upper.updated(ignore_quotes=True)

        assert convert_text('say "hello', options) == 'SAY "HELLO'

    def test_selected_lines(self, upper):
        selection = parse_line_selection("1,3-4", 5)
        assert selection == (None, [0, 2, 3])

        options = upper.updated(scope=Scope.LINES, selected_lines=selection.lines)
        text = "one\ntwo\nthree\nfour\nfive"

        assert convert_text(text, options) == "ONE\ntwo\nTHREE\nFOUR\nfive"

    def test_lines_are_separate_titles(self, chicago):
        options = chicago.updated(scope=Scope.LINES)

        assert convert_text("a tale of\nthe end", options) == "A Tale Of\nThe End"

    def test_quote_spanning_lines_protected_on_each(self, upper):
        options = upper.updated(scope=Scope.LINES, ignore_quotes=True)

        assert convert_text('a "b\nc" d', options) == 'A "b\nc" D'

    def test_char_type_masking(self, upper):
        options = upper.updated(char_types=[CharType.LOWERCASE])

        assert convert_text("café au lait", options) == "CAFé AU LAIT"

    def test_char_type_masking_with_length_changing_letter(self, upper):
        options = upper.updated(char_types=[CharType.LOWERCASE])

        assert convert_text("straße", options) == "STRAßE"

    def test_stop_words(self, chicago):
        options = chicago.updated(stop_words=["tale", "end"])

        assert convert_text("a tale of the end", options) == "A tale of the End"

    def test_preserve_capitalization(self, upper):
        options = upper.updated(preserve_capitalization=True)

        assert convert_text("my iPhone and eBay", options) == "MY iPhone AND eBay"

    def test_sentence_case_with_protected_opening(self):
        options = ConversionOptions(style=CaseStyle.SENTENCE, ignore_quotes=True)

        assert convert_text('"Quoted" WORDS HERE. NEXT one', options) == '"Quoted" Words here. Next one'

    def test_skip_first_sentence_after_leading_ellipsis(self, upper):
        options = upper.updated(skip_first_sentence=True)

        assert convert_text("...hello world. bye", options) == "...hello world. BYE"

    def test_skip_last_n_sentences(self, upper):
        options = upper.updated(skip_last_n_sentences=1)

        assert convert_text("one. two. three", options) == "ONE. TWO. three"

    def test_convert_only_lowercase(self, upper):
        options = upper.updated(convert_only_lowercase=True)

        assert convert_text("fix Only lowercase", options) == "FIX Only LOWERCASE"

    def test_mutual_exclusion(self, options):
        options = options.updated(skip_first_word=True).updated(skip_first_n_words=3)
        assert (options.skip_first_word, options.skip_first_n_words) == (False, 3)

        options = options.updated(skip_first_word=True)
        assert (options.skip_first_word, options.skip_first_n_words) == (True, 0)

    def test_analytics(self):
        result = analyze_text("Hello hello world.")

        assert (result.word_count, result.unique_word_count, result.sentence_count) == (3, 2, 1)
        assert result.top_words[0] == {"word": "hello", "count": 2}


class TestConfiguredRun:
    """Data file settings driving the tool pipeline."""

    def test_data_file_to_pipeline(self, data_file):
        data_file.write_text(
            "# STYLE\nAP\n# OPTIONS\nignore_quotes = true\n# STOP_WORDS\nover\n",
            encoding="utf-8",
        )
        ctx = load_data_file(CasefixContext(), data_file)
        ctx.text = 'the_fox  jumps over "the dog" today\n\nthe_fox  jumps over "the dog" today'

        ctx = run_processing(ctx, {
            'remove_blank_lines': True,
            'remove_duplicate_lines': True,
            'remove_underscores': True,
            'case_conversion': True,
        })

        assert ctx.text == 'The Fox  Jumps over "the dog" Today'
