"""
Unit tests for sentence segmentation.
"""

from casefix.engine.sentences import SentenceRange, first_words, segment, sentence_index_map, word_sentences
from casefix.engine.tokenizer import PROTECTED, SEPARATOR, WORD, Token, tokenize


class TestSegment:
    """Tests for segment()."""

    def test_empty(self):
        assert segment([]) == []

    def test_terminators(self):
        tokens = tokenize("One. Two! Three")

        assert segment(tokens) == [SentenceRange(0, 1), SentenceRange(2, 3), SentenceRange(4, 4)]

    def test_no_terminator_is_one_sentence(self):
        tokens = tokenize("no end here")

        assert segment(tokens) == [SentenceRange(0, len(tokens) - 1)]

    def test_trailing_terminator_adds_no_empty_sentence(self):
        tokens = tokenize("Only one.")

        assert segment(tokens) == [SentenceRange(0, 1)]

    def test_protected_token_does_not_end_sentence(self):
        tokens = tokenize("say ") + [Token('"stop."', PROTECTED)] + tokenize(" now")

        assert len(segment(tokens)) == 1


def test_sentence_index_map():
    tokens = tokenize("a b. c")
    ranges = segment(tokens)

    assert sentence_index_map(tokens, ranges) == [0, 0, 0, 0, 1]


def test_first_words():
    tokens = [
        Token("Hi", WORD), Token(". ", SEPARATOR),
        Token('"x"', PROTECTED), Token(". ", SEPARATOR),
        Token("Bye", WORD),
    ]
    ranges = segment(tokens)

    # the middle sentence holds no word
    assert first_words(tokens, ranges) == [0, None, 4]


def test_word_sentences_drop_wordless_ranges():
    tokens = tokenize("...hello world. bye")
    ranges = segment(tokens)

    assert ranges[0] == SentenceRange(0, 0)
    assert word_sentences(tokens, ranges) == ranges[1:]
