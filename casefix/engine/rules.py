"""
Rule engine: decides per word token whether to skip or transform it.

Rules are evaluated in a fixed order and the first skip rule that matches
wins:

1. preserve capitalization
2. positional word skips
3. positional sentence skips
4. length bounds
5. pattern skips, then convert-only patterns
6. apply-filter allow-list
7. stop words (title styles)
8. style transform, then character-type masking
"""

from typing import TYPE_CHECKING, List, NamedTuple, Optional

from .charmask import mask_characters
from .features import FeatureSet, classify
from .sentences import first_words, segment, sentence_index_map, word_sentences
from .styles import WordContext, apply_style
from .tokenizer import WORD, Token

if TYPE_CHECKING:
    from ..options import ConversionOptions


class WordPosition(NamedTuple):
    """Where a word sits within its scope segment."""
    word_index: int
    total_words: int
    sentence_index: Optional[int] = None
    total_sentences: int = 0
    is_first_in_sentence: bool = False

    @property
    def is_first_word(self) -> bool:
        return self.word_index == 0

    @property
    def is_last_word(self) -> bool:
        return self.word_index == self.total_words - 1


def skip_reason(word: str, position: WordPosition, features: FeatureSet,
                options: 'ConversionOptions') -> Optional[str]:
    """Return the name of the first skip rule matching ``word``, or None."""
    if options.preserve_capitalization and features.has_internal_capitalization:
        return "preserve_capitalization"

    index, total = position.word_index, position.total_words
    if options.skip_first_word and index == 0:
        return "skip_first_word"
    if options.skip_last_word and index == total - 1:
        return "skip_last_word"
    if options.skip_first_n_words and index < options.skip_first_n_words:
        return "skip_first_n_words"
    if options.skip_last_n_words and index >= total - options.skip_last_n_words:
        return "skip_last_n_words"

    sentence = position.sentence_index
    if sentence is not None:
        last_sentence = position.total_sentences - 1
        if options.skip_first_sentence and sentence == 0:
            return "skip_first_sentence"
        if options.skip_last_sentence and sentence == last_sentence:
            return "skip_last_sentence"
        if options.skip_first_n_sentences and sentence < options.skip_first_n_sentences:
            return "skip_first_n_sentences"
        if options.skip_last_n_sentences and sentence >= position.total_sentences - options.skip_last_n_sentences:
            return "skip_last_n_sentences"

    if options.skip_shorter_than and len(word) < options.skip_shorter_than:
        return "skip_shorter_than"
    if options.skip_longer_than and len(word) > options.skip_longer_than:
        return "skip_longer_than"

    if options.skip_all_caps and features.is_all_caps:
        return "skip_all_caps"
    if options.skip_lowercase and features.is_lowercase:
        return "skip_lowercase"
    if options.skip_mixed_case and features.is_mixed_case:
        return "skip_mixed_case"
    if options.skip_numbers and features.has_number:
        return "skip_numbers"
    if options.skip_symbols and features.has_symbol:
        return "skip_symbols"

    if options.convert_only_all_caps and not features.is_all_caps:
        return "convert_only_all_caps"
    if options.convert_only_lowercase and not features.is_lowercase:
        return "convert_only_lowercase"
    if options.convert_only_mixed_case and not features.is_mixed_case:
        return "convert_only_mixed_case"
    if options.convert_only_numbers and not features.has_number:
        return "convert_only_numbers"

    if options.apply_filters_active and not (
        (options.apply_numbers and features.has_number)
        or (options.apply_symbols and features.has_symbol)
        or (options.apply_accented and features.has_accented)
        or (options.apply_emoji and features.has_emoji_or_non_latin)
    ):
        return "apply_filters"

    return None


def transform_word(word: str, position: WordPosition, options: 'ConversionOptions') -> str:
    """Return the converted form of ``word``, or ``word`` itself if a rule skips it."""
    if skip_reason(word, position, classify(word), options) is not None:
        return word

    style = options.style
    is_title = style is not None and style.is_title_style
    at_edge = position.is_first_word or position.is_last_word

    if is_title and word.casefold() in options.stop_words and not at_edge:
        converted = word.lower()
    else:
        context = WordContext(
            is_first_word=position.is_first_word,
            is_last_word=position.is_last_word,
            is_first_in_sentence=position.is_first_in_sentence,
            stop_words=options.stop_words,
        )
        converted = apply_style(word, style, context)

    if options.char_types:
        converted = mask_characters(word, converted, options.char_types)
    return converted


def apply_rules(tokens: List[Token], options: 'ConversionOptions') -> List[Token]:
    """
    Run the rules over one scope segment's tokens.

    Returns a new token list; separators and protected tokens are copied
    through unchanged.
    """
    ranges = word_sentences(tokens, segment(tokens))
    sentence_of = sentence_index_map(tokens, ranges)
    sentence_starts = set(i for i in first_words(tokens, ranges) if i is not None)
    word_indices = [i for i, token in enumerate(tokens) if token.is_word]
    total_words = len(word_indices)

    result = list(tokens)
    for word_index, token_index in enumerate(word_indices):
        token = tokens[token_index]
        position = WordPosition(
            word_index=word_index,
            total_words=total_words,
            sentence_index=sentence_of[token_index],
            total_sentences=len(ranges),
            is_first_in_sentence=token_index in sentence_starts,
        )
        converted = transform_word(token.text, position, options)
        if converted != token.text:
            result[token_index] = Token(converted, WORD)
    return result

