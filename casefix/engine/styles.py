"""
Case style transformer.

Each CaseStyle has exactly one handler in STYLE_HANDLERS. The professional
title styles share one handler driven by a per-style TitleRule.
"""

from typing import Callable, Dict, FrozenSet, NamedTuple, Optional

from ..options import CaseStyle


BASE_MINOR_WORDS = frozenset({
    "a", "an", "the", "and", "but", "or", "for", "nor",
    "at", "by", "in", "of", "on", "to", "up", "as",
})


class WordContext(NamedTuple):
    is_first_word: bool = False
    is_last_word: bool = False
    is_first_in_sentence: bool = False
    stop_words: FrozenSet[str] = frozenset()


class TitleRule(NamedTuple):
    """
    minor_words: style-specific additions to BASE_MINOR_WORDS.
    capitalize_from: words at least this long are capitalized even if
    minor (None = minor words are always lowercased).
    """
    minor_words: FrozenSet[str]
    capitalize_from: Optional[int]


TITLE_RULES: Dict[CaseStyle, TitleRule] = {
    CaseStyle.AP: TitleRule(frozenset(), 4),
    CaseStyle.APA: TitleRule(frozenset({"via", "vs"}), 4),
    CaseStyle.CHICAGO: TitleRule(frozenset({"via", "vs"}), None),
    CaseStyle.MLA: TitleRule(frozenset({
        "via", "vs", "yet", "so", "from", "into", "onto", "upon", "with",
        "about", "over", "under", "between", "through", "after", "before",
    }), None),
    CaseStyle.BLUEBOOK: TitleRule(frozenset({
        "via", "vs", "from", "into", "onto", "upon", "with", "over",
    }), None),
    CaseStyle.AMA: TitleRule(frozenset({"via", "vs"}), 4),
}


def capitalize(word: str) -> str:
    """Uppercase the first character and lowercase the rest."""
    return word[:1].upper() + word[1:].lower()


def title_case_word(word: str, style: CaseStyle, is_first: bool, is_last: bool,
                    stop_words: FrozenSet[str] = frozenset()) -> str:
    """
    Title-case one word under ``style``.

    Hyphenated compounds are handled segment by segment; the first/last
    guarantee applies to the first and last segment respectively.
    """
    if "-" in word:
        segments = word.split("-")
        last = len(segments) - 1
        return "-".join(
            _title_case_segment(seg, style, is_first and i == 0, is_last and i == last, stop_words)
            for i, seg in enumerate(segments)
        )
    return _title_case_segment(word, style, is_first, is_last, stop_words)


def _title_case_segment(word: str, style: CaseStyle, is_first: bool, is_last: bool,
                        stop_words: FrozenSet[str]) -> str:
    lower = word.lower()
    if is_first or is_last:
        return capitalize(lower)

    rule = TITLE_RULES[style]
    if rule.capitalize_from is not None and len(lower) >= rule.capitalize_from:
        return capitalize(lower)
    key = lower.casefold()
    if key in BASE_MINOR_WORDS or key in rule.minor_words or key in stop_words:
        return lower
    return capitalize(lower)


def _upper(word: str, context: WordContext) -> str:
    return word.upper()


def _lower(word: str, context: WordContext) -> str:
    return word.lower()


def _sentence(word: str, context: WordContext) -> str:
    return capitalize(word) if context.is_first_in_sentence else word.lower()


def _title_handler(style: CaseStyle) -> Callable[[str, WordContext], str]:
    def handler(word: str, context: WordContext) -> str:
        return title_case_word(word, style, context.is_first_word,
                               context.is_last_word, context.stop_words)
    return handler


STYLE_HANDLERS: Dict[CaseStyle, Callable[[str, WordContext], str]] = {
    CaseStyle.UPPERCASE: _upper,
    CaseStyle.LOWERCASE: _lower,
    CaseStyle.SENTENCE: _sentence,
}
STYLE_HANDLERS.update({style: _title_handler(style) for style in TITLE_RULES})


def apply_style(word: str, style: Optional[CaseStyle], context: WordContext = WordContext()) -> str:
    """Apply ``style`` to a single word; no style leaves it unchanged."""
    if style is None:
        return word
    return STYLE_HANDLERS[style](word, context)
