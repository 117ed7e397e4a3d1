"""
Feature detection for word tokens.

The rule engine uses these features to evaluate skip, convert-only and
apply-filter rules, and preserve-capitalization.
"""

from dataclasses import dataclass

from .tokenizer import JOINERS


LATIN_EXTENDED_START = 0x00C0
LATIN_EXTENDED_END = 0x024F


@dataclass(frozen=True)
class FeatureSet:
    is_all_caps: bool
    is_lowercase: bool
    is_mixed_case: bool
    has_number: bool
    has_symbol: bool
    has_accented: bool
    has_emoji_or_non_latin: bool
    has_internal_capitalization: bool


def alnum_core(word: str) -> str:
    """Return ``word`` with its internal joiners removed."""
    return "".join(ch for ch in word if ch not in JOINERS)


def is_accented(ch: str) -> bool:
    return LATIN_EXTENDED_START <= ord(ch) <= LATIN_EXTENDED_END


def classify(word: str) -> FeatureSet:
    """
    Compute the features of a single word token.

    All-caps and lowercase require at least one cased letter, so a purely
    numeric word is neither.
    """
    core = alnum_core(word)
    has_upper = any(ch.isupper() for ch in core)
    has_lower = any(ch.islower() for ch in core)

    return FeatureSet(
        is_all_caps=has_upper and all(ch.isupper() or ch.isdigit() for ch in core),
        is_lowercase=has_lower and all(ch.islower() or ch.isdigit() for ch in core),
        is_mixed_case=has_upper and has_lower,
        has_number=any(ch.isdigit() for ch in core),
        has_symbol=any(ch in JOINERS or not ch.isalnum() for ch in word),
        has_accented=any(is_accented(ch) for ch in word),
        has_emoji_or_non_latin=any(ord(ch) > LATIN_EXTENDED_END for ch in word if ch not in JOINERS),
        has_internal_capitalization=any(ch.isupper() for ch in core[1:]),
    )
