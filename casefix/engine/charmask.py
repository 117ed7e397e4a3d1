"""
Character-type masking.

Restricts a word conversion so that only characters of the allowed types
actually change.
"""

from typing import AbstractSet, List, Tuple

from ..options import CharType
from .features import is_accented


COMMON_SYMBOLS = frozenset("!@#$%^&*()_+-=[]{};':\"\\|,.<>/?")


def char_type(ch: str) -> CharType:
    """Classify a single character."""
    if "A" <= ch <= "Z":
        return CharType.CAPITALS
    if "a" <= ch <= "z":
        return CharType.LOWERCASE
    if "0" <= ch <= "9":
        return CharType.NUMBERS
    if is_accented(ch):
        return CharType.ACCENTED
    if ch in COMMON_SYMBOLS:
        return CharType.SYMBOLS
    return CharType.UNICODE


def _pair_characters(original: str, transformed: str) -> List[Tuple[str, str]]:
    """
    Pair each original character with the text it was converted to.

    Equal lengths pair by position. Otherwise a case mapping changed a
    length (``ß`` to ``SS``), so each character is matched against its own
    case forms at the current offset in ``transformed``.
    """
    if len(original) == len(transformed):
        return list(zip(original, transformed))

    pairs = []
    pos = 0
    for o_char in original:
        for form in (o_char, o_char.upper(), o_char.lower(), o_char.title()):
            if transformed.startswith(form, pos):
                pairs.append((o_char, form))
                pos += len(form)
                break
        else:
            pairs.append((o_char, o_char))
    return pairs


def mask_characters(original: str, transformed: str, allowed: AbstractSet[CharType]) -> str:
    """
    Keep a transformed character only if the original character's type is
    allowed; otherwise revert to the original character.

    A character only ever changes into its own converted form.
    """
    result = []
    for o_char, t_text in _pair_characters(original, transformed):
        if o_char == t_text or char_type(o_char) in allowed:
            result.append(t_text)
        else:
            result.append(o_char)
    return "".join(result)
