"""
Quick case processors for Casefix.

This module provides the one-click whole-text case modes (sentence, lower,
upper, capitalized, alternating, title and inverse case). Unlike the
conversion engine they take no options.
"""

import re
from typing import Callable, Dict, TYPE_CHECKING

if TYPE_CHECKING:
    from ..context import CasefixContext


SENTENCE_START = re.compile(r"(^\s*[^\W\d_]|[.!?]\s*[^\W\d_])")
WORD_START = re.compile(r"\b[^\W\d_]")
TOKEN_START = re.compile(r"(^|\s)(\S)")


def to_sentence_case(text: str) -> str:
    return SENTENCE_START.sub(lambda m: m.group(0).upper(), text.lower())


def to_capitalized_case(text: str) -> str:
    return WORD_START.sub(lambda m: m.group(0).upper(), text.lower())


def to_alternating_case(text: str) -> str:
    return "".join(ch.lower() if i % 2 == 0 else ch.upper() for i, ch in enumerate(text))


def to_title_case(text: str) -> str:
    return TOKEN_START.sub(lambda m: m.group(0).upper(), text.lower())


def to_inverse_case(text: str) -> str:
    return "".join(ch.upper() if ch == ch.lower() else ch.lower() for ch in text)


QUICK_CASES: Dict[str, Callable[[str], str]] = {
    'sentence': to_sentence_case,
    'lower': str.lower,
    'upper': str.upper,
    'capitalized': to_capitalized_case,
    'alternating': to_alternating_case,
    'title': to_title_case,
    'inverse': to_inverse_case,
}


def apply_quick_case(ctx: 'CasefixContext', mode: str) -> 'CasefixContext':
    """
    Apply a quick case mode to the entire text.

    Args:
        ctx: CasefixContext object containing text
        mode: One of the QUICK_CASES keys

    Returns:
        Updated CasefixContext; unchanged if the mode is unknown
    """
    # Import here to avoid circular imports
    from ..logging import log_message

    converter = QUICK_CASES.get(mode)
    if converter is None:
        log_message(f"Unknown quick case mode '{mode}'", level="WARNING")
        return ctx

    original_text = ctx.text
    ctx.text = converter(ctx.text)

    ctx.log_change('quick_case',
                   f"Applied {mode} case to entire text",
                   len(original_text), len(ctx.text))

    log_message(f"Applied quick case '{mode}'.")
    return ctx
