"""
Formatting removal processor for Casefix.

This module strips formatting from text according to the FormatOptions
flags, using BeautifulSoup to extract the text from HTML markup.
"""

import re
import unicodedata
from typing import TYPE_CHECKING

from bs4 import BeautifulSoup

if TYPE_CHECKING:
    from ..context import CasefixContext


def strip_html(text: str) -> str:
    """Return the text content of ``text`` with all markup removed."""
    return BeautifulSoup(text, 'html.parser').get_text()


def is_emoji(ch: str) -> bool:
    return unicodedata.category(ch) == 'So' or 0x1F000 <= ord(ch) <= 0x1FAFF


def is_punctuation(ch: str) -> bool:
    return unicodedata.category(ch)[0] in ('P', 'S')


def remove_formatting(ctx: 'CasefixContext') -> 'CasefixContext':
    """
    Applies the enabled FormatOptions in order.

    Args:
        ctx: CasefixContext object containing text and format_options

    Returns:
        Updated CasefixContext with formatting removed
    """
    # Import here to avoid circular imports
    from ..logging import log_message

    log_message("Starting formatting removal.")
    opts = ctx.format_options
    original_text = ctx.text
    text = ctx.text
    applied = []

    if opts.trim:
        text = text.strip()
        applied.append('trim')
    if opts.trim_lines:
        text = "\n".join(line.strip() for line in text.split("\n"))
        applied.append('trim_lines')
    if opts.remove_whitespace:
        text = re.sub(r"\s+", "", text)
        applied.append('remove_whitespace')
    if opts.strip_html:
        try:
            text = strip_html(text)
            applied.append('strip_html')
        except Exception as e:
            log_message(f"Error stripping HTML: {e}", level="ERROR")
    if opts.strip_extra_spaces:
        text = re.sub(r"\s{2,}", " ", text)
        applied.append('strip_extra_spaces')
    if opts.strip_empty_lines:
        text = "\n".join(line for line in text.split("\n") if line.strip())
        applied.append('strip_empty_lines')
    if opts.strip_tabs:
        text = text.replace("\t", "")
        applied.append('strip_tabs')
    if opts.remove_non_alphanumeric:
        text = "".join(ch for ch in text if ch.isalnum() or ch.isspace())
        applied.append('remove_non_alphanumeric')
    if opts.remove_emojis:
        text = "".join(ch for ch in text if not is_emoji(ch))
        applied.append('remove_emojis')
    if opts.remove_punctuation:
        text = "".join(ch for ch in text if not is_punctuation(ch))
        applied.append('remove_punctuation')

    ctx.text = text
    ctx.log_change('remove_formatting',
                   f"Applied {', '.join(applied) or 'no'} formatting rules",
                   len(original_text), len(ctx.text))

    log_message("Finished formatting removal.")
    return ctx
