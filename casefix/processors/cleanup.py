"""
Text cleanup processors for Casefix.

This module provides blank and duplicate line removal, character removal,
underscore replacement and literal find-and-replace.
"""

import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..context import CasefixContext


def remove_blank_lines(ctx: 'CasefixContext') -> 'CasefixContext':
    """
    Removes empty lines and lines holding only whitespace.

    Args:
        ctx: CasefixContext object containing text

    Returns:
        Updated CasefixContext with blank lines removed
    """
    from ..logging import log_message

    original_text = ctx.text
    lines = ctx.text.split("\n")
    kept = [line for line in lines if line.strip()]
    ctx.text = "\n".join(kept)

    ctx.log_change('remove_blank_lines',
                   f"Removed {len(lines) - len(kept)} blank lines ({len(lines)} → {len(kept)} lines)",
                   len(original_text), len(ctx.text))

    log_message(f"Removed {len(lines) - len(kept)} blank lines.")
    return ctx


def remove_duplicate_lines(ctx: 'CasefixContext') -> 'CasefixContext':
    """
    Removes repeated lines, keeping the first occurrence of each.

    Args:
        ctx: CasefixContext object containing text

    Returns:
        Updated CasefixContext with duplicate lines removed
    """
    from ..logging import log_message

    original_text = ctx.text
    lines = ctx.text.split("\n")
    seen = set()
    unique = []
    for line in lines:
        if line not in seen:
            seen.add(line)
            unique.append(line)
    ctx.text = "\n".join(unique)

    removed = len(lines) - len(unique)
    ctx.log_change('remove_duplicate_lines',
                   f"Removed {removed} duplicate lines",
                   len(original_text), len(ctx.text))

    log_message(f"Removed {removed} duplicate lines.")
    return ctx


def remove_characters(ctx: 'CasefixContext') -> 'CasefixContext':
    """
    Deletes every character listed in ``ctx.chars_to_remove``.

    Args:
        ctx: CasefixContext object containing text and chars_to_remove

    Returns:
        Updated CasefixContext; unchanged when no characters are listed
    """
    from ..logging import log_message

    if not ctx.chars_to_remove:
        log_message("No characters to remove.", level="DEBUG")
        return ctx

    original_text = ctx.text
    pattern = re.compile("[" + re.escape(ctx.chars_to_remove) + "]")
    ctx.text = pattern.sub("", ctx.text)

    ctx.log_change('remove_characters',
                   f"Removed {len(original_text) - len(ctx.text)} characters",
                   len(original_text), len(ctx.text))

    log_message(f"Removed characters {ctx.chars_to_remove!r}.")
    return ctx


def remove_underscores(ctx: 'CasefixContext') -> 'CasefixContext':
    """Replaces every underscore with a space."""
    from ..logging import log_message

    count = ctx.text.count("_")
    ctx.text = ctx.text.replace("_", " ")
    ctx.log_change('remove_underscores', f"Replaced {count} underscores")

    log_message(f"Replaced {count} underscores.")
    return ctx


def find_replace(ctx: 'CasefixContext') -> 'CasefixContext':
    """
    Replaces every literal occurrence of ``ctx.find_text`` with ``ctx.replace_text``.

    Args:
        ctx: CasefixContext object containing text, find_text and replace_text

    Returns:
        Updated CasefixContext; unchanged when find_text is empty
    """
    from ..logging import log_message

    if not ctx.find_text:
        log_message("Find text is empty, nothing to replace.", level="DEBUG")
        return ctx

    original_text = ctx.text
    count = ctx.text.count(ctx.find_text)
    ctx.text = ctx.text.replace(ctx.find_text, ctx.replace_text)

    ctx.log_change('find_replace',
                   f"Replaced {count} occurrences of {ctx.find_text!r}",
                   len(original_text), len(ctx.text))

    log_message(f"Replaced {count} occurrences of {ctx.find_text!r}.")
    return ctx
