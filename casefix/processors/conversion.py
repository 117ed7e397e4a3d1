"""
Case conversion processor for Casefix.

This module runs the rule-driven conversion engine over the context text
using the context's ConversionOptions.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..context import CasefixContext


def apply_case_conversion(ctx: 'CasefixContext') -> 'CasefixContext':
    """
    Convert the text with the configured style, scope and rules.

    Args:
        ctx: CasefixContext object containing text and options

    Returns:
        Updated CasefixContext with the converted text
    """
    # Import here to avoid circular imports
    from ..engine import convert_text
    from ..logging import log_message

    options = ctx.options
    if options.style is None:
        log_message("No case style selected, skipping conversion.", level="WARNING")
        return ctx

    log_message(f"Starting case conversion ({options.style.value}, scope: {options.scope.value}).")
    original_text = ctx.text
    ctx.text = convert_text(ctx.text, options)

    changed = sum(1 for a, b in zip(original_text, ctx.text) if a != b)
    changed += abs(len(original_text) - len(ctx.text))
    ctx.log_change('case_conversion',
                   f"Converted to {options.style.value}, {changed} characters changed",
                   len(original_text), len(ctx.text))

    log_message("Finished case conversion.")
    return ctx
