"""
Conversion entry point.

Pipeline: protect structures -> select scope -> per editable segment
(tokenize -> rules -> styles) -> reassemble.
"""

from typing import TYPE_CHECKING, List, Union

from ..logging import log_message
from .protector import mask, unmask
from .rules import apply_rules
from .scope import select_scope
from .tokenizer import token_pieces, tokenize_range

if TYPE_CHECKING:
    from ..options import ConversionOptions


def convert_text(text: str, options: 'ConversionOptions') -> str:
    """
    Convert ``text`` according to ``options``.

    Pure and deterministic: returns ``""`` for empty input and the input
    unchanged when no style is selected. Never raises for any text.
    """
    if not text:
        return ""
    if options.style is None:
        return text

    masked = mask(text, options)
    segments = select_scope(masked, options)
    log_message(
        f"convert_text: style={options.style.value} scope={options.scope.value} "
        f"regions={len(masked.regions)} segments={len(segments)}",
        level="DEBUG",
    )

    pieces: List[Union[str, int]] = []
    for segment in segments:
        if not segment.editable:
            pieces.extend(masked.pieces(segment.start, segment.end))
            continue
        tokens = tokenize_range(masked, segment.start, segment.end)
        pieces.extend(token_pieces(apply_rules(tokens, options)))

    return unmask(masked, pieces)
