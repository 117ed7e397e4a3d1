"""
Scope selection for the conversion engine.

Splits the (masked) text into ordered segments, each either editable or
passed through verbatim, and parses the line-selection mini-language.
"""

import re
from typing import TYPE_CHECKING, List, NamedTuple, Optional

from ..options import Scope

if TYPE_CHECKING:
    from ..options import ConversionOptions
    from .protector import MaskedText


START_MARKER = "$$$START$$$"
END_MARKER = "$$$END$$$"

IDENTIFIER_PATTERN = re.compile(
    f"({re.escape(START_MARKER)})(.*?)({re.escape(END_MARKER)})", re.DOTALL
)
LINE_NUMBER = re.compile(r"^\d+$")
LINE_RANGE = re.compile(r"^(\S+?)\s*-\s*(\S+)$")


class ScopeSegment(NamedTuple):
    """A ``[start, end)`` slice of the text and whether it may be converted."""
    start: int
    end: int
    editable: bool


class LineSelection(NamedTuple):
    """Result of parsing a line selection: an error message or the indices."""
    error: Optional[str]
    lines: List[int]


def select_scope(masked: 'MaskedText', options: 'ConversionOptions') -> List[ScopeSegment]:
    """
    Split the text into editable and verbatim segments.

    For the identifiers scope, a missing marker or ``$$$START$$$`` after
    ``$$$END$$$`` leaves the whole text verbatim. Markers inside protected
    regions are not seen.
    """
    length = len(masked.text)
    if options.scope == Scope.IDENTIFIERS:
        return _identifier_segments(masked.view(), length)
    if options.scope == Scope.LINES:
        return _line_segments(masked.text, options)
    return [ScopeSegment(0, length, True)]


def _identifier_segments(view: str, length: int) -> List[ScopeSegment]:
    start_index = view.find(START_MARKER)
    end_index = view.find(END_MARKER)
    if start_index == -1 or end_index == -1 or start_index > end_index:
        return [ScopeSegment(0, length, False)]

    segments: List[ScopeSegment] = []
    pos = 0
    for match in IDENTIFIER_PATTERN.finditer(view):
        # Markers and everything outside the pairs pass through unchanged
        segments.append(ScopeSegment(pos, match.start(2), False))
        segments.append(ScopeSegment(match.start(2), match.end(2), True))
        pos = match.end(2)
    segments.append(ScopeSegment(pos, length, False))
    return [s for s in segments if s.end > s.start]


def _line_segments(text: str, options: 'ConversionOptions') -> List[ScopeSegment]:
    segments: List[ScopeSegment] = []
    pos = 0
    for index, line in enumerate(text.split("\n")):
        end = pos + len(line)
        segments.append(ScopeSegment(pos, end, _line_eligible(index, line, options)))
        if end < len(text):
            segments.append(ScopeSegment(end, end + 1, False))
        pos = end + 1
    return [s for s in segments if s.end > s.start]


def _line_eligible(index: int, line: str, options: 'ConversionOptions') -> bool:
    if options.selected_lines is not None and index not in options.selected_lines:
        return False
    if options.line_prefix and not line.startswith(options.line_prefix):
        return False
    if options.line_keyword and options.line_keyword not in line:
        return False
    return True


def count_lines(text: str) -> int:
    return len(text.split("\n"))


def parse_line_selection(selection_text: Optional[str], total_lines: int) -> LineSelection:
    """
    Parse a selection such as ``"1,3-4"`` into sorted zero-based indices.

    Line numbers are 1-based. Every problem is returned as an error message
    rather than raised.
    """
    if selection_text is None or not selection_text.strip():
        return LineSelection("Line selection is empty.", [])

    parts = [part.strip() for part in selection_text.split(",") if part.strip()]
    if not parts:
        return LineSelection("Line selection contains no line numbers.", [])

    selected = set()
    for part in parts:
        if LINE_NUMBER.match(part):
            number = int(part)
            if number < 1:
                return LineSelection(f"Line numbers must be positive: '{part}'.", [])
            if number > total_lines:
                return LineSelection(
                    f"Line {number} is beyond the last line ({total_lines}).", [])
            selected.add(number - 1)
            continue

        range_match = LINE_RANGE.match(part)
        if range_match:
            first, last = range_match.groups()
            if not (LINE_NUMBER.match(first) and LINE_NUMBER.match(last)):
                return LineSelection(f"Invalid range: '{part}'.", [])
            start, end = int(first), int(last)
            if end < start:
                return LineSelection(f"Invalid range: '{part}' ends before it starts.", [])
            if start < 1:
                return LineSelection(f"Line numbers must be positive: '{part}'.", [])
            if end > total_lines:
                return LineSelection(
                    f"Range '{part}' goes beyond the last line ({total_lines}).", [])
            selected.update(range(start - 1, end))
            continue

        return LineSelection(f"Unrecognized line selection: '{part}'.", [])

    return LineSelection(None, sorted(selected))
