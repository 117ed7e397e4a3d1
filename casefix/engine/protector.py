"""
Structure protection for the conversion engine.

Configured regions (HTML tags, inline code, quotes, parenthetical, bracket
and brace groups) are recorded as index ranges in an arena. The converter
tokenizes only the unprotected chunks, and each region is re-emitted verbatim
from the arena, so no marker text is ever inserted into the document.
"""

import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterator, List, NamedTuple, Optional, Sequence, Tuple, Union

if TYPE_CHECKING:
    from ..options import ConversionOptions


FILLER = "\x00"

# (option flag, region kind, pattern), matched in this order
PROTECTION_PASSES: Tuple[Tuple[str, str, "re.Pattern"], ...] = (
    ("ignore_html", "html", re.compile(r"<[^>]*>")),
    ("ignore_markdown", "markdown", re.compile(r"`[^`]*`")),
    # an apostrophe inside a word (don't, it's) never opens or closes a quote
    ("ignore_quotes", "quotes", re.compile(r"\"[^\"]*\"|(?<![^\W_])'[^']*'(?![^\W_])")),
    ("ignore_parentheses", "parentheses", re.compile(r"\([^)]*\)")),
    ("ignore_brackets", "brackets", re.compile(r"\[[^\]]*\]")),
    ("ignore_braces", "braces", re.compile(r"\{[^}]*\}")),
)


@dataclass(frozen=True)
class ProtectedRegion:
    start: int
    end: int
    text: str
    kind: str


class Chunk(NamedTuple):
    """A slice of text; ``region`` is set when the slice is protected."""
    text: str
    region: Optional[int] = None
    whole: bool = False

    @property
    def protected(self) -> bool:
        return self.region is not None


@dataclass
class MaskedText:
    """Original text plus the ordered, non-overlapping protected regions."""
    text: str
    regions: List[ProtectedRegion] = field(default_factory=list)

    def view(self) -> str:
        """The text with every protected character replaced by a filler."""
        if not self.regions:
            return self.text
        parts = []
        pos = 0
        for region in self.regions:
            parts.append(self.text[pos:region.start])
            parts.append(FILLER * (region.end - region.start))
            pos = region.end
        parts.append(self.text[pos:])
        return "".join(parts)

    def is_protected(self, index: int) -> bool:
        return any(r.start <= index < r.end for r in self.regions)

    def chunks(self, start: int, end: int) -> Iterator[Chunk]:
        """Yield the chunks covering ``[start, end)``, clipping regions at the edges."""
        pos = start
        for index, region in enumerate(self.regions):
            if region.end <= pos or region.start >= end:
                continue
            if region.start > pos:
                yield Chunk(self.text[pos:region.start])
            clipped_end = min(region.end, end)
            whole = region.start >= start and region.end <= end
            yield Chunk(self.text[max(region.start, pos):clipped_end], index, whole)
            pos = clipped_end
        if pos < end:
            yield Chunk(self.text[pos:end])

    def pieces(self, start: int, end: int) -> List[Union[str, int]]:
        """``[start, end)`` as literal strings and whole-region indices, for ``unmask``."""
        return [c.region if c.whole else c.text for c in self.chunks(start, end)]


def mask(text: str, options: 'ConversionOptions') -> MaskedText:
    """
    Record the regions selected by the ``ignore_*`` options.

    Each pass matches against a view where earlier regions are filled out, so
    a match either avoids them or encloses them whole; enclosed regions are
    absorbed into the new one. Unterminated groups simply do not match.
    """
    masked = MaskedText(text)
    for flag, kind, pattern in PROTECTION_PASSES:
        if not getattr(options, flag):
            continue
        spans = [(m.start(), m.end()) for m in pattern.finditer(masked.view())]
        if spans:
            masked.regions = _merge(masked.regions, spans, text, kind)
    return masked


def _merge(regions: List[ProtectedRegion], spans: List[Tuple[int, int]],
           text: str, kind: str) -> List[ProtectedRegion]:
    """Add new spans, dropping existing regions they enclose."""
    kept = [r for r in regions
            if not any(start <= r.start and r.end <= end for start, end in spans)]
    kept.extend(ProtectedRegion(start, end, text[start:end], kind) for start, end in spans)
    kept.sort(key=lambda r: r.start)
    return kept


def unmask(masked: MaskedText, pieces: Sequence[Union[str, int]]) -> str:
    """
    Reassemble converted output.

    ``pieces`` holds converted strings and region indices; each index is
    replaced by that region's original text. An unknown index is emitted as
    the literal marker ``⟦n⟧`` rather than raising.
    """
    out = []
    for piece in pieces:
        if isinstance(piece, int):
            if 0 <= piece < len(masked.regions):
                out.append(masked.regions[piece].text)
            else:
                out.append(f"⟦{piece}⟧")
        else:
            out.append(piece)
    return "".join(out)
