"""
Conversion options for Casefix.

This module defines the closed set of case styles, scopes and character
types, and the immutable ConversionOptions value the engine consumes.
Mutually exclusive options are resolved in one place: ``updated()``.
"""

import dataclasses
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, FrozenSet, Iterable, List, Mapping, NamedTuple, Optional, Tuple


MAX_STOP_WORDS = 5


class CaseStyle(Enum):
    """Case styles supported by the conversion engine."""
    AP = "AP"
    APA = "APA"
    CHICAGO = "Chicago"
    MLA = "MLA"
    BLUEBOOK = "BB"
    AMA = "AMA"
    UPPERCASE = "UPPERCASE"
    LOWERCASE = "lowercase"
    SENTENCE = "Sentence case"

    @property
    def is_title_style(self) -> bool:
        return self in TITLE_STYLES

    @classmethod
    def parse(cls, value: Any) -> Optional['CaseStyle']:
        """
        Parse a style from an enum member, value, name or alias.

        Returns None for an empty value (no style selected).

        Raises:
            ValueError: If the value names no known style.
        """
        if value is None or isinstance(value, cls):
            return value
        text = str(value).strip()
        if not text:
            return None
        for style in cls:
            if text in (style.value, style.name):
                return style
        alias = _STYLE_ALIASES.get(text.lower())
        if alias is not None:
            return alias
        raise ValueError(f"Unknown case style: {value!r}")


TITLE_STYLES = frozenset({
    CaseStyle.AP, CaseStyle.APA, CaseStyle.CHICAGO,
    CaseStyle.MLA, CaseStyle.BLUEBOOK, CaseStyle.AMA,
})

_STYLE_ALIASES = {
    "bluebook": CaseStyle.BLUEBOOK,
    "bb": CaseStyle.BLUEBOOK,
    "chicago": CaseStyle.CHICAGO,
    "upper": CaseStyle.UPPERCASE,
    "uppercase": CaseStyle.UPPERCASE,
    "lower": CaseStyle.LOWERCASE,
    "sentencecase": CaseStyle.SENTENCE,
    "sentence": CaseStyle.SENTENCE,
}


class Scope(Enum):
    """Which part of the text is eligible for conversion."""
    ENTIRE = "entire"
    IDENTIFIERS = "identifiers"
    LINES = "lines"

    @classmethod
    def parse(cls, value: Any) -> 'Scope':
        if isinstance(value, cls):
            return value
        text = str(value or "entire").strip().lower()
        for scope in cls:
            if text in (scope.value, scope.name.lower()):
                return scope
        raise ValueError(f"Unknown scope: {value!r}")


class CharType(Enum):
    """Character classes for restricting which characters may change."""
    CAPITALS = "capitals"
    LOWERCASE = "lowercase"
    NUMBERS = "numbers"
    ACCENTED = "accented"
    SYMBOLS = "symbols"
    UNICODE = "unicode"

    @classmethod
    def parse(cls, value: Any) -> 'CharType':
        if isinstance(value, cls):
            return value
        text = str(value).strip().lower()
        for char_type in cls:
            if text in (char_type.value, char_type.name.lower()):
                return char_type
        raise ValueError(f"Unknown character type: {value!r}")


# Setting the first field to a truthy value clears the second, and vice versa
EXCLUSIVE_PAIRS: Tuple[Tuple[str, str], ...] = (
    ("skip_first_word", "skip_first_n_words"),
    ("skip_last_word", "skip_last_n_words"),
    ("skip_first_sentence", "skip_first_n_sentences"),
    ("skip_last_sentence", "skip_last_n_sentences"),
    ("skip_all_caps", "convert_only_all_caps"),
    ("skip_lowercase", "convert_only_lowercase"),
    ("skip_mixed_case", "convert_only_mixed_case"),
    ("skip_numbers", "convert_only_numbers"),
)

_COUNTERPART: Dict[str, str] = {}
for _a, _b in EXCLUSIVE_PAIRS:
    _COUNTERPART[_a] = _b
    _COUNTERPART[_b] = _a

_CLEARED = {bool: False, int: 0}


@dataclass(frozen=True)
class ConversionOptions:
    """
    Immutable configuration for one conversion call.

    Use ``updated()`` to change fields; it resolves mutually exclusive
    options so the result is always valid.
    """
    style: Optional[CaseStyle] = None
    scope: Scope = Scope.ENTIRE

    # Lines scope: zero-based indices (None = every line), plus filters
    selected_lines: Optional[FrozenSet[int]] = None
    line_prefix: str = ""
    line_keyword: str = ""

    # Apply filters (allow-list)
    apply_numbers: bool = False
    apply_symbols: bool = False
    apply_accented: bool = False
    apply_emoji: bool = False

    # Positional skip rules
    skip_first_word: bool = False
    skip_last_word: bool = False
    skip_first_n_words: int = 0
    skip_last_n_words: int = 0
    skip_first_sentence: bool = False
    skip_last_sentence: bool = False
    skip_first_n_sentences: int = 0
    skip_last_n_sentences: int = 0

    # Length bounds (0 = disabled)
    skip_shorter_than: int = 0
    skip_longer_than: int = 0

    # Pattern skip rules
    skip_all_caps: bool = False
    skip_lowercase: bool = False
    skip_mixed_case: bool = False
    skip_numbers: bool = False
    skip_symbols: bool = False

    # Convert-only patterns
    convert_only_all_caps: bool = False
    convert_only_lowercase: bool = False
    convert_only_mixed_case: bool = False
    convert_only_numbers: bool = False

    # Structure protection
    ignore_quotes: bool = False
    ignore_parentheses: bool = False
    ignore_brackets: bool = False
    ignore_braces: bool = False
    ignore_html: bool = False
    ignore_markdown: bool = False

    preserve_capitalization: bool = False
    stop_words: FrozenSet[str] = field(default_factory=frozenset)
    char_types: FrozenSet[CharType] = field(default_factory=frozenset)

    def __post_init__(self):
        for f in dataclasses.fields(self):
            value = getattr(self, f.name)
            if isinstance(value, int) and not isinstance(value, bool) and value < 0:
                raise ValueError(f"{f.name} cannot be negative, got {value}")
        for first, second in EXCLUSIVE_PAIRS:
            if getattr(self, first) and getattr(self, second):
                raise ValueError(f"{first} and {second} are mutually exclusive")
        if self.selected_lines is not None and any(i < 0 for i in self.selected_lines):
            raise ValueError("selected_lines must hold zero-based, non-negative indices")

    @property
    def apply_filters_active(self) -> bool:
        return self.apply_numbers or self.apply_symbols or self.apply_accented or self.apply_emoji

    def updated(self, **changes: Any) -> 'ConversionOptions':
        """
        Return a copy with ``changes`` applied in keyword order.

        Setting an option to a truthy value clears its mutually exclusive
        counterpart, so the last one set wins.
        """
        values = {f.name: getattr(self, f.name) for f in dataclasses.fields(self)}
        for name, value in changes.items():
            if name not in values:
                raise ValueError(f"Unknown option: {name}")
            values[name] = _coerce(name, value)
            other = _COUNTERPART.get(name)
            if other and values[name]:
                values[other] = _CLEARED[type(values[other])]
        return ConversionOptions(**values)

    @classmethod
    def from_dict(cls, mapping: Mapping[str, Any]) -> 'ConversionOptions':
        """Build options from loose configuration values (strings, lists)."""
        return cls().updated(**dict(mapping))


def _coerce(name: str, value: Any) -> Any:
    """Normalize a loose configuration value for the named field."""
    if name == "style":
        return CaseStyle.parse(value)
    if name == "scope":
        return Scope.parse(value)
    if name == "stop_words":
        return frozenset(w.casefold() for w in (value or ()) if w)
    if name == "char_types":
        return frozenset(CharType.parse(v) for v in (value or ()))
    if name == "selected_lines":
        return None if value is None else frozenset(int(v) for v in value)
    if name in ("line_prefix", "line_keyword"):
        return "" if value is None else str(value)

    default = ConversionOptions.__dataclass_fields__[name].default
    if isinstance(default, bool):
        if isinstance(value, str):
            return value.strip().lower() in ("1", "true", "yes", "on")
        return bool(value)
    if isinstance(default, int):
        return int(value or 0)
    return value


class StopWordSelection(NamedTuple):
    """Result of parsing a stop-word list: an error message or the words."""
    error: Optional[str]
    words: List[str]


def parse_stop_words(raw: Optional[str], limit: Optional[int] = MAX_STOP_WORDS) -> StopWordSelection:
    """
    Parse a comma or whitespace separated stop-word list.

    Words are case-folded and de-duplicated in first-seen order. Exceeding
    ``limit`` is reported as an error instead of raising.
    """
    words: List[str] = []
    for part in re.split(r"[,\s]+", raw or ""):
        word = part.strip().casefold()
        if word and word not in words:
            words.append(word)

    if limit is not None and len(words) > limit:
        return StopWordSelection(f"At most {limit} stop words are allowed (got {len(words)}).", [])
    return StopWordSelection(None, words)


def option_names() -> Iterable[str]:
    """Names of all ConversionOptions fields."""
    return [f.name for f in dataclasses.fields(ConversionOptions)]
