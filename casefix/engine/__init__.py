"""
Text conversion engine for Casefix.

A pure function of (text, options): protect structures, select the scope,
tokenize, apply the rules and case style, and reassemble.
"""

from .converter import convert_text
from .features import FeatureSet, classify
from .protector import MaskedText, mask, unmask
from .scope import LineSelection, ScopeSegment, parse_line_selection, select_scope
from .sentences import SentenceRange, segment
from .styles import WordContext, apply_style
from .tokenizer import Token, tokenize

__all__ = [
    "convert_text",
    "FeatureSet",
    "classify",
    "MaskedText",
    "mask",
    "unmask",
    "LineSelection",
    "ScopeSegment",
    "parse_line_selection",
    "select_scope",
    "SentenceRange",
    "segment",
    "WordContext",
    "apply_style",
    "Token",
    "tokenize",
]
