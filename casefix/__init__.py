"""
Casefix - a rule-driven text case conversion tool.

This package provides the case conversion engine (styles, scopes, skip and
filter rules, structure protection), text cleanup tools, text analytics
and a PyQt5 desktop front-end.
"""

from .analytics import AnalyticsResult, analyze_text
from .engine import convert_text, parse_line_selection
from .options import CaseStyle, CharType, ConversionOptions, Scope, parse_stop_words

__version__ = "1.0.0"
__author__ = "Casefix Development Team"

__all__ = [
    "AnalyticsResult",
    "analyze_text",
    "convert_text",
    "parse_line_selection",
    "CaseStyle",
    "CharType",
    "ConversionOptions",
    "Scope",
    "parse_stop_words",
]
