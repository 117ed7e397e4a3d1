"""
Text analytics for Casefix.

Descriptive statistics for live display. Independent of the conversion
engine; its word and sentence detection are deliberately simpler.
"""

import re
from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Dict, List, NamedTuple


ANALYTICS_WORD = re.compile(r"\b[\w']+\b")
SENTENCE_SPLIT = re.compile(r"[.!?]+(?:\s+|$)")
LINE_SPLIT = re.compile(r"\r\n|\r|\n")
PARAGRAPH_SPLIT = re.compile(r"\n\s*\n")
REPORT_WORD = re.compile(r"[^\W_]+")

TOP_N = 3


@dataclass
class AnalyticsResult:
    char_count: int = 0
    word_count: int = 0
    sentence_count: int = 0
    line_count: int = 0
    paragraph_count: int = 0
    unique_word_count: int = 0
    top_words: List[Dict[str, Any]] = field(default_factory=list)
    top_letters: List[Dict[str, Any]] = field(default_factory=list)
    longest_words: List[Dict[str, Any]] = field(default_factory=list)
    sentence_structure: List[Dict[str, int]] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """The camelCase mapping shown by the UI."""
        return {
            "charCount": self.char_count,
            "wordCount": self.word_count,
            "sentenceCount": self.sentence_count,
            "lineCount": self.line_count,
            "paragraphCount": self.paragraph_count,
            "uniqueWordCount": self.unique_word_count,
            "topWords": self.top_words,
            "topLetters": self.top_letters,
            "longestWords": self.longest_words,
            "sentenceStructure": [
                {"count": s["count"], "wordCount": s["word_count"], "charCount": s["char_count"]}
                for s in self.sentence_structure
            ],
        }


def _top(counter: Counter, n: int = TOP_N) -> List[tuple]:
    # sorted() is stable, so ties keep first-encountered order
    return sorted(counter.items(), key=lambda item: item[1], reverse=True)[:n]


def analyze_text(text: str) -> AnalyticsResult:
    """Compute descriptive statistics for ``text``; empty text gives all zeros."""
    if not text:
        return AnalyticsResult()

    words = ANALYTICS_WORD.findall(text)
    sentences = [s for s in SENTENCE_SPLIT.split(text) if s.strip()]
    paragraphs = [p for p in PARAGRAPH_SPLIT.split(text) if p.strip()]

    word_freq = Counter(w.lower() for w in words)
    letter_freq = Counter(ch.lower() for ch in text if ch.isascii() and ch.isalpha())

    longest = sorted(word_freq, key=len, reverse=True)[:TOP_N]

    structure: Dict[tuple, int] = {}
    for sentence in sentences:
        key = (len(ANALYTICS_WORD.findall(sentence)), len(sentence))
        structure[key] = structure.get(key, 0) + 1
    structure_rows = sorted(
        ({"count": count, "word_count": wc, "char_count": cc} for (wc, cc), count in structure.items()),
        key=lambda row: row["count"],
        reverse=True,
    )

    return AnalyticsResult(
        char_count=len(text),
        word_count=len(words),
        sentence_count=len(sentences),
        line_count=len(LINE_SPLIT.split(text)),
        paragraph_count=len(paragraphs),
        unique_word_count=len(word_freq),
        top_words=[{"word": w, "count": c} for w, c in _top(word_freq)],
        top_letters=[{"letter": l, "count": c} for l, c in _top(letter_freq)],
        longest_words=[{"word": w, "length": len(w)} for w in longest],
        sentence_structure=structure_rows,
    )


class WordFrequency(NamedTuple):
    word: str
    count: int
    percent: float


def report_words(text: str) -> List[str]:
    """Case-folded words made of letters/numbers in any script."""
    return [w.lower() for w in REPORT_WORD.findall(text or "")]


def find_duplicate_words(text: str) -> List[str]:
    """Words that occur more than once, in first-seen order."""
    counts = Counter(report_words(text))
    return [word for word, count in counts.items() if count > 1]


def word_frequency(text: str) -> List[WordFrequency]:
    """Every word with its count and share of the total, most frequent first."""
    words = report_words(text)
    total = len(words)
    if not total:
        return []
    return [
        WordFrequency(word, count, count / total * 100)
        for word, count in sorted(Counter(words).items(), key=lambda item: item[1], reverse=True)
    ]


def format_word_frequency(entries: List[WordFrequency]) -> str:
    return "\n".join(f"• {e.word} ({e.count} / {e.percent:.2f}%)" for e in entries)
