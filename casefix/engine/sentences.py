"""
Sentence segmentation over a token sequence.
"""

import re
from typing import List, NamedTuple, Optional

from .tokenizer import SEPARATOR, Token


TERMINATOR = re.compile(r"[.!?]")


class SentenceRange(NamedTuple):
    """Inclusive token index range of one sentence."""
    start: int
    end: int


def segment(tokens: List[Token]) -> List[SentenceRange]:
    """
    Partition ``tokens`` into sentences.

    A sentence ends at any separator token containing ``.``, ``!`` or ``?``.
    Tokens after the last terminator form a final sentence, so text without
    terminators is a single sentence.
    """
    ranges: List[SentenceRange] = []
    start = 0
    for i, token in enumerate(tokens):
        if token.kind == SEPARATOR and TERMINATOR.search(token.text):
            ranges.append(SentenceRange(start, i))
            start = i + 1
    if start < len(tokens):
        ranges.append(SentenceRange(start, len(tokens) - 1))
    return ranges


def sentence_index_map(tokens: List[Token], ranges: List[SentenceRange]) -> List[Optional[int]]:
    """Map each token index to the index of the sentence that holds it."""
    index: List[Optional[int]] = [None] * len(tokens)
    for n, (start, end) in enumerate(ranges):
        for i in range(start, end + 1):
            index[i] = n
    return index


def first_words(tokens: List[Token], ranges: List[SentenceRange]) -> List[Optional[int]]:
    """Token index of the first word in each sentence (None if it has none)."""
    firsts: List[Optional[int]] = []
    for start, end in ranges:
        firsts.append(next((i for i in range(start, end + 1) if tokens[i].is_word), None))
    return firsts


def word_sentences(tokens: List[Token], ranges: List[SentenceRange]) -> List[SentenceRange]:
    """The sentences holding at least one word, e.g. without a leading ``...``."""
    return [r for r in ranges if any(tokens[i].is_word for i in range(r.start, r.end + 1))]
