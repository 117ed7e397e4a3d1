"""
Word tokenizer for the conversion engine.

Splits text into a lossless sequence of word and separator tokens. Words are
runs of letters/digits that may be joined by internal ``- _ ' ’ &``, so
``end-to-end`` and ``rock'n'roll`` stay whole.
"""

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional, Union

if TYPE_CHECKING:
    from .protector import MaskedText


WORD = "word"
SEPARATOR = "separator"
PROTECTED = "protected"

JOINERS = "-_'’&"
WORD_PATTERN = re.compile(r"[^\W_]+(?:[-_'’&][^\W_]+)*")


@dataclass
class Token:
    """A contiguous slice of text tagged as word, separator or protected."""
    text: str
    kind: str = SEPARATOR
    region: Optional[int] = None

    @property
    def is_word(self) -> bool:
        return self.kind == WORD


def tokenize(text: str) -> List[Token]:
    """
    Split ``text`` into word and separator tokens.

    Joining the token texts always reproduces ``text`` exactly.
    """
    tokens: List[Token] = []
    pos = 0
    for match in WORD_PATTERN.finditer(text):
        if match.start() > pos:
            tokens.append(Token(text[pos:match.start()], SEPARATOR))
        tokens.append(Token(match.group(0), WORD))
        pos = match.end()
    if pos < len(text):
        tokens.append(Token(text[pos:], SEPARATOR))
    return tokens


def tokenize_range(masked: 'MaskedText', start: int, end: int) -> List[Token]:
    """Tokenize ``masked.text[start:end]``, keeping protected regions opaque."""
    tokens: List[Token] = []
    for chunk in masked.chunks(start, end):
        if chunk.protected:
            tokens.append(Token(chunk.text, PROTECTED, chunk.region if chunk.whole else None))
        else:
            tokens.extend(tokenize(chunk.text))
    return tokens


def join_tokens(tokens: List[Token]) -> str:
    return "".join(token.text for token in tokens)


def token_pieces(tokens: List[Token]) -> List[Union[str, int]]:
    """Token texts, with whole protected regions replaced by their arena index."""
    return [token.region if token.region is not None else token.text for token in tokens]
