from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


END_OF_LINE = '\n'


class TokenKind(Enum):
    CURSOR_RIGHT = '>'
    CURSOR_LEFT = '<'
    CELL_INCREMENT = '+'
    CELL_DECREMENT = '-'
    READ_INPUT = ','
    WRITE_OUTPUT = '.'
    LOOP_OPEN = '['
    LOOP_CLOSE = ']'
    END_OF_LINE = 'EOL'
    IGNORED = 'IGNORED'


OPERATORS = {k.value: k for k in TokenKind if len(k.value) == 1}


def classify(ch: str) -> TokenKind:
    return OPERATORS.get(ch, TokenKind.IGNORED)


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    index: int


@dataclass
class LineBuffer:
    """One line of source text plus the index of the next unconsumed character."""

    text: str = ''
    pos: int = 0

    def at_end(self) -> bool:
        return self.pos >= len(self.text) or self.text[self.pos] == END_OF_LINE


def next_token(buf: LineBuffer) -> Token:
    # skip comment characters; stop at the newline or the physical end of the buffer
    text = buf.text
    n = len(text)
    while buf.pos < n and text[buf.pos] != END_OF_LINE and classify(text[buf.pos]) is TokenKind.IGNORED:
        buf.pos += 1

    if buf.at_end():
        return Token(TokenKind.END_OF_LINE, buf.pos)

    index = buf.pos
    buf.pos += 1
    return Token(classify(text[index]), index)


def tokenize(text: str) -> list:
    """Operator tokens of ``text`` up to the first end-of-line, in order."""
    buf = LineBuffer(text)
    tokens = []
    while True:
        tok = next_token(buf)
        if tok.kind is TokenKind.END_OF_LINE:
            return tokens
        tokens.append(tok)
