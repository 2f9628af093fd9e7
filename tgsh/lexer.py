"""Lexer for the POSIX shell language."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterator, Optional

RESERVED_WORDS = (
    "!", "{", "}", "case", "do", "done", "elif", "else", "esac", "fi", "for", "if", "in",
    "then", "until", "while",
)


class TokenKind(enum.Enum):
    NEWLINE = enum.auto()
    SEMI = enum.auto()
    AMP = enum.auto()
    PIPE = enum.auto()
    BACKTICK = enum.auto()
    EQUAL = enum.auto()
    BACKSLASH = enum.auto()
    SINGLEQUOTE = enum.auto()
    DOUBLEQUOTE = enum.auto()
    LESS = enum.auto()
    GREAT = enum.auto()

    LPAREN = enum.auto()
    RPAREN = enum.auto()
    LBRACE = enum.auto()
    RBRACE = enum.auto()
    BANG = enum.auto()

    AND_IF = enum.auto()
    OR_IF = enum.auto()
    DSEMI = enum.auto()

    DLESS = enum.auto()
    DGREAT = enum.auto()
    LESSAND = enum.auto()
    GREATAND = enum.auto()
    LESSGREAT = enum.auto()
    DLESSDASH = enum.auto()
    CLOBBER = enum.auto()

    IF = enum.auto()
    THEN = enum.auto()
    ELSE = enum.auto()
    ELIF = enum.auto()
    FI = enum.auto()
    DO = enum.auto()
    DONE = enum.auto()

    CASE = enum.auto()
    ESAC = enum.auto()
    WHILE = enum.auto()
    UNTIL = enum.auto()
    FOR = enum.auto()
    IN = enum.auto()

    WORD = enum.auto()
    ASSIGNMENT_WORD = enum.auto()
    FNAME = enum.auto()
    NAME = enum.auto()
    IO_NUMBER = enum.auto()


@dataclass(frozen=True)
class Token:
    """A token; word-like kinds carry their text in value."""

    kind: TokenKind
    value: Optional[str] = None


Spanned = tuple[int, Token, int]


class LexError(ValueError):
    """An unrecognised character; start and end are character offsets."""

    def __init__(self, start: int, char: str, end: int) -> None:
        super().__init__(f"unrecognized character {char} in range {start}:{end}")
        self.start = start
        self.char = char
        self.end = end


_KEYWORDS = {
    "if": TokenKind.IF,
    "then": TokenKind.THEN,
    "else": TokenKind.ELSE,
    "elif": TokenKind.ELIF,
    "fi": TokenKind.FI,
    "do": TokenKind.DO,
    "done": TokenKind.DONE,
    "case": TokenKind.CASE,
    "esac": TokenKind.ESAC,
    "while": TokenKind.WHILE,
    "until": TokenKind.UNTIL,
    "for": TokenKind.FOR,
    "in": TokenKind.IN,
}

# Characters that may start a two-character operator: (alone, {next char: combined}).
_OPERATORS = {
    ";": (TokenKind.SEMI, {";": TokenKind.DSEMI}),
    "&": (TokenKind.AMP, {"&": TokenKind.AND_IF}),
    "|": (TokenKind.PIPE, {"|": TokenKind.OR_IF}),
    "<": (
        TokenKind.LESS,
        {"<": TokenKind.DLESS, "&": TokenKind.LESSAND, ">": TokenKind.LESSGREAT},
    ),
    ">": (
        TokenKind.GREAT,
        {">": TokenKind.DGREAT, "&": TokenKind.GREATAND, "|": TokenKind.CLOBBER},
    ),
}

_SINGLE = {
    "\n": TokenKind.NEWLINE,
    "`": TokenKind.BACKTICK,
    "=": TokenKind.EQUAL,
    "\\": TokenKind.BACKSLASH,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    "{": TokenKind.LBRACE,
    "}": TokenKind.RBRACE,
    "!": TokenKind.BANG,
}

_WORD_BREAKS = frozenset(";)(`!\\'\"><&|{}*")


def _is_whitespace(ch: str) -> bool:
    # str.isspace also accepts the information separators U+001C..U+001F
    return ch.isspace() and not "\x1c" <= ch <= "\x1f"


def _is_word_continue(ch: str) -> bool:
    return ch not in _WORD_BREAKS and not _is_whitespace(ch)


def _is_word_start(ch: str) -> bool:
    code = ord(ch)
    if code <= 0x1F or 0x7F <= code <= 0x9F:
        return False
    return _is_word_continue(ch)


class Lexer:
    """Iterator of (start, token, end) triples over a command line.

    An unrecognised character raises LexError; iteration may continue afterwards.
    """

    def __init__(self, text: str) -> None:
        self._input = text
        self._pos = 0

    @property
    def input(self) -> str:
        return self._input

    def _peek(self) -> Optional[str]:
        return self._input[self._pos] if self._pos < len(self._input) else None

    def _advance(self) -> Optional[tuple[int, str, int]]:
        ch = self._peek()
        if ch is None:
            return None
        start = self._pos
        self._pos += 1
        return start, ch, self._pos

    def _word(self, start: int) -> Spanned:
        while (ch := self._peek()) is not None and _is_word_continue(ch):
            self._pos += 1
        word = self._input[start:self._pos]
        kind = _KEYWORDS.get(word)
        token = Token(kind) if kind is not None else Token(TokenKind.WORD, word)
        return start, token, self._pos

    def _quoted(self, start: int, quote: str) -> Spanned:
        while (ch := self._peek()) is not None and ch != quote:
            self._pos += 1
        self._advance()
        return start, Token(TokenKind.WORD, self._input[start:self._pos]), self._pos

    def __iter__(self) -> Iterator[Spanned]:
        return self

    def __next__(self) -> Spanned:
        while (item := self._advance()) is not None:
            start, ch, end = item
            if ch in _SINGLE:
                return start, Token(_SINGLE[ch]), end
            if ch in _OPERATORS:
                alone, combined = _OPERATORS[ch]
                nxt = self._peek()
                if nxt is not None and nxt in combined:
                    self._advance()
                    return start, Token(combined[nxt]), self._pos
                return start, Token(alone), end
            if ch in ("'", '"'):
                return self._quoted(start, ch)
            if _is_word_start(ch):
                return self._word(start)
            if _is_whitespace(ch):
                continue
            raise LexError(start, ch, end)
        raise StopIteration