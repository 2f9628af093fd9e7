"""Helpers of the POSIX command language."""

from __future__ import annotations

from typing import Iterator

from tgsh.lexer import LexError, Lexer, Spanned, TokenKind


def _tokens(lexer: Lexer) -> Iterator[Spanned]:
    while True:
        try:
            yield next(lexer)
        except StopIteration:
            return
        except LexError:
            continue


_CLOSERS = {TokenKind.RPAREN: TokenKind.LPAREN, TokenKind.RBRACE: TokenKind.LBRACE}


def needs_line_check(command: str) -> bool:
    """True if the line is unfinished: trailing backslash, open quote or open bracket."""
    if command.endswith("\\"):
        return True

    brackets: list[TokenKind] = []
    for _, token, _ in _tokens(Lexer(command)):
        kind = token.kind
        if kind in (TokenKind.LBRACE, TokenKind.LPAREN):
            brackets.append(kind)
        elif kind in _CLOSERS:
            if brackets:
                if brackets[-1] is _CLOSERS[kind]:
                    brackets.pop()
                else:
                    return False
        elif kind is TokenKind.WORD and token.value:
            word = token.value
            if word[0] in ("'", '"'):
                if len(word) == 1:
                    return True
                return word[-1] != word[0]

    return bool(brackets)