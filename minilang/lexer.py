"""Byte-oriented scanner that turns source text into tokens."""

from __future__ import annotations

import string

from .tokens import Token, TokenType, lookup_ident

_DIGITS = frozenset(string.digits.encode("ascii"))
_ALNUM = frozenset((string.ascii_letters + string.digits).encode("ascii"))
_WHITESPACE = frozenset(b" \t\n\r")

_SINGLE = {
    ord("+"): TokenType.PLUS,
    ord("-"): TokenType.MINUS,
    ord("*"): TokenType.MUL,
    ord("["): TokenType.LBRACKET,
    ord("]"): TokenType.RBRACKET,
    ord("("): TokenType.LPAREN,
    ord(")"): TokenType.RPAREN,
    ord("{"): TokenType.LCURLY,
    ord("}"): TokenType.RCURLY,
    ord(";"): TokenType.SEMICOLON,
    ord(","): TokenType.COMMA,
}

# Characters that form a two-character operator when followed by '='.
_WITH_EQUALS = {
    ord(">"): (TokenType.GTE, TokenType.GT),
    ord("<"): (TokenType.LTE, TokenType.LT),
    ord("="): (TokenType.EQUAL, TokenType.ASSIGN),
    ord("!"): (TokenType.NOT_EQUAL, TokenType.BANG),
}

_NEWLINE = ord("\n")
_SLASH = ord("/")
_QUOTE = ord('"')
_DOT = ord(".")
_EQUALS = ord("=")


class _UnterminatedString(Exception):
    pass


class Lexer:
    """Scans UTF-8 encoded source one byte at a time.

    Bytes that do not start a known token become ERR tokens and set
    ``has_error``; an unterminated string becomes an ERR token whose value
    carries the position of the problem.
    """

    def __init__(self, source: str) -> None:
        self.source = source
        self._input = source.encode("utf-8")
        self.has_error = False
        self._reset()

    def _reset(self) -> None:
        self._line = 1
        self._col = 0
        self._position = 0
        self._ch = 0

    def tokenize(self) -> list[Token]:
        """Scan the whole source and return its tokens."""
        self._reset()
        self.has_error = False
        tokens: list[Token] = []
        while True:
            self._advance()
            if self._at_end():
                tokens.append(self._token(TokenType.EOF))
                break
            self._skip_whitespace()
            tokens.append(self._scan_token())
            if self._at_end():
                break
        return tokens

    def _scan_token(self) -> Token:
        ch = self._ch
        if ch in _SINGLE:
            return self._token(_SINGLE[ch])
        if ch in _WITH_EQUALS:
            with_equals, alone = _WITH_EQUALS[ch]
            return self._token(with_equals if self._match(_EQUALS) else alone)
        if ch == _SLASH:
            if self._match(_SLASH):
                self._skip_comment()
                return self._token(TokenType.COMMENT)
            return self._token(TokenType.DIV)
        if ch == _QUOTE:
            try:
                text = self._string()
            except _UnterminatedString as exc:
                return self._token(TokenType.ERR, str(exc))
            return self._token(TokenType.STRING, text)
        if ch == 0:
            return self._token(TokenType.EOF)
        if ch in _DIGITS:
            return self._number()
        if ch in _ALNUM:
            return self._identifier()
        self.has_error = True
        return self._token(TokenType.ERR)

    def _string(self) -> str:
        buffer = bytearray()
        while self._peek() != _QUOTE:
            if self._at_end():
                raise _UnterminatedString(f"{self._line}:{self._col}: unterminated string")
            self._advance()
            buffer.append(self._ch)
        self._advance()
        return buffer.decode("utf-8", errors="replace")

    def _number(self) -> Token:
        buffer = bytearray([self._ch])
        had_dot = False
        while self._peek() in _DIGITS or self._peek() == _DOT:
            if self._peek() == _DOT:
                if had_dot:
                    return self._token(TokenType.ERR)
                had_dot = True
            self._advance()
            buffer.append(self._ch)
        return self._token(TokenType.NUMBER, buffer.decode("ascii"))

    def _identifier(self) -> Token:
        buffer = bytearray([self._ch])
        while self._peek() in _ALNUM:
            self._advance()
            buffer.append(self._ch)
        word = buffer.decode("ascii")
        kind = lookup_ident(word)
        if kind is TokenType.IDENTIFIER:
            return self._token(kind, word)
        if kind is TokenType.TRUE:
            return self._token(kind, "true")
        if kind is TokenType.FALSE:
            return self._token(kind, "false")
        return self._token(kind)

    def _skip_comment(self) -> None:
        while not self._at_end() and self._peek() != _NEWLINE:
            self._advance()

    def _skip_whitespace(self) -> None:
        while self._ch in _WHITESPACE:
            self._advance()

    def _token(self, kind: TokenType, value: str = "") -> Token:
        return Token(kind, value, self._line, self._col)

    def _advance(self) -> None:
        self._ch = 0 if self._at_end() else self._input[self._position]
        self._position += 1
        self._col += 1
        if self._ch == _NEWLINE:
            self._line += 1
            self._col = 0

    def _peek(self) -> int:
        return 0 if self._at_end() else self._input[self._position]

    def _match(self, expected: int) -> bool:
        if self._at_end() or self._input[self._position] != expected:
            return False
        self._advance()
        return True

    def _at_end(self) -> bool:
        return self._position >= len(self._input)