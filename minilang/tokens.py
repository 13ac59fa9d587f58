"""Token kinds and the token record produced by the lexer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenType(str, Enum):
    """Kinds of tokens; each value is the text the kind is written as."""

    PLUS = "+"
    MINUS = "-"
    MUL = "*"
    DIV = "/"
    BANG = "!"
    LBRACKET = "["
    RBRACKET = "]"
    LPAREN = "("
    RPAREN = ")"
    LCURLY = "{"
    RCURLY = "}"
    SEMICOLON = ";"
    COMMA = ","
    GT = ">"
    LT = "<"
    GTE = ">="
    LTE = "<="
    ASSIGN = "="
    EQUAL = "=="
    NOT_EQUAL = "!="

    FUN = "fun"
    NIL = "nil"
    IF = "if"
    ELSE = "else"
    FOR = "for"
    WHILE = "while"
    RETURN = "return"
    AND = "and"
    OR = "or"
    TRUE = "true"
    FALSE = "false"
    VAR = "var"

    TYPE_STRING = "string"
    TYPE_INT = "int"
    TYPE_BOOL = "bool"
    TYPE_FLOAT = "float"
    TYPE_BYTE = "byte"

    NUMBER = "NUMBER"
    IDENTIFIER = "IDENTIFIER"
    STRING = "STRING"
    COMMENT = "COMMENT"

    EOF = "EOF"
    ERR = "ERR"

    def __str__(self) -> str:
        return self.value


_KEYWORDS: dict[str, TokenType] = {
    kind.value: kind
    for kind in (
        TokenType.TYPE_STRING,
        TokenType.TYPE_INT,
        TokenType.TYPE_BOOL,
        TokenType.TYPE_BYTE,
        TokenType.TYPE_FLOAT,
        TokenType.FUN,
        TokenType.NIL,
        TokenType.IF,
        TokenType.ELSE,
        TokenType.FOR,
        TokenType.WHILE,
        TokenType.RETURN,
        TokenType.AND,
        TokenType.OR,
        TokenType.TRUE,
        TokenType.FALSE,
        TokenType.VAR,
    )
}


@dataclass(frozen=True)
class Token:
    """A lexical token with its position in the source."""

    type: TokenType
    value: str = ""
    line: int = 0
    col: int = 0
    filename: str = ""

    def __str__(self) -> str:
        return f"|Type: {self.type} Value: '{self.value}' Position: {self.line}:{self.col}|"


def lookup_ident(ident: str) -> TokenType:
    """Return the keyword kind for ``ident``, or IDENTIFIER if it is not a keyword."""
    return _KEYWORDS.get(ident, TokenType.IDENTIFIER)