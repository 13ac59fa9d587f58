"""Syntax tree nodes produced by the parser."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from .tokens import Token, TokenType


class Node(ABC):
    """Base of every syntax tree node."""

    token: Token

    def token_literal(self) -> str:
        """Text of the token the node starts with."""
        return self.token.value

    @abstractmethod
    def __str__(self) -> str:
        ...


class Statement(Node):
    """A node that stands on its own in a block or program."""


class Expression(Node):
    """A node that yields a value."""


@dataclass
class Program(Node):
    statements: list[Statement] = field(default_factory=list)

    def token_literal(self) -> str:
        return self.statements[0].token_literal() if self.statements else ""

    def __str__(self) -> str:
        return "".join(str(s) for s in self.statements)


@dataclass
class InfixExpression(Expression):
    token: Token
    left: Expression | None
    operator: str
    right: Expression | None = None

    def __str__(self) -> str:
        return f"({self.left} {self.operator} {self.right})"


@dataclass
class PrefixExpression(Expression):
    token: Token
    operator: str
    right: Expression | None = None

    def __str__(self) -> str:
        return f"({self.operator}{self.right})"


@dataclass
class IdentifierExpression(Expression):
    token: Token
    value: str

    def __str__(self) -> str:
        return self.value


@dataclass
class ExpressionStatement(Statement):
    token: Token
    expression: Expression | None = None

    def __str__(self) -> str:
        return f"{self.expression};" if self.expression is not None else ""


@dataclass
class FunctionStatement(Statement):
    token: Token
    identifier: Token
    parameters: list[IdentifierExpression] = field(default_factory=list)
    body: BlockStatement | None = None

    def token_literal(self) -> str:
        return self.identifier.value

    def __str__(self) -> str:
        params = ", ".join(str(p) for p in self.parameters)
        return f"func {self.identifier.value}({params}) {self.body}"


@dataclass
class IntegerLiteral(Expression):
    token: Token
    value: int

    def __str__(self) -> str:
        return self.token.value


@dataclass
class FloatLiteral(Expression):
    token: Token
    value: float

    def __str__(self) -> str:
        return self.token.value


@dataclass
class BoolLiteral(Expression):
    token: Token
    value: bool

    def token_literal(self) -> str:
        return "true" if self.value else "false"

    def __str__(self) -> str:
        return self.token_literal()


@dataclass
class StringLiteral(Expression):
    token: Token
    value: str

    def __str__(self) -> str:
        return self.token.value


@dataclass
class VarStatement(Statement):
    token: Token
    identifier: IdentifierExpression
    value: Expression | None = None

    def __str__(self) -> str:
        prefix = "" if self.token.type is TokenType.IDENTIFIER else f"{self.token.type} "
        assignment = f" = {self.value}" if self.value is not None else ""
        return f"{prefix}{self.identifier}{assignment};"


@dataclass
class BlockStatement(Statement):
    token: Token
    statements: list[Statement] = field(default_factory=list)

    def __str__(self) -> str:
        return "".join(f"\n\t{s}" for s in self.statements) + "\n"


@dataclass
class WhileStatement(Statement):
    token: Token
    condition: Expression | None
    body: BlockStatement

    def __str__(self) -> str:
        return f"{self.token.value}while ({self.condition}) {{{self.body}}}"


@dataclass
class IfStatement(Statement):
    token: Token
    condition: Expression | None
    body: BlockStatement
    alternative: BlockStatement | None = None

    def __str__(self) -> str:
        text = f"{self.token.value}({self.condition}){self.body}"
        if self.alternative is not None:
            text += f" else {self.alternative}"
        return text


@dataclass
class ReturnStatement(Statement):
    token: Token
    value: Expression | None = None

    def __str__(self) -> str:
        return f"{self.token.value}{self.value}"


@dataclass
class ArrayLiteral(Expression):
    token: Token
    values: list[Expression | None] = field(default_factory=list)

    def __str__(self) -> str:
        return "[" + " ".join(str(v) for v in self.values) + "]"


@dataclass
class IndexExpression(Expression):
    token: Token
    left: Expression | None
    index: Expression | None = None

    def __str__(self) -> str:
        return f"({self.left}[{self.index}])"


@dataclass
class CallExpression(Expression):
    token: Token
    function: Expression
    arguments: list[Expression | None] = field(default_factory=list)

    def __str__(self) -> str:
        args = ", ".join(str(a) for a in self.arguments)
        return f"({self.function}({args}))"