"""Pratt parser that builds a syntax tree from the lexer's tokens."""

from __future__ import annotations

from enum import IntEnum
from typing import Callable, Optional

from .lexer import Lexer
from .nodes import (
    ArrayLiteral,
    BlockStatement,
    BoolLiteral,
    CallExpression,
    Expression,
    ExpressionStatement,
    FloatLiteral,
    FunctionStatement,
    IdentifierExpression,
    IfStatement,
    IndexExpression,
    InfixExpression,
    IntegerLiteral,
    PrefixExpression,
    Program,
    ReturnStatement,
    Statement,
    StringLiteral,
    VarStatement,
    WhileStatement,
)
from .tokens import Token, TokenType

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


class Precedence(IntEnum):
    """Binding strength of operators, weakest first."""

    LOWEST = 1
    ASSIGN = 2
    LOGICAL = 3
    LESSGREATER = 4
    SUM = 5
    PRODUCT = 6
    PREFIX = 7
    CALL = 8
    INDEX = 9


_PRECEDENCES: dict[TokenType, Precedence] = {
    TokenType.EQUAL: Precedence.ASSIGN,
    TokenType.NOT_EQUAL: Precedence.ASSIGN,
    TokenType.AND: Precedence.LOGICAL,
    TokenType.OR: Precedence.LOGICAL,
    TokenType.LT: Precedence.LESSGREATER,
    TokenType.GT: Precedence.LESSGREATER,
    TokenType.LTE: Precedence.LESSGREATER,
    TokenType.GTE: Precedence.LESSGREATER,
    TokenType.PLUS: Precedence.SUM,
    TokenType.MINUS: Precedence.SUM,
    TokenType.MUL: Precedence.PRODUCT,
    TokenType.DIV: Precedence.PRODUCT,
    TokenType.LPAREN: Precedence.CALL,
    TokenType.LBRACKET: Precedence.INDEX,
}

_INFIX_OPERATORS = (
    TokenType.PLUS,
    TokenType.MINUS,
    TokenType.MUL,
    TokenType.DIV,
    TokenType.EQUAL,
    TokenType.NOT_EQUAL,
    TokenType.GT,
    TokenType.LT,
    TokenType.GTE,
    TokenType.LTE,
    TokenType.OR,
    TokenType.AND,
)


class ParseError(Exception):
    """Raised when a program has syntax errors; ``errors`` lists them in order."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = list(errors)
        super().__init__("; ".join(self.errors))


def _parse_integer(text: str) -> int:
    """Parse an integer literal; a leading zero means octal. Limited to 64 bits."""
    if not text:
        raise ValueError("invalid syntax")
    try:
        if len(text) > 1 and text.startswith("0"):
            value = int(text[1:], 8)
        else:
            value = int(text, 10)
    except ValueError:
        raise ValueError("invalid syntax") from None
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ValueError("value out of range")
    return value


class Parser:
    """Parses the tokens of one lexer into a :class:`Program`."""

    def __init__(self, lexer: Lexer) -> None:
        self.lexer = lexer
        self.errors: list[str] = []
        tokens = lexer.tokenize()
        if not tokens or tokens[-1].type is not TokenType.EOF:
            last = tokens[-1] if tokens else Token(TokenType.EOF)
            tokens.append(Token(TokenType.EOF, "", last.line, last.col))
        self._tokens = tokens
        self._index = 0
        self._cur = Token(TokenType.EOF)
        self._peek = Token(TokenType.EOF)

        self._prefix_fns: dict[TokenType, Callable[[], Optional[Expression]]] = {
            TokenType.IDENTIFIER: self._parse_identifier,
            TokenType.NUMBER: self._parse_number,
            TokenType.STRING: self._parse_string,
            TokenType.TRUE: self._parse_bool,
            TokenType.FALSE: self._parse_bool,
            TokenType.BANG: self._parse_prefix,
            TokenType.MINUS: self._parse_prefix,
            TokenType.LBRACKET: self._parse_array,
            TokenType.LPAREN: self._parse_group,
        }
        self._infix_fns: dict[
            TokenType, Callable[[Optional[Expression]], Optional[Expression]]
        ] = {kind: self._parse_infix for kind in _INFIX_OPERATORS}
        self._infix_fns[TokenType.LBRACKET] = self._parse_index
        self._infix_fns[TokenType.LPAREN] = self._parse_call

        self._next_token()
        self._next_token()

    # token stream

    def _next_token(self) -> None:
        self._cur = self._peek
        if self._cur.type is TokenType.ERR:
            self.errors.append("received an error token")
        self._peek = self._tokens[min(self._index, len(self._tokens) - 1)]
        self._index += 1

    def _cur_is(self, kind: TokenType) -> bool:
        return self._cur.type is kind

    def _peek_is(self, kind: TokenType) -> bool:
        return self._peek.type is kind

    def _expect_peek(self, kind: TokenType) -> bool:
        if self._peek_is(kind):
            self._next_token()
            return True
        self.errors.append(
            f"expected next token to be {kind}, got {self._peek.type} instead"
        )
        return False

    def _peek_precedence(self) -> Precedence:
        return _PRECEDENCES.get(self._peek.type, Precedence.LOWEST)

    # statements

    def parse_program(self) -> Program:
        """Parse the whole input; raise :class:`ParseError` if anything was wrong."""
        program = Program()
        while not self._cur_is(TokenType.EOF):
            statement = self._parse_statement()
            if statement is not None:
                program.statements.append(statement)
            self._next_token()
        if self.errors:
            raise ParseError(self.errors)
        return program

    def _parse_statement(self) -> Optional[Statement]:
        kind = self._cur.type
        if kind is TokenType.VAR:
            return self._parse_var_statement()
        if kind is TokenType.IDENTIFIER and self._peek_is(TokenType.ASSIGN):
            return self._parse_var_statement()
        if kind is TokenType.WHILE:
            return self._parse_while_statement()
        if kind is TokenType.IF:
            return self._parse_if_statement()
        if kind is TokenType.RETURN:
            return self._parse_return_statement()
        if kind is TokenType.LCURLY:
            return self._parse_block_statement()
        if kind is TokenType.FUN:
            return self._parse_function_definition()
        return self._parse_expression_statement()

    def _parse_var_statement(self) -> Optional[VarStatement]:
        start = self._cur
        if self._cur_is(TokenType.VAR):
            self._next_token()
        if not self._cur_is(TokenType.IDENTIFIER):
            self.errors.append("expected identifier")
            return None
        statement = VarStatement(
            start, IdentifierExpression(self._cur, self._cur.value)
        )
        self._next_token()
        if self._cur_is(TokenType.ASSIGN):
            self._next_token()
            statement.value = self._parse_expression(Precedence.LOWEST)
            self._next_token()
            return statement
        if self._cur_is(TokenType.SEMICOLON):
            return statement
        self.errors.append("expected = or ; got neither")
        return None

    def _parse_while_statement(self) -> WhileStatement:
        start = self._cur
        self._next_token()
        condition = self._parse_expression(Precedence.LOWEST)
        body = self._parse_block_statement()
        return WhileStatement(start, condition, body)

    def _parse_if_statement(self) -> IfStatement:
        start = self._cur
        self._next_token()
        condition = self._parse_expression(Precedence.LOWEST)
        self._next_token()
        body = self._parse_block_statement()
        statement = IfStatement(start, condition, body)
        if self._peek_is(TokenType.ELSE):
            self._next_token()
            statement.alternative = self._parse_block_statement()
        return statement

    def _parse_return_statement(self) -> ReturnStatement:
        start = self._cur
        self._next_token()
        statement = ReturnStatement(start, self._parse_expression(Precedence.LOWEST))
        if self._peek_is(TokenType.SEMICOLON):
            self._next_token()
        return statement

    def _parse_function_definition(self) -> Optional[FunctionStatement]:
        start = self._cur
        self._next_token()
        if not self._cur_is(TokenType.IDENTIFIER):
            self.errors.append("function definition missing identifier")
            return None
        identifier = self._cur
        self._next_token()
        parameters = self._parse_parameter_list()
        self._next_token()
        if not self._cur_is(TokenType.LCURLY):
            self.errors.append(f"expected {{, got {self._cur.type}")
        body = self._parse_block_statement()
        return FunctionStatement(start, identifier, parameters or [], body)

    def _parse_parameter_list(self) -> Optional[list[IdentifierExpression]]:
        if self._peek_is(TokenType.RPAREN):
            self._next_token()
            return []
        self._next_token()
        parameters = [IdentifierExpression(self._cur, self._cur.value)]
        while self._peek_is(TokenType.COMMA):
            self._next_token()
            self._next_token()
            parameters.append(IdentifierExpression(self._cur, self._cur.value))
        if not self._expect_peek(TokenType.RPAREN):
            return None
        return parameters

    def _parse_block_statement(self) -> BlockStatement:
        block = BlockStatement(self._cur)
        self._next_token()
        while not self._cur_is(TokenType.RCURLY) and not self._cur_is(TokenType.EOF):
            statement = self._parse_statement()
            if statement is not None:
                block.statements.append(statement)
            self._next_token()
        return block

    def _parse_expression_statement(self) -> ExpressionStatement:
        statement = ExpressionStatement(
            self._cur, self._parse_expression(Precedence.LOWEST)
        )
        if self._peek_is(TokenType.SEMICOLON):
            self._next_token()
        return statement

    # expressions

    def _parse_expression(self, precedence: Precedence) -> Optional[Expression]:
        prefix = self._prefix_fns.get(self._cur.type)
        if prefix is None:
            self.errors.append(f"no prefix parse function for {self._cur.type} found")
            return None
        left = prefix()
        while (
            not self._peek_is(TokenType.SEMICOLON)
            and precedence < self._peek_precedence()
        ):
            infix = self._infix_fns.get(self._peek.type)
            if infix is None:
                return left
            self._next_token()
            left = infix(left)
        return left

    def _parse_infix(self, left: Optional[Expression]) -> Expression:
        expression = InfixExpression(self._cur, left, self._cur.type.value)
        precedence = _PRECEDENCES.get(self._cur.type, Precedence.LOWEST)
        self._next_token()
        expression.right = self._parse_expression(precedence)
        return expression

    def _parse_prefix(self) -> Expression:
        expression = PrefixExpression(self._cur, self._cur.type.value)
        self._next_token()
        expression.right = self._parse_expression(Precedence.PREFIX)
        return expression

    def _parse_number(self) -> Optional[Expression]:
        text = self._cur.value
        if "." in text:
            try:
                return FloatLiteral(self._cur, float(text))
            except ValueError:
                pass
        try:
            return IntegerLiteral(self._cur, _parse_integer(text))
        except ValueError as exc:
            self.errors.append(
                f'could not parse "{text}" as integer, float or byte, {exc}'
            )
            return None

    def _parse_bool(self) -> Expression:
        return BoolLiteral(self._cur, self._cur.value == "true")

    def _parse_string(self) -> Expression:
        return StringLiteral(self._cur, self._cur.value)

    def _parse_identifier(self) -> Expression:
        return IdentifierExpression(self._cur, self._cur.value)

    def _parse_group(self) -> Optional[Expression]:
        self._next_token()
        expression = self._parse_expression(Precedence.LOWEST)
        if not self._expect_peek(TokenType.RPAREN):
            return None
        return expression

    def _parse_array(self) -> Expression:
        array = ArrayLiteral(self._cur)
        if self._peek_is(TokenType.RBRACKET):
            self._next_token()
            return array
        self._next_token()
        array.values.append(self._parse_expression(Precedence.LOWEST))
        while self._peek_is(TokenType.COMMA):
            self._next_token()
            self._next_token()
            array.values.append(self._parse_expression(Precedence.LOWEST))
        self._expect_peek(TokenType.RBRACKET)
        return array

    def _parse_index(self, left: Optional[Expression]) -> Expression:
        expression = IndexExpression(self._cur, left)
        self._next_token()
        expression.index = self._parse_expression(Precedence.LOWEST)
        self._expect_peek(TokenType.RBRACKET)
        return expression

    def _parse_call(self, left: Optional[Expression]) -> Optional[Expression]:
        if not isinstance(left, IdentifierExpression):
            self.errors.append("invalid function identifier")
            return None
        call = CallExpression(self._cur, left)
        if self._peek_is(TokenType.RPAREN):
            self._next_token()
            return call
        self._next_token()
        call.arguments.append(self._parse_expression(Precedence.LOWEST))
        while self._peek_is(TokenType.COMMA):
            self._next_token()
            self._next_token()
            call.arguments.append(self._parse_expression(Precedence.LOWEST))
        if not self._peek_is(TokenType.RPAREN):
            self.errors.append("expected )")
            return None
        self._next_token()
        return call


def parse(source: str) -> Program:
    """Parse ``source`` into a program, raising :class:`ParseError` on syntax errors."""
    return Parser(Lexer(source)).parse_program()