"""Tree-walking evaluation of parsed programs."""

from __future__ import annotations

import math
from typing import Optional

from .environment import Environment
from .nodes import (
    ArrayLiteral,
    BlockStatement,
    BoolLiteral,
    CallExpression,
    ExpressionStatement,
    FloatLiteral,
    FunctionStatement,
    IdentifierExpression,
    IfStatement,
    IndexExpression,
    InfixExpression,
    IntegerLiteral,
    Node,
    PrefixExpression,
    Program,
    ReturnStatement,
    StringLiteral,
    VarStatement,
    WhileStatement,
)
from .objects import (
    FALSE,
    NULL,
    TRUE,
    Array,
    Boolean,
    Error,
    Float,
    Function,
    Integer,
    Object,
    ReturnValue,
    StdFunction,
    String,
)
from .stdfuncs import BUILTINS


class _Failure(Exception):
    """Carries an evaluation error up to the caller of :func:`evaluate`."""

    def __init__(self, error: Error) -> None:
        super().__init__(error.message)
        self.error = error


def _fail(message: str) -> _Failure:
    return _Failure(Error(message))


def evaluate(node: Optional[Node], env: Environment) -> Optional[Object]:
    """Evaluate ``node`` in ``env``.

    Errors in the program come back as :class:`Error` values; statements
    that produce nothing give None.
    """
    try:
        return _eval(node, env)
    except _Failure as failure:
        return failure.error


def _wrap(value: int) -> int:
    return (value + 2**63) % 2**64 - 2**63


def _boolean(value: bool) -> Boolean:
    return TRUE if value else FALSE


def _is_true(value: Optional[Object]) -> bool:
    return value is TRUE


def _value(node: Optional[Node], env: Environment) -> Object:
    result = _eval(node, env)
    if result is None:
        raise _fail("expression has no value")
    return result


def _eval(node: Optional[Node], env: Environment) -> Optional[Object]:
    match node:
        case None:
            return None
        case Program():
            return _eval_program(node, env)
        case IntegerLiteral():
            return Integer(node.value)
        case FloatLiteral():
            return Float(node.value)
        case ArrayLiteral():
            return Array([_value(v, env) for v in node.values])
        case BoolLiteral():
            return _boolean(node.value)
        case StringLiteral():
            return String(node.value)
        case IdentifierExpression():
            return _lookup(node.value, env)
        case InfixExpression():
            left = _value(node.left, env)
            right = _value(node.right, env)
            return _eval_infix(left, right, node.operator)
        case PrefixExpression():
            return _eval_prefix(node.operator, _value(node.right, env))
        case CallExpression():
            function = _value(node.function, env)
            arguments = [_value(a, env) for a in node.arguments]
            return _call(function, arguments)
        case IndexExpression():
            left = _value(node.left, env)
            index = _value(node.index, env)
            return _eval_index(left, index)
        case BlockStatement():
            return _eval_block(node, env)
        case FunctionStatement():
            function = Function(list(node.parameters), node.body, env)
            env.set(node.identifier.value, function)
            return function
        case IfStatement():
            condition = _value(node.condition, env)
            if _is_true(condition):
                return _eval(node.body, env)
            if node.alternative is not None:
                return _eval(node.alternative, env)
            return None
        case ReturnStatement():
            return ReturnValue(_value(node.value, env))
        case VarStatement():
            env.set(node.identifier.value, _eval(node.value, env))
            return None
        case WhileStatement():
            return _eval_while(node, env)
        case ExpressionStatement():
            return _eval(node.expression, env)
    return None


def _eval_program(program: Program, env: Environment) -> Optional[Object]:
    result: Optional[Object] = None
    for statement in program.statements:
        result = _eval(statement, env)
        if isinstance(result, ReturnValue):
            return result.value
    return result


def _eval_block(block: BlockStatement, env: Environment) -> Optional[Object]:
    result: Optional[Object] = None
    for statement in block.statements:
        result = _eval(statement, env)
        if isinstance(result, ReturnValue):
            return result
    return result


def _eval_while(node: WhileStatement, env: Environment) -> Optional[Object]:
    result: Optional[Object] = None
    while True:
        try:
            condition = _eval(node.condition, env)
        except _Failure:
            # A failing condition ends the loop quietly.
            break
        if not _is_true(condition):
            break
        result = _eval(node.body, env)
        if isinstance(result, ReturnValue):
            return result
    return result


def _lookup(name: str, env: Environment) -> Optional[Object]:
    if name in env:
        return env.get(name)
    builtin = BUILTINS.get(name)
    if builtin is not None:
        return builtin
    raise _fail(f"identifier not found: {name}")


def _eval_prefix(operator: str, right: Object) -> Object:
    if operator == "-":
        if isinstance(right, Float):
            return Float(-right.value)
        if isinstance(right, Integer):
            return Integer(_wrap(-right.value))
        raise _fail(f"operator - unsuported for {right.type}")
    if operator == "!":
        if right is TRUE:
            return FALSE
        if right is FALSE or right is NULL:
            return TRUE
        return FALSE
    raise _fail("unsupported prefix operator")


def _integer_div(left: int, right: int) -> int:
    if right == 0:
        raise _fail("division by zero")
    quotient = abs(left) // abs(right)
    if (left < 0) != (right < 0):
        quotient = -quotient
    return _wrap(quotient)


def _float_div(left: float, right: float) -> float:
    if right == 0:
        if left == 0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)
    return left / right


def _eval_integer_infix(left: int, right: int, operator: str) -> Object:
    match operator:
        case "+":
            return Integer(_wrap(left + right))
        case "-":
            return Integer(_wrap(left - right))
        case "/":
            return Integer(_integer_div(left, right))
        case "*":
            return Integer(_wrap(left * right))
        case ">":
            return _boolean(left > right)
        case "<":
            return _boolean(left < right)
        case "==":
            return _boolean(left == right)
        case "!=":
            return _boolean(left != right)
    raise _fail(f"unknown operator: {operator}")


def _eval_float_infix(left: float, right: float, operator: str) -> Object:
    match operator:
        case "+":
            return Float(left + right)
        case "-":
            return Float(left - right)
        case "/":
            return Float(_float_div(left, right))
        case "*":
            return Float(left * right)
        case ">":
            return _boolean(left > right)
        case "<":
            return _boolean(left < right)
        case "==":
            return _boolean(left == right)
        case "!=":
            return _boolean(left != right)
    raise _fail(f"unknown operator: {operator}")


def _eval_infix(left: Object, right: Object, operator: str) -> Object:
    if isinstance(left, Integer) and isinstance(right, Integer):
        return _eval_integer_infix(left.value, right.value, operator)
    if isinstance(left, (Integer, Float)) and isinstance(right, (Integer, Float)):
        return _eval_float_infix(float(left.value), float(right.value), operator)
    if isinstance(left, Boolean) and isinstance(right, Boolean):
        match operator:
            case "and":
                return _boolean(left.value and right.value)
            case "or":
                return _boolean(left.value or right.value)
            case "==":
                return _boolean(left is right)
            case "!=":
                return _boolean(left is not right)
        raise _fail(f"could not apply {operator}to bool literal")
    if operator == "==":
        return _boolean(left is right)
    if operator == "!=":
        return _boolean(left is not right)
    if left.type is not right.type:
        raise _fail("type mismatch")
    if isinstance(left, String) and isinstance(right, String):
        if operator != "+":
            raise _fail("operator other than + not allowed for strings")
        return String(left.value + right.value)
    raise _fail("unknown error ")


def _call(function: Object, arguments: list[Object]) -> Optional[Object]:
    if isinstance(function, Function):
        if len(arguments) < len(function.params):
            raise _fail(
                f"expected {len(function.params)} arguments, got {len(arguments)}"
            )
        scope = Environment(function.env)
        for param, argument in zip(function.params, arguments):
            scope.set(param.value, argument)
        result = _eval(function.body, scope)
        if isinstance(result, ReturnValue):
            return result.value
        return result
    if isinstance(function, StdFunction) and function.function is not None:
        result = function.function(*arguments)
        if isinstance(result, Error):
            raise _Failure(result)
        return result
    raise _fail("not a func")


def _eval_index(left: Object, index: Object) -> Object:
    if not isinstance(left, Array):
        raise _fail("index expression must be applied to ARRAY object")
    if not isinstance(index, Integer):
        raise _fail("index number must be INTEGER")
    if not 0 <= index.value < len(left.elements):
        return NULL
    return left.elements[index.value]