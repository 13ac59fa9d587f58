"""Runtime values produced by the evaluator."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Callable, ClassVar, Optional

if TYPE_CHECKING:
    from .environment import Environment
    from .nodes import BlockStatement, IdentifierExpression


class ObjectType(str, Enum):
    """Names of the kinds of runtime values."""

    INTEGER = "INTEGER"
    FLOAT = "FLOAT"
    BOOLEAN = "BOOLEAN"
    NULL = "NULL"
    RETURN_VALUE = "RETURN_VALUE"
    ERROR = "ERROR"
    FUNCTION = "FUNCTION"
    STRING = "STRING"
    ARRAY = "ARRAY"
    STDFUNC = "STDFUNC"

    def __str__(self) -> str:
        return self.value


class Object(ABC):
    """Base of every runtime value."""

    type: ClassVar[ObjectType]

    @abstractmethod
    def inspect(self) -> str:
        """Text shown for the value when it is printed."""


@dataclass
class Integer(Object):
    type: ClassVar[ObjectType] = ObjectType.INTEGER
    value: int = 0

    def inspect(self) -> str:
        return str(self.value)


@dataclass
class Float(Object):
    type: ClassVar[ObjectType] = ObjectType.FLOAT
    value: float = 0.0

    def inspect(self) -> str:
        if math.isnan(self.value):
            return "NaN"
        if math.isinf(self.value):
            return "+Inf" if self.value > 0 else "-Inf"
        return f"{self.value:f}"


@dataclass
class Boolean(Object):
    type: ClassVar[ObjectType] = ObjectType.BOOLEAN
    value: bool = False

    def inspect(self) -> str:
        return "true" if self.value else "false"


@dataclass
class Null(Object):
    type: ClassVar[ObjectType] = ObjectType.NULL

    def inspect(self) -> str:
        return "null"


@dataclass
class ReturnValue(Object):
    type: ClassVar[ObjectType] = ObjectType.RETURN_VALUE
    value: Object

    def inspect(self) -> str:
        return self.value.inspect()


@dataclass
class Error(Object):
    type: ClassVar[ObjectType] = ObjectType.ERROR
    message: str = ""

    def inspect(self) -> str:
        return f"ERROR: {self.message}"


@dataclass(eq=False)
class Function(Object):
    type: ClassVar[ObjectType] = ObjectType.FUNCTION
    params: list[IdentifierExpression] = field(default_factory=list)
    body: Optional[BlockStatement] = None
    env: Optional[Environment] = None

    def inspect(self) -> str:
        return "<fun>"


@dataclass
class String(Object):
    type: ClassVar[ObjectType] = ObjectType.STRING
    value: str = ""

    def inspect(self) -> str:
        return self.value


@dataclass
class Array(Object):
    type: ClassVar[ObjectType] = ObjectType.ARRAY
    elements: list[Object] = field(default_factory=list)

    def inspect(self) -> str:
        return "[" + ", ".join(e.inspect() for e in self.elements) + "]"


@dataclass(eq=False)
class StdFunction(Object):
    type: ClassVar[ObjectType] = ObjectType.STDFUNC
    function: Optional[Callable[..., Optional[Object]]] = None

    def inspect(self) -> str:
        return "<std fun>"


NULL = Null()
TRUE = Boolean(True)
FALSE = Boolean(False)