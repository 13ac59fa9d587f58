"""Variable scopes."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .objects import Object


class Environment:
    """A scope of named values, optionally nested inside another scope."""

    def __init__(self, enclosing: Optional[Environment] = None) -> None:
        self._store: dict[str, Optional[Object]] = {}
        self.enclosing = enclosing

    def get(self, name: str) -> Optional[Object]:
        """Return the value bound to ``name`` here or in an enclosing scope.

        Raises KeyError if no scope binds the name.
        """
        scope: Optional[Environment] = self
        while scope is not None:
            if name in scope._store:
                return scope._store[name]
            scope = scope.enclosing
        raise KeyError(name)

    def set(self, name: str, value: Optional[Object]) -> Optional[Object]:
        """Bind ``name`` in this scope and return the value."""
        self._store[name] = value
        return value

    def __contains__(self, name: object) -> bool:
        scope: Optional[Environment] = self
        while scope is not None:
            if name in scope._store:
                return True
            scope = scope.enclosing
        return False

    def enclose(self) -> Environment:
        """Return a new scope nested inside this one."""
        return Environment(self)