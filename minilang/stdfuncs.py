"""Functions available to every program without being defined."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from .objects import Array, Error, Integer, Object, StdFunction, String


def _joined(args: tuple[Object, ...]) -> str:
    return "".join(f"{arg.inspect()} " for arg in args)


def builtin_print(*args: Object) -> None:
    """Print the arguments, each followed by a space."""
    print(_joined(args))
    return None


def builtin_len(*args: Object) -> Object:
    """Length of an array or of a string in bytes; 0 for anything else."""
    if not args:
        return Error("len function requires one parameter")
    value = args[0]
    if isinstance(value, Array):
        return Integer(len(value.elements))
    if isinstance(value, String):
        return Integer(len(value.value.encode("utf-8")))
    return Integer(0)


def builtin_panic(*args: Object) -> None:
    """Print the arguments and stop the program with status 1."""
    print(_joined(args))
    raise SystemExit(1)


def builtin_read(*args: Object) -> Object:
    """Return the contents of the named file as a string."""
    if len(args) != 1:
        return Error("read function only accepts one parameter")
    filename = args[0]
    if not isinstance(filename, String):
        return Error("filename must be a string")
    try:
        data = Path(filename.value).read_bytes()
    except OSError as exc:
        return Error(f"could not open file: {exc}")
    return String(data.decode("utf-8", errors="replace"))


def builtin_write(*args: Object) -> Optional[Object]:
    """Write a string to the named file, replacing what it held."""
    if len(args) != 2:
        return Error("read function only accepts two parameters")
    filename, data = args
    if not isinstance(filename, String):
        return Error("filename must be a string")
    if not isinstance(data, String):
        return Error("data must be string")
    try:
        with open(filename.value, "wb") as handle:
            handle.write(data.value.encode("utf-8"))
    except OSError as exc:
        return Error(f"could not open file: {exc}")
    return None


BUILTINS: dict[str, StdFunction] = {
    "print": StdFunction(builtin_print),
    "len": StdFunction(builtin_len),
    "panic": StdFunction(builtin_panic),
    "read": StdFunction(builtin_read),
    "write": StdFunction(builtin_write),
}