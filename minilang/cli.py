"""Command line entry point: run a script file or an interactive prompt."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional, Sequence, TextIO

from .environment import Environment
from .evaluator import evaluate
from .lexer import Lexer
from .objects import Object
from .parsing import ParseError, Parser

VERSION = "0.0.1"
PROMPT = "> "


def run(source: str, env: Optional[Environment] = None) -> Optional[Object]:
    """Parse and evaluate ``source`` in ``env``, printing the outcome.

    Syntax errors are printed as a bracketed list and nothing is evaluated.
    Otherwise the value of the program, if any, is printed and returned.
    """
    if env is None:
        env = Environment()
    try:
        program = Parser(Lexer(source)).parse_program()
    except ParseError as exc:
        print("[" + " ".join(exc.errors) + "]")
        return None
    result = evaluate(program, env)
    if result is not None:
        print(result.inspect())
    return result


def _run_file(filename: str) -> None:
    try:
        source = Path(filename).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        raise SystemExit("could not open file") from None
    run(source, Environment())


def _repl(stream: TextIO) -> None:
    env = Environment()
    while True:
        print(PROMPT, end="", flush=True)
        line = stream.readline()
        if not line.endswith("\n"):
            raise SystemExit("could not read input: EOF")
        run(line, env)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the prompt with no arguments, or run the named file.

    The single argument ``version`` prints the version instead.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        _repl(sys.stdin)
        return 0
    if len(args) == 1:
        if args[0] == "version":
            print("version:", VERSION)
            return 0
        _run_file(args[0])
        return 0
    raise SystemExit("wrong number of args")


if __name__ == "__main__":
    raise SystemExit(main())