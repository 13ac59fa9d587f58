# minilang

A small dynamically typed scripting language with a tree-walking
interpreter. It has integers, floats, booleans, strings, arrays, named
functions with closures, `if`/`else`, `while` loops and a handful of
built-in functions.

## Installing

```
pip install .
```

## Running

Start an interactive prompt:

```
minilang
```

Each line typed at the `> ` prompt is run in the same scope, and its value,
if it has one, is printed. The prompt stops with an error message when the
input ends.

Run a script file (the value of the last statement, if any, is printed):

```
minilang program.ml
```

Print the version:

```
minilang version
```

## The language

```
var a = 5;
b = a + 1.5;

fun add(x, y) {
    return x + y;
}

var items = [1, "two", 3.0];
print(len(items), items[1]);

if (add(2, 3) == 5) {
    print("five");
}

var i = 0;
while (i < 3) {
    print(i);
    i = i + 1;
}
```

Assignment works with or without `var`. Operators: `+ - * /`, comparisons
`< > == !=`, logical `and` / `or`, prefix `-` and `!`, indexing `a[i]` and
calls `f(x, y)`. Strings join with `+`. Arithmetic that mixes integers and
floats gives a float; integer arithmetic wraps at 64 bits. An index outside
the array gives `null`. Integer division by zero is an error.

Built-in functions:

| name    | what it does                                              |
|---------|-----------------------------------------------------------|
| `print` | prints each argument followed by a space                  |
| `len`   | length of an array, or of a string in bytes; `0` otherwise |
| `panic` | prints its arguments and exits with status 1              |
| `read`  | returns the contents of a file as a string                |
| `write` | writes a string to a file, replacing its contents         |

## Using it from Python

```python
from minilang.cli import run
from minilang.environment import Environment
from minilang.evaluator import evaluate
from minilang.parsing import parse

program = parse("fun sq(x) { return x * x; } sq(7);")
result = evaluate(program, Environment())
print(result.inspect())   # 49

env = Environment()
run("var greeting = \"hi\";", env)
run("greeting + \" there\";", env)   # prints: hi there
```

`parse` (and `Parser.parse_program`) raises `minilang.parsing.ParseError`,
whose `errors` attribute lists the parser's messages, when the source is not
valid. Runtime problems come back as `minilang.objects.Error` values, whose
`inspect()` reads `ERROR: <message>`. Lower layers are available too:
`minilang.lexer.Lexer(source).tokenize()` gives the token list and
`minilang.nodes` holds the syntax tree classes.

## Limitations

- `//` comments are recognised by the lexer, but the parser does not accept
  them, so a program containing one is reported as a syntax error.
- `<=` and `>=` parse, but evaluating them gives an `unknown operator` error.
- The words `for`, `nil`, `string`, `int`, `bool`, `float` and `byte` are
  reserved but have no meaning in the language yet.
- The body of a `while` loop and the `else` branch of an `if` also take in
  the statements that follow them, up to the enclosing `}` or the end of the
  input; write them last in their block or program.

## Tests

```
pip install ".[test]"
pytest
```