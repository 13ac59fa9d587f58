import pytest

from minilang.environment import Environment
from minilang.evaluator import evaluate
from minilang.objects import Error, Integer, ObjectType
from minilang.parsing import parse


def run(source, env=None):
    return evaluate(parse(source), env if env is not None else Environment())


def check(result, kind, text):
    assert result.type is kind
    assert result.inspect() == text


@pytest.mark.parametrize(
    "source, kind, text",
    [
        ("true == true;", ObjectType.BOOLEAN, "true"),
        ("false == false;", ObjectType.BOOLEAN, "true"),
        ("true == false;", ObjectType.BOOLEAN, "false"),
        ("false == true;", ObjectType.BOOLEAN, "false"),
        ("2+3;", ObjectType.INTEGER, "5"),
        ("2+3 == 5;", ObjectType.BOOLEAN, "true"),
        ("10 / (2+3) == 2;", ObjectType.BOOLEAN, "true"),
        ("0 == 0;", ObjectType.BOOLEAN, "true"),
        ("1.1 + 5;", ObjectType.FLOAT, "6.100000"),
        ("1.1 + 5.2;", ObjectType.FLOAT, "6.300000"),
        ("1.1 == 1.1;", ObjectType.BOOLEAN, "true"),
        ("true or false;", ObjectType.BOOLEAN, "true"),
        ("true and false;", ObjectType.BOOLEAN, "false"),
    ],
)
def test_infix_expression_evaluation(source, kind, text):
    check(run(source), kind, text)


@pytest.mark.parametrize(
    "source, kind, text",
    [
        ("var a = 5; a + 1;", ObjectType.INTEGER, "6"),
        ("var a = 5; var b = 1; a + b;", ObjectType.INTEGER, "6"),
        ("var b = true; true == b;", ObjectType.BOOLEAN, "true"),
    ],
)
def test_var_evaluation(source, kind, text):
    check(run(source), kind, text)


@pytest.mark.parametrize(
    "source, kind, text",
    [
        ("fun a(x, y) { return x+y; } a(2,3);", ObjectType.INTEGER, "5"),
        ('fun a(b) { return b; } a("abc");', ObjectType.STRING, "abc"),
        ("fun a() { return 1; } a();", ObjectType.INTEGER, "1"),
    ],
)
def test_function_evaluation(source, kind, text):
    check(run(source), kind, text)


def test_recursive_function():
    source = "fun f(n) { if (n < 1) { return 0; } return n + f(n - 1); } f(3);"
    check(run(source), ObjectType.INTEGER, "6")


def test_function_definition_value():
    env = Environment()
    result = run("fun a() { return 1; }", env)
    assert result.inspect() == "<fun>"
    assert env.get("a") is result


def test_if_else():
    check(run("if (1 < 2) { 10 } else { 20 }"), ObjectType.INTEGER, "10")
    check(run("if (2 < 1) { 10 } else { 20 }"), ObjectType.INTEGER, "20")


def test_if_without_else_gives_nothing():
    assert run("if (2 < 1) { 10 }") is None


def test_while_loop_updates_variable():
    env = Environment()
    assert run("var b = 0; while (b < 3) { b = b + 1; }", env) is None
    assert env.get("b") == Integer(3)


def test_while_with_failing_condition_stops_quietly():
    assert run("while (y) { 1; }") is None


def test_integer_division_truncates():
    check(run("7 / 2;"), ObjectType.INTEGER, "3")
    check(run("-7 / 2;"), ObjectType.INTEGER, "-3")


def test_float_division_by_zero():
    check(run("1 / 0.0;"), ObjectType.FLOAT, "+Inf")


def test_integer_division_by_zero_is_error():
    assert run("1 / 0;").type is ObjectType.ERROR


def test_string_concatenation():
    check(run('"a" + "b";'), ObjectType.STRING, "ab")


def test_strings_compare_by_identity():
    check(run('"a" == "a";'), ObjectType.BOOLEAN, "false")


@pytest.mark.parametrize(
    "source, text",
    [
        ("-5;", "-5"),
        ("-1.5;", "-1.500000"),
        ("!true;", "false"),
        ("!false;", "true"),
        ("!5;", "false"),
    ],
)
def test_prefix_operators(source, text):
    assert run(source).inspect() == text


def test_arrays_and_indexing():
    check(run("[1, 2, 3];"), ObjectType.ARRAY, "[1, 2, 3]")
    check(run("var a = [1, 2, 3]; a[1];"), ObjectType.INTEGER, "2")
    check(run("[1, 2][5];"), ObjectType.NULL, "null")


@pytest.mark.parametrize(
    "source, message",
    [
        ("x;", "identifier not found: x"),
        ("1 + true;", "type mismatch"),
        ('"a" - "b";', "operator other than + not allowed for strings"),
        ("-true;", "operator - unsuported for BOOLEAN"),
        ("5[0];", "index expression must be applied to ARRAY object"),
        ('[1][true];', "index number must be INTEGER"),
        ("1 >= 2;", "unknown operator: >="),
        ("true + false;", "could not apply +to bool literal"),
        ("var a = 1; a(2);", "not a func"),
        ("x; 5;", "identifier not found: x"),
        ("[1, y];", "identifier not found: y"),
    ],
)
def test_errors(source, message):
    assert run(source) == Error(message)


def test_error_inside_function_propagates():
    assert run("fun f() { return z; } f();") == Error("identifier not found: z")


def test_return_stops_program():
    check(run("return 1; 2;"), ObjectType.INTEGER, "1")


def test_closure_sees_defining_scope():
    check(run("var k = 10; fun f(x) { return x + k; } f(5);"), ObjectType.INTEGER, "15")


def test_evaluate_none_node():
    assert evaluate(None, Environment()) is None