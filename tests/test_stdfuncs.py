import pytest

from minilang.environment import Environment
from minilang.evaluator import evaluate
from minilang.objects import Array, Error, Float, Integer, ObjectType, String
from minilang.parsing import parse
from minilang.stdfuncs import (
    BUILTINS,
    builtin_len,
    builtin_panic,
    builtin_print,
    builtin_read,
    builtin_write,
)


def run(source):
    return evaluate(parse(source), Environment())


@pytest.mark.parametrize(
    "source, kind, text",
    [
        ('len("hello");', ObjectType.INTEGER, "5"),
        ('len(["hello", 1, 5.2]);', ObjectType.INTEGER, "3"),
        ("len(5.2);", ObjectType.INTEGER, "0"),
    ],
)
def test_std_functions(source, kind, text):
    result = run(source)
    assert result.type is kind
    assert result.inspect() == text


def test_len_direct():
    assert builtin_len(Array([Integer(1), Integer(2)])) == Integer(2)
    assert builtin_len(Float(1.5)) == Integer(0)


def test_len_counts_bytes():
    assert builtin_len(String("шч")) == Integer(4)


def test_len_without_arguments_is_error():
    result = builtin_len()
    assert result.type is ObjectType.ERROR
    assert result.inspect() == f"ERROR: {result.message}"
    assert result.message


def test_print_output(capsys):
    assert builtin_print(Integer(1), String("a")) is None
    assert capsys.readouterr().out == "1 a \n"


def test_print_through_program(capsys):
    assert run('print("hi", 2);') is None
    assert capsys.readouterr().out == "hi 2 \n"


def test_panic_exits_with_status_one(capsys):
    with pytest.raises(SystemExit) as info:
        builtin_panic(String("boom"))
    assert info.value.code == 1
    assert capsys.readouterr().out == "boom \n"


def test_write_then_read(tmp_path):
    path = String(str(tmp_path / "out.txt"))
    assert builtin_write(path, String("hello")) is None
    assert builtin_read(path) == String("hello")


def test_read_wrong_argument_count():
    assert builtin_read() == Error("read function only accepts one parameter")


def test_read_non_string_filename():
    assert builtin_read(Integer(1)) == Error("filename must be a string")


def test_read_missing_file(tmp_path):
    result = builtin_read(String(str(tmp_path / "absent.txt")))
    assert isinstance(result, Error)
    assert result.message.startswith("could not open file: ")


def test_write_wrong_argument_count():
    assert builtin_write(String("a")) == Error("read function only accepts two parameters")


def test_write_non_string_filename():
    assert builtin_write(Integer(1), String("x")) == Error("filename must be a string")


def test_write_non_string_data(tmp_path):
    result = builtin_write(String(str(tmp_path / "x.txt")), Integer(1))
    assert result == Error("data must be string")


def test_builtin_names():
    assert sorted(BUILTINS) == ["len", "panic", "print", "read", "write"]
    assert BUILTINS["len"].inspect() == "<std fun>"


def test_read_error_propagates_through_program():
    result = run("read(1);")
    assert result == Error("filename must be a string")