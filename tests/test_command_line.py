"""Test functions in cmdswitch.command_line
"""
import sys

import pytest

from cmdswitch.command_line import CommandLine, get_switch_value, has_switch
from cmdswitch.converters import to_int


@pytest.mark.parametrize(
    "argv, name, expected",
    [
        ([], "verbose", False),
        (["--verbose"], "verbose", True),
        (["--verbose=1"], "verbose", False),
        (["--verbose-mode"], "verbose", False),
        (["-verbose"], "verbose", False),
        (["verbose"], "verbose", False),
        (["prog", "--x", "--verbose"], "verbose", True),
    ],
)
def test_has_switch(argv: list, name: str, expected: bool):
    assert CommandLine(argv).has_switch(name) is expected


def test_has_switch_matches_exact_token(random_argv: list, switch_name: str):
    cmd_line = CommandLine(random_argv)
    assert cmd_line.has_switch(switch_name) == (f"--{switch_name}" in random_argv)


def test_first_match_wins():
    assert CommandLine(["--port=1", "--port=2"]).get_switch_value("port", "0") == "1"


def test_substring_is_not_a_match():
    cmd_line = CommandLine(["--ports=8080"])
    assert not cmd_line.has_switch("port")
    assert cmd_line.get_switch_value("port", "x") == "x"


@pytest.mark.parametrize(
    "argv, expected",
    [
        (["--kv=a=b"], "a=b"),
        (["--kv="], ""),
        (["--kv==="], "=="),
        (["--kv", "--kv=value"], "value"),
    ],
)
def test_value_is_everything_after_first_equals(argv: list, expected: str):
    assert CommandLine(argv).get_switch_value("kv", "") == expected


def test_switch_name_containing_equals():
    # The value starts after the first "=" of the whole token
    assert CommandLine(["--a=b=c"]).get_switch_value("a=b", "d") == "b=c"


def test_converter_applied_only_on_match():
    assert CommandLine(["--n=5"]).get_switch_value("n", 0, int) == 5
    assert CommandLine([]).get_switch_value("n", 0, int) == 0


def test_default_is_returned_unconverted():
    sentinel = object()

    def _converter(value: str):
        raise AssertionError("converter must not be called without a match")

    assert CommandLine(["--other=1"]).get_switch_value("n", sentinel, _converter) is sentinel


def test_converter_errors_propagate():
    with pytest.raises(ValueError):
        CommandLine(["--n=five"]).get_switch_value("n", 0, to_int)


def test_get_switch_value_matches_first_prefixed_token(random_argv: list, switch_name: str):
    prefix = f"--{switch_name}="
    matches = [arg for arg in random_argv if arg.startswith(prefix)]
    expected = matches[0][len(prefix):] if matches else None

    assert CommandLine(random_argv).get_switch_value(switch_name, None) == expected


def test_args_are_stored_as_tuple():
    argv = ["--a", "--b=2"]
    cmd_line = CommandLine(argv)
    argv.append("--c")

    assert cmd_line.args == ("--a", "--b=2")
    assert CommandLine(iter(argv)).args == ("--a", "--b=2", "--c")


@pytest.mark.parametrize("argv", ["--x", ""])
def test_string_argv_is_rejected(argv: str):
    with pytest.raises(TypeError):
        CommandLine(argv)

    with pytest.raises(TypeError):
        has_switch("x", argv=argv)


def test_switch_names():
    cmd_line = CommandLine(["prog", "--a", "--b=1", "--a=2", "--", "--c-d=x=y"])
    assert cmd_line.switch_names() == ["a", "b", "c-d"]


def test_hash_depends_on_args():
    assert CommandLine(["--a"]).hash() == CommandLine(("--a",)).hash()
    assert CommandLine(["--a"]).hash() != CommandLine(["--b"]).hash()
    assert CommandLine(["--a b"]).hash() != CommandLine(["--a", "b"]).hash()
    assert CommandLine([]).hash() != CommandLine([""]).hash()
    assert len(CommandLine(["--a"]).hash()) == 8


def test_save_and_load(tmp_path):
    path = tmp_path / "args.json"
    cmd_line = CommandLine(["--port=8080", "--verbose", "input.txt"])
    cmd_line.save(path)

    assert CommandLine.load(path) == cmd_line

    with pytest.raises(FileExistsError):
        cmd_line.save(path, overwrite=False)


@pytest.mark.parametrize(
    "content",
    [
        '{"argv": ["--a"]}',
        '["--a"]',
        '{"args": "--a"}',
        '{"args": ["--a", null]}',
        '{"args": ["--n", 5]}',
    ],
)
def test_load_rejects_malformed_file(tmp_path, content: str):
    path = tmp_path / "bad.json"
    path.write_text(content)

    with pytest.raises(ValueError):
        CommandLine.load(path)


def test_module_functions_default_to_sys_argv(monkeypatch):
    monkeypatch.setattr(sys, "argv", ["prog", "--verbose", "--port=9000"])

    assert has_switch("verbose")
    assert not has_switch("prog")
    assert get_switch_value("port", 0, int) == 9000
    assert CommandLine.from_argv().args == ("--verbose", "--port=9000")


def test_module_functions_with_explicit_argv():
    assert has_switch("x", argv=["--x"])
    assert get_switch_value("y", "d", argv=["--x"]) == "d"
