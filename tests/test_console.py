"""Test console command line functionality."""

from route_matcher.console import CommandLine


def test_parse_command_line():
    command = CommandLine.parse("cmd a b --x --y=1 -z=2")
    assert command.command_name() == "cmd"
    assert command.arguments() == ("a", "b")
    assert command.options() == {"x": None, "y": "1", "z": "2"}

    assert command.has_option("x")
    assert command.get_option_value("x") is None
    assert command.get_option_value("y") == "1"
    assert command.get_option_value("z", "") == "2"


def test_parse_documented_format():
    command = CommandLine.parse(
        "commandName:name argument1 argumentN "
        "--optionWithNoValue --optionWithValue=1 -a -b=1"
    )
    assert command.command_name() == "commandName:name"
    assert command.arguments() == ("argument1", "argumentN")
    assert command.options() == {
        "optionWithNoValue": None,
        "optionWithValue": "1",
        "a": None,
        "b": "1",
    }


def test_parse_interleaved_options():
    command = CommandLine.parse("run --verbose first -n=3 second")
    assert command.arguments() == ("first", "second")
    assert command.get_option_value("n") == "3"


def test_parse_value_keeps_text_after_first_equal():
    command = CommandLine.parse("cmd --filter=a=b --empty=")
    assert command.get_option_value("filter") == "a=b"
    assert command.get_option_value("empty") == ""
    assert command.has_option("empty")


def test_parse_empty():
    command = CommandLine.parse("   ")
    assert command.command_name() == ""
    assert command.arguments() == ()
    assert command.options() == {}


def test_option_alias():
    command = CommandLine("cmd", options={"v": None, "o": "out.txt", "output": "x"})

    assert command.has_option("verbose", "v")
    assert not command.has_option("verbose")
    assert not command.has_option("verbose", "q")
    assert command.get_option_value("output", "o") == "x"
    assert command.get_option_value("out", "o") == "out.txt"
    assert command.get_option_value("missing", "") is None
    assert command.get_option_value("missing", "m") is None


def test_arguments_index():
    command = CommandLine("cmd", ["a", "b"])
    assert command.has_argument(0)
    assert command.has_argument(1)
    assert not command.has_argument(2)
    assert not command.has_argument(-1)
    assert command.get_argument_value(1) == "b"
    assert command.get_argument_value(5) is None


def test_options_copy_does_not_leak():
    command = CommandLine("cmd", options={"x": "1"})
    command.options()["x"] = "2"
    assert command.get_option_value("x") == "1"
    assert command == CommandLine("cmd", (), {"x": "1"})


def test_parse_dash_tokens_are_arguments():
    """Tokens without an option name are kept as arguments."""
    command = CommandLine.parse("cmd - -- --=1 ---x")
    assert command.arguments() == ("-", "--", "--=1", "---x")
    assert command.options() == {}


def test_parse_option_names_may_contain_dashes():
    command = CommandLine.parse("cmd --dry-run --log-level=debug")
    assert command.options() == {"dry-run": None, "log-level": "debug"}
