import pytest

from argyle.parser import CommandParser, ParseErrorKind


@pytest.fixture
def parser():
    parser = CommandParser()
    copy = parser.add_command("copy", "Copy a file")
    copy.add_argument("src")
    copy.add_argument("dst")
    copy.add_option("count", type="numeric", required=True)
    copy.add_option("level", type="numeric", allowed_values=[1, 2, 3])
    copy.add_option("depth", type="numeric")
    return parser


def test_errors_are_reported_by_kind(parser):
    result = parser.parse(["copy", "--level=high", "--zap"])
    assert result.errors == [
        "Zap is an unknown option",
        "Src is required",
        "Dst is required",
        "Count is required",
        "Level is invalid",
    ]
    assert result.errors.kinds() == [
        ParseErrorKind.UNKNOWN_OPTION,
        ParseErrorKind.MISSING_ARGUMENT,
        ParseErrorKind.MISSING_ARGUMENT,
        ParseErrorKind.MISSING_OPTION,
        ParseErrorKind.TYPE_COERCION,
    ]


def test_value_errors_follow_token_order(parser):
    result = parser.parse(["copy", "a", "b", "--count=1", "--depth=x", "--level=9"])
    assert result.errors == ["Depth is invalid", "Level is invalid"]
    result = parser.parse(["copy", "a", "b", "--count=1", "--level=9", "--depth=x"])
    assert result.errors == ["Level is invalid", "Depth is invalid"]
    assert result.errors.kinds() == [
        ParseErrorKind.INCLUSION,
        ParseErrorKind.TYPE_COERCION,
    ]


def test_too_many_arguments_reported_once(parser):
    result = parser.parse(["copy", "a", "b", "c", "d", "--count=1", "--what"])
    assert result.errors == ["What is an unknown option", "Too many arguments"]


def test_unknown_command_stops_parsing(parser):
    assert parser.parse(["move", "--zap"]).errors == ["Move is an unknown command"]


def test_error_list_sequence_protocol(parser):
    errors = parser.parse(["copy"]).errors
    assert len(errors) == 3
    assert errors[0] == "Src is required"
    assert list(errors) == errors.messages
    assert bool(errors)
    assert repr(errors).startswith("ErrorList(['Src is required'")


def test_hooks_do_not_run_on_failure():
    calls = []
    parser = CommandParser()
    command = parser.add_command("run")
    command.add_argument("name")
    command.add_option("trace", run_hook=lambda value, params: calls.append(value))
    assert not parser.parse(["run", "--trace"]).valid
    assert calls == []
