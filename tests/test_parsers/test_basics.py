import pytest

from argyle.exceptions import SpecError
from argyle.parser import CommandParser


@pytest.fixture
def parser():
    parser = CommandParser()
    parser.add_global_option("verbose", "Be loud")
    install = parser.add_command("install", "Install a file")
    install.add_argument("file", "The file to install")
    install.add_option("force", "Overwrite existing files")
    kill = parser.add_command("kill", "Stop a process")
    kill.add_option("pid", "Process id", type="numeric")
    return parser


def test_str():
    parser = CommandParser()
    assert str(parser) == "CommandParser(commands=0, global_options=1, help_option=True)"
    parser.add_command("install")
    parser.add_global_option("verbose")
    assert (
        repr(parser) == "CommandParser(commands=1, global_options=2, help_option=True)"
    )


def test_command_with_global_option(parser):
    result = parser.parse(["-v", "install", "a.txt"])
    assert result.valid
    assert result.command == "install"
    assert result.args == ["a.txt"]
    assert result.params == {"help": False, "verbose": True}


def test_string_input_is_split_like_a_shell(parser):
    result = parser.parse("install 'my file.txt' --force")
    assert result.args == ["my file.txt"]
    assert result.params == {"help": False, "force": True}


def test_options_before_and_after_arguments(parser):
    result = parser.parse(["install", "--verbose", "a", "-f"])
    assert result.args == ["a"]
    assert result.params == {"help": False, "verbose": True, "force": True}


def test_numeric_option(parser):
    assert parser.parse(["kill", "--pid", "42"]).params["pid"] == 42
    assert parser.parse(["kill", "-p", "4.5"]).params["pid"] == 4.5
    assert parser.parse(["kill", "--pid=-3"]).params["pid"] == -3


def test_failed_parse_has_no_values(parser):
    result = parser.parse(["kill", "--pid=abc"])
    assert not result.valid
    assert result.errors == ["Pid is invalid"]
    assert result.command is None
    assert result.args == []
    assert result.params == {}


def test_option_without_value(parser):
    assert parser.parse(["kill", "--pid"]).errors == ["Pid is invalid"]


@pytest.mark.parametrize(
    "args, message",
    [
        (["frobnicate"], "Frobnicate is an unknown command"),
        ([], "Unknown command"),
        (["-v"], "Unknown command"),
        (["--verbose", "nope"], "Nope is an unknown command"),
        ([""], '"" is an unknown command'),
    ],
)
def test_unknown_command(parser, args, message):
    assert parser.parse(args).errors == [message]


def test_unknown_option(parser):
    assert parser.parse(["install", "a", "--zap"]).errors == ["Zap is an unknown option"]


def test_local_options_belong_to_their_command(parser):
    assert parser.parse(["kill", "--force"]).errors == ["Force is an unknown option"]


def test_missing_and_extra_arguments(parser):
    assert parser.parse(["install"]).errors == ["File is required"]
    assert parser.parse(["install", "a", "b", "c"]).errors == ["Too many arguments"]


def test_help_flag(parser):
    result = parser.parse(["-?", "kill"])
    assert result.valid
    assert result.help is True
    assert parser.parse(["kill", "--help"]).help is True
    assert parser.parse(["kill"]).help is False


def test_help_option_can_be_disabled():
    parser = CommandParser(help_option=False)
    parser.add_command("status")
    assert parser.parse(["status"]).params == {}
    assert parser.parse(["status", "--help"]).errors == ["Help is an unknown option"]


def test_boolean_values_and_negation():
    parser = CommandParser()
    parser.add_global_option("color", "Colorize", default=True, use_no=True)
    parser.add_global_option("verbose")
    parser.add_command("status")
    assert parser.parse(["status"]).params == {"help": False, "color": True}
    assert parser.parse(["status", "--no-color"]).params["color"] is False
    assert parser.parse(["status", "--verbose=no"]).params["verbose"] is False
    assert parser.parse(["status", "--verbose=maybe"]).errors == ["Verbose is invalid"]
    assert parser.parse(["status", "--no-verbose"]).errors == [
        "No-verbose is an unknown option"
    ]


def test_short_flag_bundling():
    parser = CommandParser()
    archive = parser.add_command("archive")
    archive.add_option("create")
    archive.add_option("zip")
    archive.add_option("file", type="string")
    result = parser.parse(["archive", "-czf", "out.tgz"])
    assert result.params == {"help": False, "create": True, "zip": True, "file": "out.tgz"}
    assert parser.parse(["archive", "-cq"]).errors == ["Q is an unknown option"]
    result = parser.parse(["archive", "-cz=no"])
    assert result.params == {"help": False, "create": True, "zip": False}


def test_array_and_hash_values_accumulate():
    parser = CommandParser()
    run = parser.add_command("run")
    run.add_option("tag", type="array")
    run.add_option("env", type="hash")
    result = parser.parse(
        ["run", "--tag=a,b", "--tag", "c", "--env", "A:1", "--env=B:2,A:3"]
    )
    assert result.params["tag"] == ["a", "b", "c"]
    assert result.params["env"] == {"A": "3", "B": "2"}


def test_allowed_values():
    parser = CommandParser()
    run = parser.add_command("run")
    run.add_option("mode", allowed_values=["fast", "safe"], default="safe")
    run.add_option("level", allowed_values=range(1, 4))
    assert parser.parse(["run"]).params["mode"] == "safe"
    assert parser.parse(["run", "--mode", "fast"]).params["mode"] == "fast"
    assert parser.parse(["run", "--mode=slow"]).errors == ["Mode is invalid"]
    assert parser.parse(["run", "--level=3"]).params["level"] == 3
    assert parser.parse(["run", "--level=4"]).errors == ["Level is invalid"]


def test_array_allowed_values_match_string_elements():
    parser = CommandParser()
    parser.add_command("run").add_option("tags", type="array", allowed_values=[1, 2])
    assert parser.parse(["run", "--tags=1,2"]).params["tags"] == ["1", "2"]
    assert parser.parse(["run", "--tags=1,3"]).errors == ["Tags is invalid"]


def test_required_option():
    parser = CommandParser()
    parser.add_command("copy").add_option("count", type="numeric", required=True)
    assert parser.parse(["copy"]).errors == ["Count is required"]
    assert parser.parse(["copy", "--count=x"]).errors == ["Count is invalid"]
    assert parser.parse(["copy", "--count", "2"]).params["count"] == 2


def test_unset_option_without_default_is_omitted(parser):
    assert "pid" not in parser.parse(["kill"]).params


def test_defaults_are_not_shared_between_parses():
    parser = CommandParser()
    parser.add_command("run").add_option("tags", default=["a"])
    first = parser.parse(["run"])
    first.params["tags"].append("b")
    assert parser.parse(["run"]).params["tags"] == ["a"]


def test_local_option_shadows_global():
    parser = CommandParser()
    parser.add_global_option("level", type="numeric")
    parser.add_command("label").add_option("level", type="string")
    parser.add_command("other")
    assert parser.parse(["label", "--level=high"]).params["level"] == "high"
    assert parser.parse(["other", "--level=high"]).errors == ["Level is invalid"]


def test_negative_numbers_are_positional():
    parser = CommandParser()
    add = parser.add_command("add")
    add.add_argument("a", type="numeric")
    add.add_argument("b", type="numeric")
    assert parser.parse(["add", "-5", "3"]).args == [-5, 3]


def test_terminator_ends_option_parsing(parser):
    result = parser.parse(["install", "--", "--force"])
    assert result.args == ["--force"]
    assert "force" not in result.params


def test_declarations_rejected_after_finalize(parser):
    parser.parse(["kill"])
    assert parser.finalized
    with pytest.raises(SpecError):
        parser.add_command("late")
    with pytest.raises(SpecError):
        parser.add_global_option("late")
    with pytest.raises(SpecError):
        parser.get_command("kill").add_option("late")


def test_duplicate_declarations():
    parser = CommandParser()
    command = parser.add_command("run")
    with pytest.raises(SpecError):
        parser.add_command("run")
    command.add_argument("name")
    with pytest.raises(SpecError):
        command.add_argument("name")
    command.add_option("fast")
    with pytest.raises(SpecError):
        command.add_option("fast")
    with pytest.raises(SpecError):
        parser.add_global_option("help")


@pytest.mark.parametrize("name", ["", "-run", "two words", None])
def test_invalid_command_names(name):
    with pytest.raises(SpecError):
        CommandParser().add_command(name)


def test_local_help_option_clashes_with_builtin():
    parser = CommandParser()
    parser.add_command("run").add_option("help")
    with pytest.raises(SpecError):
        parser.finalize()


def test_short_names_after_finalize(parser):
    parser.finalize()
    assert parser.global_options["verbose"].short_name == "v"
    assert parser.global_options["help"].short_name == "?"
    assert parser.get_command("install").options["force"].short_name == "f"
    assert parser.get_command("kill").options["pid"].short_name == "p"


def test_local_short_name_cannot_take_a_global_one():
    parser = CommandParser()
    parser.add_global_option("verbose", "Be loud")
    parser.add_command("install").add_option("value", type="string", short_name="v")
    with pytest.raises(SpecError, match="already used by option 'verbose'"):
        parser.finalize()


def test_global_short_names_are_the_same_in_every_command():
    parser = CommandParser()
    parser.add_global_option("verbose")
    install = parser.add_command("install")
    install.add_option("value", type="string")
    install.add_argument("file")
    parser.finalize()
    assert install.resolved_options["verbose"].short_name == "v"
    assert install.options["value"].short_name == "a"
    result = parser.parse(["-v", "install", "f", "-a", "x"])
    assert result.params == {"help": False, "verbose": True, "value": "x"}
