from io import StringIO

import pytest
from rich.console import Console

from argyle import CommandParser, run


class Greeter:
    params = None

    def __init__(self):
        self.greeted = []

    def greet(self, name):
        self.greeted.append((name, self.params.get("loud", False)))


@pytest.fixture
def parser():
    parser = CommandParser()
    parser.add_global_option("loud", "Shout")
    parser.add_command("greet", "Say hello").add_argument("name")
    return parser


@pytest.fixture
def console():
    return Console(file=StringIO(), color_system=None, width=200)


def test_run_dispatches(parser, console):
    greeter = Greeter()
    assert run(parser, greeter, ["greet", "bob", "--loud"], console=console) == 0
    assert greeter.greeted == [("bob", True)]
    assert console.file.getvalue() == ""


def test_run_reports_errors_and_help(parser, console):
    greeter = Greeter()
    assert run(parser, greeter, "greet", console=console) == 1
    output = console.file.getvalue()
    assert output.startswith("Name is required\n\nCommands")
    assert "-?/--help" in output
    assert greeter.greeted == []


def test_run_prints_help(parser, console):
    greeter = Greeter()
    assert run(parser, greeter, ["greet", "bob", "-?"], console=console) == 0
    assert "greet [name]  # Say hello" in console.file.getvalue()
    assert greeter.greeted == []


def test_run_reads_sys_argv(parser, console, monkeypatch):
    monkeypatch.setattr("sys.argv", ["greeter", "greet", "amy"])
    greeter = Greeter()
    assert run(parser, greeter, console=console) == 0
    assert greeter.greeted == [("amy", False)]
