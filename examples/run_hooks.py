import logging
import sys

from argyle import CommandParser, run
from argyle.utils import setup_logging


def set_log_level(value, params):
    # Runs once per --log-level occurrence, after a successful parse.
    logging.getLogger().handlers[0].setLevel(value.upper())
    params["quiet"] = value == "error"


def collect_define(value, params):
    print(f"define {value}")


parser = CommandParser()
parser.add_global_option(
    "log-level",
    "Console log level",
    allowed_values=["debug", "info", "warning", "error"],
    run_hook=set_log_level,
)
parser.add_global_option("define", "KEY:VALUE pairs", type="hash", run_hook=collect_define)
build = parser.add_command("build", "Build the project")
build.add_argument("targets", "Targets to build", splat=True, default=["all"])


class Builder:
    params: dict = {}

    def build(self, *targets):
        if not self.params.get("quiet"):
            print(f"Building {', '.join(targets)} with {self.params.get('define', {})}")


if __name__ == "__main__":
    setup_logging(log_filename=None)
    sys.exit(run(parser, Builder()))
