import sys

from argyle import CommandParser, run
from argyle.utils import setup_logging

setup_logging(log_filename=None)


class PackageManager:
    params: dict = {}

    def install(self, package, version=None):
        pinned = f"{package}=={version}" if version else package
        action = "Reinstalling" if self.params.get("force") else "Installing"
        print(f"{action} {pinned} into {self.params['prefix']}")

    def remove(self, *packages):
        for package in packages:
            print(f"Removing {package}")

    def search(self, query):
        print(f"Searching for {query!r} (limit {self.params['limit']})")


parser = CommandParser()
parser.add_global_option("verbose", "Print more output")
parser.add_global_option("prefix", "Install prefix", default="/usr/local")

install = parser.add_command("install", "Install a package")
install.add_argument("package", "Package name")
install.add_argument("version", "Version to pin", required=False)
install.add_option("force", "Reinstall if already present")

remove = parser.add_command("remove", "Remove packages")
remove.add_argument("packages", "Package names", splat=True, required=True)

search = parser.add_command("search", "Search the index")
search.add_argument("query", "Search words", greedy=True)
search.add_option("limit", "Maximum results", default=10, allowed_values=range(1, 101))

# Entry point
if __name__ == "__main__":
    sys.exit(run(parser, PackageManager()))
