#! /usr/bin/env python3

# /// script
# requires-python = ">=3.8"
# dependencies = [
#     "duct",
# ]
# ///

from duct import cmd, StatusError
import os
from pathlib import Path
import sys

here = Path(__file__).parent

GENERATOR = "hugo"
THEME = "pulp"
OUTPUT_DIR = "public"
REMOTE = "origin"
BRANCH = "master"


def main(root=None):
    if root is None:
        root = here

    print("\033[0;32mDeploying updates to GitHub...\033[0m")

    try:
        os.chdir(str(root))
        cmd(GENERATOR, "-t", THEME).run()

        if not Path(OUTPUT_DIR).is_dir():
            print("no {} directory, did the build run?".format(OUTPUT_DIR))
            return 1
        os.chdir(OUTPUT_DIR)

        cmd("git", "add", ".").run()
        # Always commit, even when nothing changed.
        message = "Rebuild " + cmd("date").read()
        cmd("git", "commit", "--allow-empty", "-m", message).run()
        cmd("git", "push", REMOTE, BRANCH).run()
    except StatusError as e:
        return e.output.status
    except FileNotFoundError as e:
        # Same status a shell gives for a missing command.
        print("{}: not found".format(e.filename))
        return 127

    return 0


if __name__ == "__main__":
    sys.exit(main())
