"""Development entrypoint for the physlist HTTP API."""

from __future__ import annotations

import sys

from physlist.cli import main

if __name__ == "__main__":
    sys.exit(main(["serve", *sys.argv[1:]]))
