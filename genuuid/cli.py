#!/usr/bin/env python3
"""
genuuid CLI

Usage:
    genuuid <file> [<file> ...]        # "<uuid>  <path>" per file
    genuuid -v <file>                  # debug log on stderr
    genuuid --log-file LOG <file>      # debug log into LOG
"""

import argparse
import os
import sys

from .config import setup_logging
from .identity import identifier_for

DESCRIPTION = "Extract (or create) a deterministic UUID for document files."


def cmd_identify(args) -> int:
    """Print one identifier per existing file. Returns the exit status."""
    from rich.console import Console

    if not args.files:
        Console().print(DESCRIPTION, highlight=False)
        return 0

    err = Console(stderr=True)
    failures = 0

    for path in args.files:
        if not os.path.isfile(path):
            continue
        try:
            identifier = identifier_for(path)
        except OSError as e:
            err.print(f"{path}: {e.strerror or e}", style="red",
                      markup=False, highlight=False, soft_wrap=True)
            failures += 1
            continue
        print(f"{identifier}  {path}", flush=True)

    return 1 if failures else 0


def main(argv=None):
    parser = argparse.ArgumentParser(prog="genuuid", description=DESCRIPTION)
    parser.add_argument("files", nargs="*", metavar="FILE", help="Documents to identify")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--log-file", help="Write the log to this file")

    args = parser.parse_args(argv)
    level = "DEBUG" if args.verbose or args.log_file else None
    setup_logging(level=level, log_file=args.log_file)
    sys.exit(cmd_identify(args))


if __name__ == "__main__":
    main()
