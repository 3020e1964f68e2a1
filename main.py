#!/usr/bin/env python3
"""
LyricSub Entry Point Script

This script initializes the CLI handler and runs the interactive lyrics export.
"""

import sys
from lyricsub.cli import CLIHandler

if __name__ == "__main__":
    if sys.version_info < (3, 8):
        sys.stderr.write("LyricSub requires Python 3.8 or later.\n")
        sys.exit(1)

    cli = CLIHandler()
    cli.run()
