#!/usr/bin/env python3
"""
ASCII Tracer
============
Run the command line tool from a source checkout:

    python main.py image.png -w 80 -e -t 150
"""

import sys

from ascii_tracer.cli import main


if __name__ == '__main__':
    sys.exit(main())
