import sys

from ascii_tracer.cli import main

sys.exit(main())
