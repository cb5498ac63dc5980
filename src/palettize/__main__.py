"""Run the command line with `python -m palettize`."""

import sys

from palettize.cli import main

sys.exit(main())
