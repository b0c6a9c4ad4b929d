"""Allow ``python -m termchess``."""

import sys

from termchess.cli import main

sys.exit(main())
