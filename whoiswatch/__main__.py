"""Allow ``python -m whoiswatch``."""

import sys

from whoiswatch.cli import main

sys.exit(main())
