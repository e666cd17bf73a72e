"""Allow ``python -m geospacer``."""

import sys

from .main import main

sys.exit(main())
