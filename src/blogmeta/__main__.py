"""Allow running as ``python -m blogmeta``."""

import sys

from blogmeta.main import main

sys.exit(main())
