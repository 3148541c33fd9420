"""Allow ``python -m template_sync``."""

import sys

from template_sync.cli import main

sys.exit(main())
