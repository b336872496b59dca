"""Allow running pixbuild with ``python -m pixbuild``."""

import sys

from pixbuild.cli import main


sys.exit(main())
