"""Allow running editgrid as a module: python -m editgrid."""

import sys

from .cli import main


sys.exit(main())
