"""Allow `python -m brickbreaker`."""

import sys

from .main import main

sys.exit(main())
