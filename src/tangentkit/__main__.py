"""Allows ``python -m tangentkit a b c x``."""

import sys

from tangentkit.cli import main

sys.exit(main())
