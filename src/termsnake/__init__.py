"""Terminal Snake: a wraparound grid, a growing tail and a fixed-rate game loop."""

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
