"""
tailog: the last N lines of a file, read from the end backwards.
"""

from .tail import BUFFER_SIZE, DEFAULT_N_LINES, ShortReadError, tailog
from .version import __version__

__all__ = ["tailog", "ShortReadError", "BUFFER_SIZE", "DEFAULT_N_LINES", "__version__"]
