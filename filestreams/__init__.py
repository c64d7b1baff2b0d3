"""
filestreams - owned stream handles with disciplined lifecycle

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import sys as _sys
assert _sys.version_info >= (3, 11)

from .constants import VERSION as __version__
from .base import StreamError
from .openers import openers, open_target, temporary_target
from .streams import Stream
from .temporary import TemporaryStream
