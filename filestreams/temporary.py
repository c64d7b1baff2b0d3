"""
filestreams.temporary - anonymous memory-backed streams

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import logging

from .base import StreamError
from .constants import TEMP_MODE, DEFAULT_SIZE_LIMIT
from .openers import temporary_target
from .streams import Stream


class TemporaryStream:
    """Read/write binary stream in memory, optionally rolling over to disk."""

    _stream = None

    def __init__(self, size_limit=DEFAULT_SIZE_LIMIT):
        """
        Open an anonymous stream.

        size_limit: bytes to hold in memory before moving to a temporary file
            on disk; 0 to keep everything in memory
        """
        self.size_limit = size_limit
        self._stream = Stream(temporary_target(size_limit), TEMP_MODE)

    @classmethod
    def from_bytes(cls, data):
        """Temporary stream holding data, positioned at the start."""
        temp = cls()
        try:
            temp.write(data)
            temp.seek_from_beginning(0)
        except StreamError:
            temp.close()
            raise
        return temp

    @classmethod
    def from_string(cls, text, encoding='utf-8'):
        """Temporary stream holding encoded text, positioned at the start."""
        return cls.from_bytes(text.encode(encoding))

    def __getattr__(self, attr):
        """Delegate undefined attributes to wrapped stream."""
        return getattr(self._stream, attr)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        """Ensure stream is closed."""
        logging.debug('Exiting %r', self)
        self.close()

    def __repr__(self):
        """String representation."""
        return (
            f"<{type(self).__name__} size_limit={self.size_limit}"
            f"{' [closed]' if self.closed else ''}>"
        )
