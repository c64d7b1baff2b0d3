"""
filestreams.base - error kind

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""


class StreamError(IOError):
    """Failure to open, read, write, seek or inspect a stream."""
