"""
filestreams.streams - stream handle wrapper

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import io
import logging

from .base import StreamError
from .openers import open_target


class Stream:
    """Manage a native stream handle."""

    # allows close() from __del__ if the constructor did not get to open
    _handle = None

    def __init__(self, path, mode):
        """
        Open the handle.

        path: local path, or scheme-qualified target such as `temp://`
        mode: native open mode, e.g. 'r', 'wb', 'r+b', 'a'
        """
        self.name = str(path)
        self.mode = mode
        self.wrapper_type = ''
        self._handle, self.wrapper_type = open_target(path, mode)
        logging.debug('Opened %r', self)

    def __del__(self):
        self.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        """Ensure handle is released."""
        logging.debug('Exiting %r', self)
        self.close()

    def __repr__(self):
        """String representation."""
        return (
            f"<{type(self).__name__} name='{self.name}' mode='{self.mode}'"
            f"{' [closed]' if self.closed else ''}>"
        )

    @property
    def closed(self):
        """Handle has been released, here or elsewhere."""
        return self._handle is None or self._handle.closed

    @property
    def handle(self):
        """The native handle; still owned by this stream."""
        return self._checked_handle()

    def _checked_handle(self):
        if self.closed:
            raise StreamError('Invalid resource.')
        return self._handle

    def close(self):
        """
        Release the handle.
        Returns False if the native close failed, True otherwise.
        """
        if self.closed:
            self._handle = None
            return True
        logging.debug('Closing %r', self)
        handle, self._handle = self._handle, None
        try:
            handle.close()
        except OSError as e:
            logging.warning('Failed to close stream `%s`: %s', self.name, e)
            return False
        return True

    def at_end(self):
        """No more data can be read from the current position."""
        if self.closed:
            return True
        handle = self._handle
        try:
            if handle.readable():
                if hasattr(handle, 'peek'):
                    return not handle.peek(1)
                if handle.seekable():
                    pos = handle.tell()
                    probe = handle.read(1)
                    handle.seek(pos)
                    return not probe
            elif handle.seekable():
                pos = handle.tell()
                end = handle.seek(0, io.SEEK_END)
                handle.seek(pos)
                return pos >= end
        except (OSError, ValueError) as e:
            raise StreamError('Unable to check for end of resource.') from e
        # not seekable and no lookahead: can't tell without consuming
        return False

    def read_line(self, length, ending=None):
        """
        Read a line.
        Reading ends when `length` bytes have been read, when `ending` is found
        (which is consumed but not included in the return value), or at end of
        stream, whichever comes first.

        length: maximum number of bytes to read (characters for text streams)
        ending: optional delimiter, of the same type as the stream contents
        """
        if length < 1:
            raise ValueError(f'Length must be positive; not {length}.')
        handle = self._checked_handle()
        try:
            # empty bytes or str, depending on the handle
            line = handle.read(0)
            while len(line) < length:
                char = handle.read(1)
                if not char:
                    break
                line += char
                if ending and line.endswith(ending):
                    return line[:-len(ending)]
        except (OSError, ValueError) as e:
            raise StreamError('Unable to read from resource.') from e
        return line

    def read_contents(self, max_length=-1, offset=-1):
        """
        Read remainder of the stream.

        max_length: maximum bytes to read; negative to read until end of stream
        offset: seek to this offset before reading; negative to read from the
            current position
        """
        handle = self._checked_handle()
        try:
            if offset >= 0:
                handle.seek(offset)
            data = handle.read(max(max_length, -1))
            if data is None:
                data = handle.read(0)
        except (OSError, ValueError) as e:
            raise StreamError('Unable to read from resource.') from e
        return data

    def get_metadata(self):
        """Properties of the stream and its native handle."""
        handle = self._checked_handle()
        eof = self.at_end()
        try:
            return {
                'timed_out': False,
                'eof': eof,
                'wrapper_type': self.wrapper_type,
                'stream_type': type(handle).__name__,
                'mode': self.mode,
                'seekable': handle.seekable(),
                'readable': handle.readable(),
                'writable': handle.writable(),
                'uri': self.name,
            }
        except (OSError, ValueError) as e:
            raise StreamError('Unable to retrieve metadata for resource.') from e

    def current_position(self):
        """Position of the read/write pointer."""
        handle = self._checked_handle()
        try:
            return handle.tell()
        except (OSError, ValueError) as e:
            raise StreamError(
                'Unable to retrieve current position for resource.'
            ) from e

    def read(self, length):
        """Read up to `length` bytes; fewer at end of stream."""
        if length < 1:
            raise ValueError(f'Length must be positive; not {length}.')
        handle = self._checked_handle()
        try:
            data = handle.read(length)
            if data is None:
                # non-blocking handle with nothing available
                data = handle.read(0)
        except (OSError, ValueError) as e:
            raise StreamError('Unable to read from resource.') from e
        return data

    def write(self, data, length=None):
        """
        Write data, or its first `length` bytes if given.
        Returns the number of bytes written, which may be less than requested.
        """
        handle = self._checked_handle()
        if length is not None:
            data = data[:max(length, 0)]
        try:
            written = handle.write(data)
        except (OSError, ValueError) as e:
            raise StreamError('Unable to write to resource.') from e
        if written is None:
            return 0
        return written

    def seek_from_beginning(self, offset):
        """Set position to `offset`."""
        self._seek(offset, io.SEEK_SET)

    def seek_from_current(self, offset):
        """Set position to current position plus `offset`."""
        self._seek(offset, io.SEEK_CUR)

    def seek_from_end(self, offset):
        """Set position to end of stream plus `offset`."""
        self._seek(offset, io.SEEK_END)

    def _seek(self, offset, whence=io.SEEK_SET):
        handle = self._checked_handle()
        try:
            handle.seek(offset, whence)
        except (OSError, ValueError) as e:
            raise StreamError('Unable to seek.') from e
