"""
filestreams.openers - resolve targets to native handles

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import io
import os
import logging
from tempfile import SpooledTemporaryFile

from .base import StreamError
from .constants import TEMP_SCHEME, MEMORY_SCHEME, PLAIN_WRAPPER


_SEPARATOR = '://'
_MAXMEMORY = 'maxmemory:'


class OpenerRegistry:
    """Retrieve handle openers by target scheme."""

    def __init__(self):
        """Set up registry."""
        self._schemes = {}

    def get_schemes(self):
        """Get tuple of all registered scheme names."""
        return tuple(self._schemes.keys())

    def register(self, scheme):
        """
        Decorator to register opener for a target scheme.

        scheme: unique scheme name, as used before :// in the target
        """

        def _decorator(opener):
            if not scheme:
                raise ValueError('No registration name given')
            if scheme in self._schemes:
                raise ValueError(
                    f'Registration name `{scheme}` '
                    f'already in use for {self._schemes[scheme]}'
                )
            opener.scheme = scheme
            self._schemes[scheme] = opener
            return opener

        return _decorator

    def get_for(self, target):
        """
        Split target into opener and scheme options.
        Returns (None, target) if the target is not scheme-qualified.
        """
        if isinstance(target, str) and _SEPARATOR in target:
            scheme, _, options = target.partition(_SEPARATOR)
            try:
                return self._schemes[scheme], options
            except KeyError:
                logging.debug(
                    'No opener for scheme `%s`, treating `%s` as a path.',
                    scheme, target
                )
        return None, target

    def open(self, target, mode):
        """
        Open a native handle on the target.
        Returns handle and the name of the wrapper that opened it.
        """
        opener, options = self.get_for(target)
        try:
            if opener is None:
                return open(os.fspath(target), mode), PLAIN_WRAPPER
            return opener(options, mode), opener.scheme
        except (OSError, ValueError, TypeError) as e:
            raise StreamError(f'Unable to open "{target}".') from e


openers = OpenerRegistry()


def open_target(target, mode):
    """Open a local path or scheme-qualified target."""
    return openers.open(target, mode)


def temporary_target(size_limit=0):
    """Target string for a temporary stream spilling to disk above size_limit."""
    if size_limit < 0:
        raise ValueError(f'Size limit must not be negative; not {size_limit}.')
    if not size_limit:
        return f'{TEMP_SCHEME}{_SEPARATOR}'
    return f'{TEMP_SCHEME}{_SEPARATOR}{_MAXMEMORY}{size_limit}'


def _is_binary_mode(mode):
    return 'b' in mode


@openers.register(TEMP_SCHEME)
def open_temp(options, mode):
    """
    Anonymous read/write stream held in memory.

    options: empty, or `maxmemory:<n>` to roll over to disk above n bytes
    """
    max_size = 0
    if options:
        if not options.startswith(_MAXMEMORY):
            raise ValueError(f'Unrecognised temporary stream option `{options}`.')
        # int() raises ValueError on malformed sizes
        max_size = int(options[len(_MAXMEMORY):])
        if max_size < 0:
            raise ValueError(f'Size limit must not be negative; not {max_size}.')
    if _is_binary_mode(mode):
        return SpooledTemporaryFile(max_size=max_size, mode='w+b')
    return SpooledTemporaryFile(max_size=max_size, mode='w+')


@openers.register(MEMORY_SCHEME)
def open_memory(options, mode):
    """Anonymous read/write stream held in memory, never spills to disk."""
    if options:
        raise ValueError(f'Unrecognised memory stream option `{options}`.')
    if _is_binary_mode(mode):
        return io.BytesIO()
    return io.StringIO()
