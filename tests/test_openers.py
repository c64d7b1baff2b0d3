"""
filestreams test suite
target resolution tests
"""

import io
import unittest

from filestreams import Stream, StreamError, openers, temporary_target
from filestreams.openers import OpenerRegistry
from .base import BaseTester


class TestOpeners(BaseTester):
    """Test opening scheme-qualified targets."""

    def test_registered(self):
        """Built-in schemes are registered."""
        self.assertIn('temp', openers.get_schemes())
        self.assertIn('memory', openers.get_schemes())

    def test_temporary_target(self):
        """Temporary targets carry the size limit."""
        self.assertEqual(temporary_target(), 'temp://')
        self.assertEqual(temporary_target(0), 'temp://')
        self.assertEqual(temporary_target(4096), 'temp://maxmemory:4096')
        with self.assertRaises(ValueError):
            temporary_target(-5)

    def test_temp_bad_option(self):
        """Malformed temporary targets fail to open."""
        for target in ('temp://maxmemory:lots', 'temp://other', 'temp://maxmemory:-3'):
            with self.assertRaises(StreamError) as cm:
                Stream(target, 'w+b')
            self.assertIn(target, str(cm.exception))

    def test_temp_text(self):
        """Temporary targets open in text mode without b."""
        with Stream('temp://', 'w+') as stream:
            stream.write('line one\nline two')
            stream.seek_from_beginning(0)
            self.assertEqual(stream.read_line(100, '\n'), 'line one')
            self.assertEqual(stream.read_contents(), 'line two')

    def test_memory_binary(self):
        """Memory targets open a bytes buffer."""
        with Stream('memory://', 'w+b') as stream:
            self.assertIsInstance(stream.handle, io.BytesIO)
            stream.write(b'hello world')
            self.assertEqual(stream.read_contents(-1, 6), b'world')
            self.assertEqual(stream.get_metadata()['wrapper_type'], 'memory')

    def test_memory_text(self):
        """Memory targets open a string buffer in text mode."""
        with Stream('memory://', 'w+') as stream:
            self.assertIsInstance(stream.handle, io.StringIO)
            stream.write('hi')
            stream.seek_from_beginning(0)
            self.assertEqual(stream.read(2), 'hi')

    def test_memory_bad_option(self):
        """Memory targets take no options."""
        with self.assertRaises(StreamError):
            Stream('memory://maxmemory:10', 'w+b')

    def test_unknown_scheme(self):
        """Unregistered schemes are taken as local paths."""
        with self.assertRaises(StreamError) as cm:
            Stream('nosuch://thing', 'rb')
        self.assertIn('nosuch://thing', str(cm.exception))

    def test_register(self):
        """Openers are registered by scheme and used for their targets."""
        registry = OpenerRegistry()

        @registry.register('null')
        def open_null(options, mode):
            return io.BytesIO(options.encode())

        handle, wrapper = registry.open('null://payload', 'rb')
        self.assertEqual(wrapper, 'null')
        self.assertEqual(handle.read(), b'payload')
        self.assertEqual(registry.get_schemes(), ('null',))

    def test_register_twice(self):
        """Schemes can only be registered once."""
        registry = OpenerRegistry()
        registry.register('null')(lambda options, mode: io.BytesIO())
        with self.assertRaises(ValueError):
            registry.register('null')(lambda options, mode: io.BytesIO())

    def test_register_unnamed(self):
        """Schemes must have a name."""
        registry = OpenerRegistry()
        with self.assertRaises(ValueError):
            registry.register('')(lambda options, mode: io.BytesIO())


if __name__ == '__main__':
    unittest.main()
