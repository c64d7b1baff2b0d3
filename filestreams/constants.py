"""
filestreams.constants - version and defaults

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

VERSION = '0.4.0'

# scheme prefixes for targets that are not local paths
TEMP_SCHEME = 'temp'
MEMORY_SCHEME = 'memory'

# wrapper type reported for local paths
PLAIN_WRAPPER = 'plainfile'

# temporary streams are always read/write binary
TEMP_MODE = 'w+b'

# 0 means keep everything in memory
DEFAULT_SIZE_LIMIT = 0
