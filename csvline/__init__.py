"""Fast decoding of a single CSV line into Python objects.

``csvline.parse`` splits a line into fields; ``csvline.decode`` turns them
into typed values.
"""

__version__ = "0.3.0"
__all__ = ["decode", "parse"]