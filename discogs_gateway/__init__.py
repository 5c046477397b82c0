"""Discogs tool gateway."""
from discogs_gateway.version import VERSION

__version__ = VERSION
