"""
httpstub Core - Version Constants

Single source of truth for the package version.

Usage:
    from httpstub.core.version import __version__
"""

# Update this when releasing new versions
__version__ = "1.0.0"


__all__ = ['__version__']
