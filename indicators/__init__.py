"""
Indicator document Python package.

This package decodes monitoring indicator documents (metrics, indicators with
alert thresholds, and documentation sections) from YAML and validates them.
See README.md for usage.
"""

from .__version__ import __version__

__all__ = ["__version__"]
