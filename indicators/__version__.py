"""
Version information for the indicator document package.

The version is read from the installed distribution metadata, which is built
from pyproject.toml, so there is a single place to bump it.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("indicator-document")
except PackageNotFoundError:
    # Running from a source checkout without installing
    __version__ = "0.0.0-dev"
