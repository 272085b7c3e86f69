"""Directory tree and file snapshot utilities.

This package renders a file or a directory structure as text (or JSON) and
hands the result to the terminal and the system clipboard.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("sdir")
except PackageNotFoundError:
    __version__ = "unknown"
