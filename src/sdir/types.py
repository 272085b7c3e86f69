from enum import Enum
from os import PathLike
from typing import Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class FileType(Enum):
    """Enumeration of entry kinds produced by path classification.

    Symbolic links below the traversal root are never followed, so they are
    classified as FILE and carry their own symlink flag.

    Attributes:
        FILE: Regular file or any other opaque leaf entry
        DIRECTORY: Directory
    """

    FILE = "file"
    DIRECTORY = "directory"
