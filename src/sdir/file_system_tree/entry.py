"""Classification of filesystem items into traversal entries."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from sdir.exceptions import NotADirectoryTraversalError, PathNotFoundError
from sdir.types import FileType, PathType

ROOT_RELATIVE_PATH = "./"


@dataclass(frozen=True)
class Entry:
    """A filesystem item discovered during traversal, before filtering.

    Attributes:
        name: Base name of the item.
        relative_path: Path relative to the traversal root, "./"-prefixed, with
            forward slashes on every platform. The root itself is "./".
        kind: FILE or DIRECTORY.
        depth: Distance from the root, which has depth 0.
        path: Concrete filesystem path of the item.
        is_symlink: True if the item is a symbolic link.
        symlink_target: Link target as stored in the link, if readable.
    """

    name: str
    relative_path: str
    kind: FileType
    depth: int
    path: Path
    is_symlink: bool = False
    symlink_target: Optional[str] = None

    @property
    def is_dir(self) -> bool:
        return self.kind is FileType.DIRECTORY

    @property
    def match_path(self) -> str:
        """Root-relative path in the form ignore rules expect.

        The "./" prefix is dropped and directories get a trailing slash.

        Example:
            >>> entry = Entry("build", "./src/build", FileType.DIRECTORY, 2, Path("src/build"))
            >>> entry.match_path
            'src/build/'
        """
        path = self.relative_path[len(ROOT_RELATIVE_PATH) :]  # noqa: E203
        if self.is_dir and path:
            return path + "/"
        return path


def join_relative(parent_relative_path: str, name: str) -> str:
    """Append a child name to a "./"-prefixed relative path.

    Example:
        >>> join_relative("./", "src")
        './src'
        >>> join_relative("./src", "main.py")
        './src/main.py'
    """
    if parent_relative_path == ROOT_RELATIVE_PATH:
        return ROOT_RELATIVE_PATH + name
    return f"{parent_relative_path}/{name}"


def classify(path: Path, relative_path: str, depth: int) -> Entry:
    """Classify a descendant of the traversal root.

    Symbolic links are never followed: a link is an opaque FILE entry whatever its
    target, which keeps the walk acyclic. Items that cannot be inspected are
    treated as files.

    Args:
        path: Filesystem path of the item.
        relative_path: "./"-prefixed path of the item relative to the root.
        depth: Depth of the item, root = 0.

    Returns:
        The classified entry.
    """
    is_symlink = path.is_symlink()
    symlink_target = None

    if is_symlink:
        try:
            symlink_target = os.readlink(path)
        except OSError:
            pass
        kind = FileType.FILE
    else:
        try:
            kind = FileType.DIRECTORY if path.is_dir() else FileType.FILE
        except OSError:
            kind = FileType.FILE

    return Entry(
        name=path.name,
        relative_path=relative_path,
        kind=kind,
        depth=depth,
        path=path,
        is_symlink=is_symlink,
        symlink_target=symlink_target,
    )


def display_name(root_path: PathType) -> str:
    """Return the name used to identify a root in headers.

    For "." and other relative specifications this is the real name of the
    directory they resolve to.

    Example:
        >>> display_name("projects/demo/")
        'demo'
    """
    path = Path(root_path)
    name = path.name
    if name in ("", ".."):
        name = path.resolve().name
    return name or str(root_path)


def classify_root(root_path: PathType) -> Entry:
    """Classify the path an invocation was started with.

    Unlike descendants, the root is resolved through symbolic links: a link to a
    directory given on the command line is walked.

    Args:
        root_path: File or directory path as given by the user.

    Returns:
        A depth-0 entry whose kind selects file mode or directory mode.

    Raises:
        PathNotFoundError: If the path does not exist.
        NotADirectoryTraversalError: If the path is neither a regular file nor a directory.
    """
    path = Path(root_path)
    if not path.exists():
        raise PathNotFoundError(str(root_path))

    if path.is_dir():
        kind = FileType.DIRECTORY
    elif path.is_file():
        kind = FileType.FILE
    else:
        raise NotADirectoryTraversalError(str(root_path))

    return Entry(
        name=display_name(root_path),
        relative_path=ROOT_RELATIVE_PATH,
        kind=kind,
        depth=0,
        path=path,
    )
