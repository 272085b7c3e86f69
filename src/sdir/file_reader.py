"""Reading single files for file mode and for content embedding."""

import os
from pathlib import Path
from typing import Optional, Tuple

from sdir.exceptions import FileReadError
from sdir.types import PathType

UNREADABLE_MARKER = "[unreadable: {reason}]"


def to_display_path(path: PathType, cwd: Optional[PathType] = None) -> str:
    """Express a path relative to the working directory in "./name" form.

    Separators are always forward slashes. Paths outside the working directory keep
    their "../" form, and a path on another drive falls back to its base name.

    Args:
        path: Path to express.
        cwd: Working directory; defaults to the process's current directory.

    Returns:
        The normalized display path.

    Example:
        >>> to_display_path("/work/docs/notes.txt", cwd="/work")
        './docs/notes.txt'
        >>> to_display_path("/elsewhere/notes.txt", cwd="/work")
        '../elsewhere/notes.txt'
    """
    base = os.fspath(cwd) if cwd is not None else os.getcwd()
    try:
        relative = os.path.relpath(os.path.abspath(os.path.join(base, os.fspath(path))), base)
    except ValueError:
        relative = Path(path).name

    relative = relative.replace(os.sep, "/")
    if os.altsep:
        relative = relative.replace(os.altsep, "/")

    if relative.startswith("./") or relative.startswith("../"):
        return relative
    return f"./{relative}"


def read_text(path: PathType) -> str:
    """Read a whole file as strict UTF-8 text, byte for byte.

    Line endings are preserved; no transcoding or content-type detection happens.

    Raises:
        FileReadError: If the file cannot be opened, read, or decoded.
    """
    try:
        data = Path(path).read_bytes()
    except OSError as e:
        raise FileReadError(os.fspath(path), e.strerror or str(e)) from e

    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise FileReadError(os.fspath(path), f"not valid UTF-8 text ({e.reason} at byte {e.start})") from e


def read_file(path: PathType, cwd: Optional[PathType] = None) -> Tuple[str, str]:
    """Read a file for file mode.

    Args:
        path: File to read.
        cwd: Working directory the display path is relative to.

    Returns:
        A (display_path, content) pair.

    Raises:
        FileReadError: If the file cannot be read or decoded.
    """
    return to_display_path(path, cwd), read_text(path)


def format_file(display_path: str, content: str) -> str:
    """Format a file snapshot: the display path, a line break, then the content verbatim.

    Example:
        >>> format_file("./notes.txt", "hello")
        './notes.txt\\nhello'
    """
    return f"{display_path}\n{content}"


def read_content(path: PathType) -> str:
    """Read a file for embedding in a tree.

    Read failures never propagate: they yield an explicit unreadable marker so that
    one bad file cannot abort a walk.

    Returns:
        The decoded text, or "[unreadable: <reason>]".
    """
    try:
        return read_text(path)
    except FileReadError as e:
        return UNREADABLE_MARKER.format(reason=e.reason)
