from typing import Optional


class SdirError(Exception):
    """
    Base class for all errors raised by sdir.

    Example:
        >>> isinstance(PathNotFoundError("missing"), SdirError)
        True
    """

    pass


class TraversalError(SdirError):
    """
    Exception raised when the traversal root cannot be resolved or read.

    A traversal error aborts the whole operation: no partial tree is returned and
    nothing is written to any output sink.

    Attributes:
        path (str): The root path that could not be traversed.
    """

    def __init__(self, path: str, message: str) -> None:
        """
        Initialize the exception with the offending root path.

        Args:
            path (str): The root path that could not be traversed.
            message (str): Human-readable description of the failure.
        """
        self.path = path
        super().__init__(message)


class PathNotFoundError(TraversalError):
    """
    Exception raised when the requested root path does not exist.

    Example:
        >>> error = PathNotFoundError("missing/dir")
        >>> str(error)
        "'missing/dir' does not exist."
    """

    def __init__(self, path: str) -> None:
        super().__init__(path, f"'{path}' does not exist.")


class RootPermissionError(TraversalError):
    """
    Exception raised when the traversal root exists but cannot be listed.

    Example:
        >>> error = RootPermissionError("/root", "Permission denied")
        >>> str(error)
        "Access denied to '/root': Permission denied"
    """

    def __init__(self, path: str, reason: str) -> None:
        self.reason = reason
        super().__init__(path, f"Access denied to '{path}': {reason}")


class NotADirectoryTraversalError(TraversalError):
    """
    Exception raised when the root path cannot be walked as a directory.

    Example:
        >>> str(NotADirectoryTraversalError("/dev/null"))
        "'/dev/null' is neither a valid file nor directory."
        >>> str(NotADirectoryTraversalError("notes.txt", "'notes.txt' is not a directory."))
        "'notes.txt' is not a directory."
    """

    def __init__(self, path: str, message: Optional[str] = None) -> None:
        super().__init__(path, message or f"'{path}' is neither a valid file nor directory.")


class FileReadError(SdirError):
    """
    Exception raised when a file cannot be read or decoded as text.

    In file mode this error is fatal for the invocation. During content embedding
    in directory mode it is converted into an unreadable marker on the node.

    Attributes:
        path (str): Path of the file that could not be read.
        reason (str): Short description of the failure.

    Example:
        >>> error = FileReadError("notes.txt", "invalid UTF-8 data")
        >>> str(error)
        "Error reading file 'notes.txt': invalid UTF-8 data"
    """

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Error reading file '{path}': {reason}")


class RenderError(SdirError):
    """
    Exception raised when a built tree or file snapshot cannot be rendered.

    Example:
        >>> str(RenderError("cannot encode name"))
        'cannot encode name'
    """

    pass


class SinkUnavailableError(SdirError):
    """
    Exception raised when an output sink cannot accept the rendered document.

    Sink failures are recoverable: the document still reaches the remaining sinks.
    """

    pass


class ClipboardUnavailableError(SinkUnavailableError):
    """
    Exception raised when the system clipboard cannot be written.

    Example:
        >>> str(ClipboardUnavailableError("no clipboard mechanism found"))
        'Clipboard unavailable: no clipboard mechanism found'
    """

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Clipboard unavailable: {reason}")


class TreeFrozenError(SdirError):
    """
    Exception raised on any attempt to modify a tree after it has been built.
    """

    pass
