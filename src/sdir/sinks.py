"""Output sinks receiving finished documents.

A sink is written exactly once per invocation, with the complete document. The
core never talks to the terminal or the clipboard directly: the command-line
layer picks the sinks and ``write_all`` hands the document to each of them.
"""

from abc import ABC, abstractmethod
from typing import Callable, Dict, List, Optional, Sequence

import pyperclip
from rich.console import Console
from rich.text import Text

from sdir.document import Document, Role
from sdir.exceptions import ClipboardUnavailableError, SinkUnavailableError

ROLE_STYLES: Dict[Role, Optional[str]] = {
    Role.TEXT: None,
    Role.HEADER: "bold",
    Role.GUIDE: "bright_black",
    Role.DIRECTORY: "bold blue",
    Role.FILE: "green",
    Role.SYMLINK: "cyan",
    Role.CONTENT: None,
    Role.ERROR: "red",
}


class OutputSink(ABC):
    """Abstract destination for a rendered document."""

    @abstractmethod
    def write(self, document: Document) -> None:
        """Write a complete document.

        Raises:
            SinkUnavailableError: If the destination cannot accept the document.
        """
        pass


class MemorySink(OutputSink):
    """Sink keeping the plain text of every document it receives.

    Example:
        >>> sink = MemorySink()
        >>> sink.write(Document.from_text("hello"))
        >>> sink.writes
        ['hello']
    """

    def __init__(self) -> None:
        self.writes: List[str] = []

    def write(self, document: Document) -> None:
        self.writes.append(document.plain)

    @property
    def text(self) -> str:
        """Plain text of the last document written, or an empty string."""
        return self.writes[-1] if self.writes else ""


class ConsoleSink(OutputSink):
    """Sink printing documents through a rich console.

    Span roles are mapped to styles when color is enabled and the console is a
    terminal. Otherwise the plain text is written to the console's file as is, so
    redirected output is byte-identical to what the clipboard receives. Spans
    without a style, embedded file content among them, are always written
    verbatim: rich would expand their tabs and strip control characters.

    Attributes:
        console (Console): The rich console written to.
        color (bool): Whether span roles are styled.
    """

    def __init__(self, console: Optional[Console] = None, color: bool = True) -> None:
        self.color = color
        self.console = (
            console
            if console is not None
            else Console(no_color=not color, highlight=False, markup=False, emoji=False, soft_wrap=True)
        )

    @property
    def styled(self) -> bool:
        return self.color and self.console.is_terminal

    def write(self, document: Document) -> None:
        plain = document.plain
        # Terminal output always ends with a line break
        end = "" if plain.endswith("\n") else "\n"

        if not self.styled:
            self._write_raw(plain + end)
            return

        for index, line in enumerate(document.lines):
            if index:
                self._write_raw("\n")
            for span in line:
                style = ROLE_STYLES[span.role]
                if style is None:
                    self._write_raw(span.text)
                else:
                    self.console.print(Text(span.text, style=style), end="", soft_wrap=True)
        self._write_raw(end)

    def _write_raw(self, text: str) -> None:
        self.console.file.write(text)
        self.console.file.flush()


class ClipboardSink(OutputSink):
    """Sink copying the plain text of a document to the system clipboard.

    Attributes:
        copy (Callable[[str], None]): Clipboard writer; pyperclip.copy by default.
    """

    def __init__(self, copy: Optional[Callable[[str], None]] = None) -> None:
        self.copy = copy if copy is not None else pyperclip.copy

    def write(self, document: Document) -> None:
        try:
            self.copy(document.plain)
        except (pyperclip.PyperclipException, OSError) as e:
            raise ClipboardUnavailableError(str(e) or type(e).__name__) from e


def write_all(document: Document, sinks: Sequence[OutputSink]) -> List[SinkUnavailableError]:
    """Write a document to every sink in order.

    A sink that is unavailable does not prevent the others from being written.

    Returns:
        The errors of the sinks that could not be written.
    """
    failures: List[SinkUnavailableError] = []
    for sink in sinks:
        try:
            sink.write(document)
        except SinkUnavailableError as e:
            failures.append(e)
    return failures
