"""Rendered output as role-tagged lines.

A Document is what every renderer produces and every output sink consumes. Its
plain text is the exact payload written to the clipboard; the roles attached to
each span only tell a console sink how the span may be styled.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, NamedTuple, Optional, Sequence, Tuple


class Role(str, Enum):
    """Presentation role of a span of rendered text.

    Values:
        TEXT: Unstyled text
        HEADER: Header and path lines
        GUIDE: Tree guides and connectors
        DIRECTORY: Directory labels
        FILE: File labels
        SYMLINK: Symlink target annotations
        CONTENT: Embedded file content
        ERROR: Error annotations
    """

    TEXT = "text"
    HEADER = "header"
    GUIDE = "guide"
    DIRECTORY = "directory"
    FILE = "file"
    SYMLINK = "symlink"
    CONTENT = "content"
    ERROR = "error"


class Span(NamedTuple):
    """A run of text with a single role."""

    text: str
    role: Role = Role.TEXT


Line = Tuple[Span, ...]


@dataclass(frozen=True)
class Document:
    """An immutable rendered artifact.

    Lines are joined with "\\n" to form the plain text; a trailing empty line
    therefore stands for a trailing newline.

    Attributes:
        lines: The rendered lines, each a sequence of spans.

    Example:
        >>> doc = Document.from_text("./notes.txt\\nhello", first_line_role=Role.HEADER)
        >>> doc.plain
        './notes.txt\\nhello'
        >>> doc.lines[0][0].role
        <Role.HEADER: 'header'>
    """

    lines: Tuple[Line, ...]

    @classmethod
    def from_lines(cls, lines: Iterable[Sequence[Span]]) -> "Document":
        return cls(tuple(tuple(line) for line in lines))

    @classmethod
    def from_text(cls, text: str, role: Role = Role.TEXT, first_line_role: Optional[Role] = None) -> "Document":
        """Wrap plain text, one span per line."""
        lines = []
        for index, line in enumerate(text.split("\n")):
            line_role = first_line_role if index == 0 and first_line_role is not None else role
            lines.append((Span(line, line_role),))
        return cls(tuple(lines))

    @property
    def plain(self) -> str:
        return "\n".join("".join(span.text for span in line) for line in self.lines)
