"""Command-line interface for sdir.

This module provides the `sdir` command. It parses the command line, builds the
snapshot of a file or directory, and writes the result to the terminal and, unless
disabled, to the system clipboard.

Diagnostics go to stderr: fatal problems as "Error: ..." lines, recovered ones
(unreadable subdirectories, an unavailable clipboard) as "Warning: ..." lines.

Exit Codes:
    0: Successful completion
    1: Root path missing, not usable, or (file mode) unreadable
    2: Command-line syntax error
    3: The tree could not be rendered
    126: Permission denied on the root path
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe on standard output

Example:
    # Tree of a project, copied to the clipboard
    $ sdir path/to/project

    # A single file
    $ sdir notes.txt
"""

import os
import sys
from typing import List, Optional, Sequence

from rich.console import Console

from sdir.cli.argparser import config_from_args, create_parser, validate_args
from sdir.config import Configuration
from sdir.exceptions import FileReadError, RenderError, RootPermissionError, TraversalError
from sdir.sdir import Mode, Snapshot, snapshot
from sdir.sinks import ClipboardSink, ConsoleSink, OutputSink, write_all

EXIT_ERROR = 1
EXIT_RENDER_ERROR = 3
EXIT_PERMISSION_DENIED = 126
EXIT_INTERRUPTED = 130
EXIT_BROKEN_PIPE = 141


def create_sinks(
    config: Configuration, console: Optional[Console] = None, clipboard: Optional[ClipboardSink] = None
) -> List[OutputSink]:
    """Choose the output sinks for an invocation.

    The console always receives the document. The clipboard is written last, and
    only when copying is enabled.
    """
    sinks: List[OutputSink] = [ConsoleSink(console, color=config.color)]
    if config.copy_to_clipboard:
        sinks.append(clipboard if clipboard is not None else ClipboardSink())
    return sinks


def report_tree_errors(result: Snapshot) -> None:
    """Print a warning for every directory that could not be listed."""
    for node in result.errors:
        print(f"Warning: cannot read directory '{node.relative_path}': {node.error}", file=sys.stderr)


def _silence_stdout() -> None:
    # Further writes to a closed pipe would fail again at interpreter shutdown
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, sys.stdout.fileno())


def main(
    argv: Optional[Sequence[str]] = None,
    console: Optional[Console] = None,
    clipboard: Optional[ClipboardSink] = None,
) -> None:
    """Main entry point for the sdir command-line interface.

    Args:
        argv: Command-line arguments; defaults to sys.argv[1:].
        console: Console for terminal output; a stdout console by default.
        clipboard: Clipboard sink; a pyperclip-backed sink by default.

    Exit codes are listed in the module documentation.
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        validate_args(args)
    except ValueError as e:
        parser.error(str(e))

    try:
        config = config_from_args(args)
        result = snapshot(config)
        report_tree_errors(result)

        sinks = create_sinks(config, console, clipboard)
        failures = write_all(result.document, sinks)

        for failure in failures:
            print(f"Warning: {failure}", file=sys.stderr)
        if config.copy_to_clipboard and not failures:
            what = "File content" if result.mode is Mode.FILE else "Output"
            print(f"{what} copied to clipboard.", file=sys.stderr)

    except RootPermissionError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(EXIT_PERMISSION_DENIED)
    except (TraversalError, FileReadError, FileNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(EXIT_ERROR)
    except RenderError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(EXIT_RENDER_ERROR)
    except BrokenPipeError:
        _silence_stdout()
        sys.exit(EXIT_BROKEN_PIPE)
    except KeyboardInterrupt:
        sys.exit(EXIT_INTERRUPTED)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(EXIT_ERROR)


if __name__ == "__main__":
    main()
