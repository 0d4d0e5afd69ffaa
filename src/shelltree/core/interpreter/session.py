from __future__ import annotations

"""
Transcript Interpreter.

Replays a shell transcript one line at a time and rebuilds the directory
tree it describes. All state (the root list and the current directory)
lives on the interpreter instance, one instance per transcript.
"""

import logging
from typing import Iterable, List, Optional

from shelltree.core.interpreter.commands import (
    COMMAND_MARKER,
    PARENT_TARGET,
    ROOT_TARGET,
    Command,
    DirEntry,
    is_command_line,
    parse_command,
    parse_listing_entry,
)
from shelltree.domain.errors import (
    NavigationError,
    PreconditionViolation,
    TranscriptError,
)
from shelltree.domain.tree_models import Directory

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# INTERPRETER
# -----------------------------------------------------------------------------

class TranscriptInterpreter:
    """
    Stateful replay of a cd/ls transcript.

    Attributes:
        roots: Directories created without a parent. Holds the single root
            once the first cd has run; it also keeps the tree alive.
        current: Directory the session is inside, None before the first cd.
    """

    def __init__(self) -> None:
        self.roots: List[Directory] = []
        self.current: Optional[Directory] = None
        self.lines_consumed = 0

    @property
    def root(self) -> Directory:
        if not self.roots:
            raise NavigationError("Transcript has not created a root directory yet")
        return self.roots[0]

    # -------------------------------------------------------------------------
    # Line dispatch
    # -------------------------------------------------------------------------

    def feed(self, line: str) -> None:
        """
        Interpret a single transcript line.

        Args:
            line: One transcript line without its trailing newline.

        Raises:
            TranscriptError: On any grammar, navigation or ordering problem.
        """
        self.lines_consumed += 1

        if not is_command_line(line):
            self._record_listing_entry(line)
            return

        parsed = parse_command(line[len(COMMAND_MARKER):])
        if parsed.command is Command.CHANGE_DIRECTORY:
            self.current = self._change_directory(parsed.target or "")
            logger.debug(f"cd {parsed.target} -> {self.current.name}")
        else:
            # ls only arms the interpreter for the output lines that follow.
            logger.debug(f"ls in {self.current.name if self.current else '<none>'}")

    def feed_lines(self, lines: Iterable[str]) -> Directory:
        """
        Interpret every line in order and return the root.

        Line endings are stripped and blank lines skipped. Errors are
        re-raised with the offending 1-based line number attached.

        Args:
            lines: Ordered transcript lines.

        Returns:
            Directory: The root of the rebuilt tree.
        """
        for line_no, raw in enumerate(lines, start=1):
            line = raw.rstrip("\r\n")
            if not line.strip():
                continue
            try:
                self.feed(line)
            except TranscriptError as e:
                if e.line_no is None:
                    e.line_no = line_no
                raise

        logger.debug(f"Transcript replay finished after {self.lines_consumed} lines.")
        return self.root

    # -------------------------------------------------------------------------
    # Command semantics
    # -------------------------------------------------------------------------

    def _change_directory(self, target: str) -> Directory:
        current = self.current

        if target == PARENT_TARGET:
            if current is None or current.parent is None:
                raise NavigationError("Cannot leave the root directory: no parent")
            return current.parent

        # The first cd of the session, whatever its target, creates the root.
        if not self.roots:
            root = Directory(target)
            self.roots.append(root)
            logger.debug(f"Created root directory '{target}'")
            return root

        if target == ROOT_TARGET:
            return self.roots[0]

        if current is None:
            raise NavigationError(f"Cannot enter '{target}': no current directory")

        if not current.has_subdirectory(target):
            current.add_subdirectory(target)
        return current.subdirectory_named(target)

    def _record_listing_entry(self, line: str) -> None:
        if self.current is None:
            raise PreconditionViolation(
                f"Listing output '{line}' received before any cd command"
            )

        entry = parse_listing_entry(line)
        if isinstance(entry, DirEntry):
            # No duplicate check here, unlike the cd creation path.
            self.current.add_subdirectory(entry.name)
        else:
            self.current.add_file(entry.name, entry.size)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_tree(lines: Iterable[str]) -> Directory:
    """
    Rebuild the directory tree described by a transcript.

    Args:
        lines: Ordered transcript lines.

    Returns:
        Directory: Root of the rebuilt tree.
    """
    return TranscriptInterpreter().feed_lines(lines)
