from __future__ import annotations

"""
Transcript Command Grammar.

Classifies transcript lines and parses the closed two-command protocol
(cd/ls) together with the two forms of ls output.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from shelltree.domain.errors import MalformedCommand, MalformedEntry

COMMAND_MARKER = "$ "
DIR_MARKER = "dir"
PARENT_TARGET = ".."
ROOT_TARGET = "/"


class Command(Enum):
    """Commands recognised in a transcript."""
    CHANGE_DIRECTORY = "cd"
    LIST = "ls"


@dataclass(frozen=True)
class ParsedCommand:
    command: Command
    target: Optional[str] = None


@dataclass(frozen=True)
class DirEntry:
    name: str


@dataclass(frozen=True)
class FileEntry:
    name: str
    size: int


ListingEntry = Union[DirEntry, FileEntry]

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def is_command_line(line: str) -> bool:
    return line.startswith(COMMAND_MARKER)


def parse_command(text: str) -> ParsedCommand:
    """
    Parse the text following the command marker.

    Only 'cd <target>' and a bare 'ls' are accepted. Anything else is
    rejected rather than falling back to a listing.

    Args:
        text: Command text without the leading '$ '.

    Returns:
        ParsedCommand: The recognised command and its target, if any.

    Raises:
        MalformedCommand: If the text is not one of the two commands.
    """
    keyword, _, argument = text.strip().partition(" ")
    argument = argument.strip()

    if keyword == Command.CHANGE_DIRECTORY.value:
        if not argument:
            raise MalformedCommand("cd requires a target")
        return ParsedCommand(Command.CHANGE_DIRECTORY, argument)

    if keyword == Command.LIST.value:
        if argument:
            raise MalformedCommand(f"ls takes no arguments, got '{argument}'")
        return ParsedCommand(Command.LIST)

    raise MalformedCommand(f"Unsupported command '{text.strip()}'")


def parse_listing_entry(line: str) -> ListingEntry:
    """
    Parse one line of ls output.

    Args:
        line: Either 'dir <name>' or '<size> <name>'.

    Returns:
        ListingEntry: A DirEntry or FileEntry.

    Raises:
        MalformedEntry: If the line matches neither form.
    """
    head, _, name = line.strip().partition(" ")
    if not name:
        raise MalformedEntry(f"Listing entry without a name: '{line}'")

    if head == DIR_MARKER:
        return DirEntry(name)

    if not head.isdecimal():
        raise MalformedEntry(f"Invalid file size '{head}' in listing entry '{line}'")
    return FileEntry(name=name, size=int(head))
