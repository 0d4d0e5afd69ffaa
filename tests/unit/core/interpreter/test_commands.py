from __future__ import annotations

"""
Unit tests for the transcript command grammar.

Verifies:
1. Recognition of the two supported commands.
2. Rejection of unknown or malformed commands.
3. Parsing of 'dir' and sized-file listing entries.
"""

import pytest

from shelltree.core.interpreter.commands import (
    Command,
    DirEntry,
    FileEntry,
    is_command_line,
    parse_command,
    parse_listing_entry,
)
from shelltree.domain.errors import MalformedCommand, MalformedEntry


@pytest.mark.parametrize("line, expected", [
    ("$ cd /", True),
    ("$ ls", True),
    ("dir a", False),
    ("123 b.txt", False),
    ("$cd /", False),
])
def test_is_command_line(line, expected):
    assert is_command_line(line) is expected


@pytest.mark.parametrize("text, target", [
    ("cd /", "/"),
    ("cd ..", ".."),
    ("cd abc", "abc"),
    ("cd my dir", "my dir"),
])
def test_parse_change_directory(text, target):
    parsed = parse_command(text)
    assert parsed.command is Command.CHANGE_DIRECTORY
    assert parsed.target == target


def test_parse_list():
    parsed = parse_command("ls")
    assert parsed.command is Command.LIST
    assert parsed.target is None


def test_cd_without_target_is_malformed():
    with pytest.raises(MalformedCommand):
        parse_command("cd")


def test_ls_with_arguments_is_malformed():
    with pytest.raises(MalformedCommand):
        parse_command("ls -la")


@pytest.mark.parametrize("text", ["rm -rf /", "pwd", "cdx foo", ""])
def test_unknown_commands_are_rejected_not_treated_as_ls(text):
    """
    Anything other than cd/ls is an error. Unknown commands are never
    silently downgraded to a listing.
    """
    with pytest.raises(MalformedCommand):
        parse_command(text)


def test_parse_dir_entry():
    assert parse_listing_entry("dir a") == DirEntry("a")


def test_parse_file_entry():
    assert parse_listing_entry("14848514 b.txt") == FileEntry(name="b.txt", size=14848514)


def test_parse_file_entry_keeps_spaces_in_name():
    assert parse_listing_entry("10 my file.txt") == FileEntry(name="my file.txt", size=10)


@pytest.mark.parametrize("line", ["dir", "123", "abc b.txt", "-5 neg.txt", "1.5 frac"])
def test_malformed_listing_entries(line):
    with pytest.raises(MalformedEntry):
        parse_listing_entry(line)
