from __future__ import annotations

"""
Transcript Domain Errors.

Every failure raised while interpreting a transcript or querying the
reconstructed tree derives from TranscriptError, so interface layers can
trap the whole family with a single handler.
"""

from typing import Optional


class TranscriptError(Exception):
    """
    Base class for all transcript interpretation and query failures.

    Attributes:
        line_no: 1-based transcript line that triggered the error, if known.
    """

    def __init__(self, message: str, line_no: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.line_no = line_no

    def __str__(self) -> str:
        if self.line_no is None:
            return self.message
        return f"line {self.line_no}: {self.message}"


class MalformedCommand(TranscriptError):
    """A command line does not match the cd/ls grammar."""


class MalformedEntry(TranscriptError):
    """An ls output line is neither 'dir <name>' nor '<size> <name>'."""


class NavigationError(TranscriptError):
    """A cd target cannot be resolved from the current directory."""


class PreconditionViolation(TranscriptError):
    """Output data arrived before any directory was entered."""


class QueryError(TranscriptError):
    """An aggregation query has no valid answer for the given tree."""


class TranscriptFetchError(TranscriptError):
    """A remote transcript could not be downloaded."""
