from __future__ import annotations

"""
Network Communication Infrastructure.

Facade over the HTTP clients used to obtain remote transcripts.
"""

from shelltree.infra.network.common import is_remote_source
from shelltree.infra.network.transcript_client import fetch_transcript

__all__ = [
    "fetch_transcript",
    "is_remote_source",
]
