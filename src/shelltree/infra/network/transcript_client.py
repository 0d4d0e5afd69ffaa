from __future__ import annotations

import logging
from typing import List

import requests

from shelltree.domain.errors import TranscriptFetchError
from shelltree.infra.network.common import DEFAULT_TIMEOUT, USER_AGENT

logger = logging.getLogger(__name__)


def fetch_transcript(url: str, session_cookie: str = "") -> List[str]:
    """
    Download a transcript and split it into lines.

    Puzzle-input endpoints authenticate with a 'session' cookie, which is
    sent only when provided.

    Args:
        url: HTTP(S) location of the transcript.
        session_cookie: Optional session token.

    Returns:
        List[str]: Transcript lines without line terminators.

    Raises:
        TranscriptFetchError: On timeout, connection or HTTP failure.
    """
    headers = {"User-Agent": USER_AGENT}
    cookies = {"session": session_cookie} if session_cookie else None
    logger.debug(f"Network: Downloading transcript from {url}")

    try:
        response = requests.get(url, headers=headers, cookies=cookies, timeout=DEFAULT_TIMEOUT)
        response.raise_for_status()
    except requests.exceptions.Timeout as e:
        raise TranscriptFetchError(
            f"Timed out after {DEFAULT_TIMEOUT}s while downloading {url}"
        ) from e
    except requests.exceptions.RequestException as e:
        raise TranscriptFetchError(f"Failed to download {url}: {e}") from e

    size_kb = len(response.content) / 1024
    logger.info(f"Network: Transcript downloaded ({size_kb:.1f} KB).")
    return response.text.splitlines()
