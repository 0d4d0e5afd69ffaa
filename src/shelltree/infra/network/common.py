from __future__ import annotations

USER_AGENT = "shelltree-client/0.1.0"
DEFAULT_TIMEOUT = 10

_REMOTE_SCHEMES = ("http://", "https://")


def is_remote_source(path: str) -> bool:
    """Tell whether a transcript source points at an HTTP(S) resource."""
    return (path or "").strip().lower().startswith(_REMOTE_SCHEMES)
