from __future__ import annotations

from pathlib import Path

import requests


def is_url(location: str) -> bool:
    return location.lower().startswith(("http://", "https://"))


def load_ead(location: str, *, timeout_s: int = 30) -> bytes:
    """Return raw EAD XML from a local path or an HTTP(S) URL."""
    if is_url(location):
        r = requests.get(location, timeout=timeout_s)
        if r.status_code != 200:
            raise RuntimeError(f"Fetching {location} failed ({r.status_code}): {r.text[:200]}")
        return r.content

    p = Path(location).expanduser()
    if not p.exists():
        raise FileNotFoundError(f"EAD file not found: {p}")
    return p.read_bytes()
