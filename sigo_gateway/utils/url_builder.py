"""
Backend URL building
Turns a logical resource path (e.g. "Cliente/GetCliente") into an absolute backend URL
"""

import re
from typing import Optional
from urllib.parse import SplitResult, urlsplit

_REPEATED_SLASHES = re.compile(r"([^:])/{2,}")


def parse_absolute_url(url: str) -> Optional[SplitResult]:
    """Parse url, returning None unless it has both a scheme and a host"""
    try:
        parsed = urlsplit(url)
        # hostname raises ValueError on malformed IPv6 literals
        parsed.hostname
    except ValueError:
        return None
    if not parsed.scheme or not parsed.netloc:
        return None
    return parsed


def collapse_slashes(url: str) -> str:
    """Collapse runs of slashes, keeping the one after 'scheme:'"""
    return _REPEATED_SLASHES.sub(r"\1/", url)


def build_backend_url(base_url: str, path: str) -> str:
    cleaned_path = path.lstrip("/")
    base = base_url.rstrip("/")

    parsed = parse_absolute_url(base)
    if parsed is not None:
        segments = [s.lower() for s in parsed.path.split("/") if s]
        base_has_api = "api" in segments
        base = f"{parsed.scheme}://{parsed.netloc}{parsed.path.rstrip('/')}"
    else:
        base_has_api = "/api" in base.lower()

    path_has_api = cleaned_path.lower().startswith("api/")
    if base_has_api and path_has_api:
        cleaned_path = cleaned_path[len("api/"):]

    prefix = "" if base_has_api or path_has_api else "api/"
    return collapse_slashes(f"{base}/{prefix}{cleaned_path}")
