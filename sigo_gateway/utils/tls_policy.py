"""
TLS trust policy for backend calls

Certificate validation is relaxed only for a local HTTPS backend outside
production (the development backend runs on a self-signed certificate).
"""

from typing import Optional
from urllib.parse import urlsplit

LOOPBACK_HOSTS = ("localhost", "127.0.0.1", "::1")

IPV4_ANY = "0.0.0.0"


def is_production_environment(environment: str) -> bool:
    return environment.strip().lower() == "production"


def should_relax_tls(base_url: str, environment: str) -> bool:
    """Return True if backend certificate validation may be skipped"""
    if is_production_environment(environment):
        return False

    candidate = base_url if base_url.startswith("http") else f"https://{base_url}"
    try:
        parsed = urlsplit(candidate)
        hostname = parsed.hostname
    except ValueError:
        return any(host in base_url for host in LOOPBACK_HOSTS)

    return parsed.scheme == "https" and hostname in LOOPBACK_HOSTS


def relaxed_local_address(base_url: str) -> Optional[str]:
    """
    Source address for the relaxed transport.

    Binding to 0.0.0.0 keeps "localhost" on IPv4, where the development
    backend listens. An IPv6 literal host such as [::1] cannot be reached
    from an IPv4 socket, so no bind is applied for it.
    """
    try:
        hostname = urlsplit(base_url).hostname
    except ValueError:
        return IPV4_ANY
    if hostname and ":" in hostname:
        return None
    return IPV4_ANY
