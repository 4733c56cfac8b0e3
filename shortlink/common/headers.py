"""Header parsing utilities for shortlink."""

from typing import Dict, Optional


def extract_forwarded_headers(headers: Dict[str, str]) -> Dict[str, Optional[str]]:
    """Extract X-Forwarded-* headers from request.

    Args:
        headers: Request headers dictionary

    Returns:
        Dictionary with forwarded_proto, forwarded_host, forwarded_for, real_ip
    """
    headers_lower = {k.lower(): v for k, v in headers.items()}

    return {
        "forwarded_proto": headers_lower.get("x-forwarded-proto"),
        "forwarded_host": headers_lower.get("x-forwarded-host"),
        "forwarded_for": headers_lower.get("x-forwarded-for"),
        "real_ip": headers_lower.get("x-real-ip"),
    }


def build_base_url(
    headers: Dict[str, str],
    fallback_base_url: str,
    request_scheme: Optional[str] = None,
    request_host: Optional[str] = None,
) -> str:
    """Build base URL from headers or fallback.

    Priority:
    1. X-Forwarded-Proto + X-Forwarded-Host
    2. Request scheme + host
    3. Fallback base URL from config

    Args:
        headers: Request headers
        fallback_base_url: Fallback base URL from configuration
        request_scheme: Request scheme (http/https)
        request_host: Request host

    Returns:
        Base URL (e.g., https://example.com)
    """
    forwarded = extract_forwarded_headers(headers)

    if forwarded["forwarded_proto"] and forwarded["forwarded_host"]:
        return f"{forwarded['forwarded_proto']}://{forwarded['forwarded_host']}"

    if request_scheme and request_host:
        return f"{request_scheme}://{request_host}"

    return fallback_base_url.rstrip("/")


def get_client_address(
    headers: Dict[str, str],
    peer_address: Optional[str] = None,
    trust_forwarded: bool = True,
) -> str:
    """Determine the creator's network address.

    Priority (when forwarded headers are trusted):
    1. Left-most X-Forwarded-For entry
    2. X-Real-IP
    3. Peer address of the connection

    Args:
        headers: Request headers
        peer_address: Address of the directly connected peer
        trust_forwarded: Whether proxy headers may be used

    Returns:
        Client address, or "unknown"
    """
    if trust_forwarded:
        forwarded = extract_forwarded_headers(headers)
        if forwarded["forwarded_for"]:
            first = forwarded["forwarded_for"].split(",")[0].strip()
            if first:
                return first
        if forwarded["real_ip"] and forwarded["real_ip"].strip():
            return forwarded["real_ip"].strip()

    return peer_address or "unknown"
