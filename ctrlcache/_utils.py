from __future__ import annotations

from email.utils import formatdate

HEADER_NAME = "Cache-Control"


def generate_http_date() -> str:
    """
    Generate a Date header value for HTTP responses.
    Returns date in RFC 1123 format (required by HTTP/1.1).

    Example output: 'Sun, 26 Oct 2025 12:34:56 GMT'
    """
    return formatdate(timeval=None, localtime=False, usegmt=True)
