from __future__ import annotations

import logging
import typing as t

from ctrlcache._cache_control import CacheControl
from ctrlcache._parse import serialize_cache_control
from ctrlcache._utils import HEADER_NAME

try:
    import httpx
except ImportError as e:
    raise ImportError(
        "httpx is required to use ctrlcache.httpx module. "
        "Please install ctrlcache with the 'httpx' extra, "
        "e.g., 'pip install ctrlcache[httpx]'."
    ) from e

__all__ = ("get_cache_control", "set_cache_control")

logger = logging.getLogger("ctrlcache.integrations")

Message = t.Union[httpx.Request, httpx.Response]


def get_cache_control(message: Message) -> CacheControl:
    """
    Read the Cache-Control header of an httpx request or response.

    A missing header gives an empty CacheControl.
    """
    header = message.headers.get(HEADER_NAME)
    if header is None:
        logger.debug("No Cache-Control header found")
    return CacheControl.parse(header)


def set_cache_control(
    message: Message,
    settings: t.Union[CacheControl, t.Mapping[str, t.Any]],
    *,
    overwrite: bool = True,
) -> None:
    """
    Write settings into the Cache-Control header of an httpx request or response.

    Args:
        message: The request or response to update in place.
        settings: A CacheControl or a settings mapping.
        overwrite: Replace an existing Cache-Control header. When False an
            existing header is left untouched.
    """
    if not overwrite and HEADER_NAME in message.headers:
        logger.debug("Keeping the existing Cache-Control header")
        return

    value = settings.serialize() if isinstance(settings, CacheControl) else serialize_cache_control(settings)
    if not value:
        return

    logger.debug(f"Setting Cache-Control header to '{value}'")
    message.headers[HEADER_NAME] = value
