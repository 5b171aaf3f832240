from __future__ import annotations

import logging
import typing as t

from ctrlcache._parse import serialize_cache_control
from ctrlcache._settings import CacheControlSettings, Number
from ctrlcache._utils import HEADER_NAME, generate_http_date

try:
    import fastapi
except ImportError as e:
    raise ImportError(
        "fastapi is required to use ctrlcache.fastapi module. "
        "Please install ctrlcache with the 'fastapi' extra, "
        "e.g., 'pip install ctrlcache[fastapi]'."
    ) from e

__all__ = ("cache",)

logger = logging.getLogger("ctrlcache.integrations")


def cache(
    *,
    max_age: Number | None = None,
    s_maxage: Number | None = None,
    max_stale: Number | None = None,
    min_fresh: Number | None = None,
    must_revalidate: bool = False,
    no_cache: bool = False,
    no_store: bool = False,
    no_transform: bool = False,
    only_if_cached: bool = False,
    public: bool = False,
    private: bool = False,
    proxy_revalidate: bool = False,
    stale_while_revalidate: Number | None = None,
    stale_if_error: Number | None = None,
) -> t.Any:
    """
    Add HTTP Cache-Control headers to FastAPI responses.

    The directives are serialized in the usual directive order, so the header
    text matches what ``serialize_cache_control`` produces for the same
    settings.

    Args:
        max_age: Maximum time in seconds a response can be cached.
            [RFC 9111, Section 5.2.2.1]
        s_maxage: Maximum time in seconds for shared caches (proxies, CDNs).
            [RFC 9111, Section 5.2.2.10]
        max_stale: Seconds of staleness a client accepts. [RFC 9111, Section 5.2.1.2]
        min_fresh: Seconds the response must stay fresh. [RFC 9111, Section 5.2.1.3]
        must_revalidate: Cache MUST revalidate stale responses.
            [RFC 9111, Section 5.2.2.2]
        no_cache: Response can be cached but MUST be revalidated before use.
            [RFC 9111, Section 5.2.2.4]
        no_store: Response MUST NOT be stored in any cache.
            [RFC 9111, Section 5.2.2.5]
        no_transform: Prohibits any transformations to the response.
            [RFC 9111, Section 5.2.2.6]
        only_if_cached: Only a stored response is wanted. [RFC 9111, Section 5.2.1.7]
        public: Marks response as cacheable by any cache.
            [RFC 9111, Section 5.2.2.9]
        private: Marks response as cacheable only by private caches (browsers).
            [RFC 9111, Section 5.2.2.7]
        proxy_revalidate: Like must_revalidate but only for shared caches.
            [RFC 9111, Section 5.2.2.8]
        stale_while_revalidate: Allow stale response while revalidating in background.
            [RFC 5861, Section 3]
        stale_if_error: Allow stale response if origin server returns error.
            [RFC 5861, Section 4]

    Returns:
        A dependency that adds Cache-Control and Date headers to the response.

    Examples:
        >>> from fastapi import FastAPI
        >>> from ctrlcache.fastapi import cache
        >>>
        >>> app = FastAPI()
        >>>
        >>> @app.get("/api/news", dependencies=[cache(max_age=300, stale_while_revalidate=86400, public=True)])
        >>> async def get_news():
        ...     return {"news": "articles"}

    Notes:
        - Conflicting directives (e.g., public and private) will both be set.
        - If no directive is set, neither header is added.
    """
    settings: CacheControlSettings = {
        "max_age": max_age,
        "s_maxage": s_maxage,
        "max_stale": max_stale,
        "min_fresh": min_fresh,
        "must_revalidate": must_revalidate,
        "no_cache": no_cache,
        "no_store": no_store,
        "no_transform": no_transform,
        "only_if_cached": only_if_cached,
        "public": public,
        "private": private,
        "proxy_revalidate": proxy_revalidate,
        "stale_while_revalidate": stale_while_revalidate,
        "stale_if_error": stale_if_error,
    }
    value = serialize_cache_control(settings)

    def add_cache_headers(response: fastapi.Response) -> None:
        """Add Cache-Control headers to the response."""
        if not value:
            return

        logger.debug(f"Setting Cache-Control header to '{value}'")
        response.headers["Date"] = generate_http_date()
        response.headers[HEADER_NAME] = value

    return fastapi.Depends(add_cache_headers)
