import httpx
from inline_snapshot import snapshot

from ctrlcache import CacheControl
from ctrlcache.httpx import get_cache_control, set_cache_control


def test_get_cache_control_from_response():
    response = httpx.Response(200, headers={"Cache-Control": "public, max-age=3600, x-extension"})

    cache_control = get_cache_control(response)

    assert cache_control.settings == {"public": True, "max_age": 3600}


def test_get_cache_control_from_request():
    request = httpx.Request("GET", "https://example.com", headers={"cache-control": "no-cache, max-stale=30"})

    assert get_cache_control(request).settings == {"no_cache": True, "max_stale": 30}


def test_get_cache_control_missing_header():
    response = httpx.Response(200)

    assert get_cache_control(response).settings == {}


def test_set_cache_control_from_mapping():
    response = httpx.Response(200)

    set_cache_control(response, {"stale_if_error": 60, "max_age": 10, "private": True})

    assert response.headers["Cache-Control"] == snapshot("max-age=10, private, stale-if-error=60")


def test_set_cache_control_from_instance():
    request = httpx.Request("GET", "https://example.com")

    set_cache_control(request, CacheControl(only_if_cached=True))

    assert request.headers["cache-control"] == "only-if-cached"


def test_set_cache_control_overwrites():
    response = httpx.Response(200, headers={"Cache-Control": "no-store"})

    set_cache_control(response, {"max_age": 5})

    assert response.headers.get_list("Cache-Control") == ["max-age=5"]


def test_set_cache_control_keeps_existing():
    response = httpx.Response(200, headers={"Cache-Control": "no-store"})

    set_cache_control(response, {"max_age": 5}, overwrite=False)

    assert response.headers["Cache-Control"] == "no-store"


def test_set_cache_control_empty_settings():
    response = httpx.Response(200)

    set_cache_control(response, {"no_store": False})

    assert "Cache-Control" not in response.headers


def test_round_trip_through_headers():
    response = httpx.Response(200)
    cache_control = CacheControl(max_age=60, no_cache=True, stale_while_revalidate=120)

    set_cache_control(response, cache_control)

    assert get_cache_control(response) == cache_control
