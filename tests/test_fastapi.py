from email.utils import parsedate_tz

from fastapi import FastAPI
from fastapi.testclient import TestClient
from inline_snapshot import snapshot

from ctrlcache import parse_cache_control
from ctrlcache.fastapi import cache

app = FastAPI()


@app.get("/static", dependencies=[cache(max_age=31536000, public=True)])
async def static_asset():
    return {"image": "logo.png"}


@app.get("/news", dependencies=[cache(stale_while_revalidate=86400, public=True, max_age=300)])
async def news():
    return {"news": "articles"}


@app.get("/secrets", dependencies=[cache(no_store=True, private=True)])
async def secrets():
    return {"secret": "value"}


@app.get("/plain", dependencies=[cache()])
async def plain():
    return {}


client = TestClient(app)


def test_cache_sets_header():
    response = client.get("/static")

    assert response.status_code == 200
    assert response.headers["Cache-Control"] == "max-age=31536000, public"


def test_cache_uses_directive_order():
    response = client.get("/news")

    assert response.headers["Cache-Control"] == snapshot("max-age=300, public, stale-while-revalidate=86400")
    assert parse_cache_control(response.headers["Cache-Control"]) == {
        "max_age": 300,
        "public": True,
        "stale_while_revalidate": 86400,
    }


def test_cache_flags():
    response = client.get("/secrets")

    assert response.headers["Cache-Control"] == "no-store, private"


def test_cache_sets_date():
    response = client.get("/static")

    assert parsedate_tz(response.headers["Date"]) is not None


def test_cache_without_directives():
    response = client.get("/plain")

    assert response.status_code == 200
    assert "Cache-Control" not in response.headers
