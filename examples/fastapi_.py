# /// script
# requires-python = ">=3.9"
# dependencies = [
#     "ctrlcache[fastapi,httpx]",
# ]
#
# [tool.uv.sources]
# ctrlcache = { path = "../", editable = true }
# ///


import asyncio
import logging
import time

import httpx
from fastapi import FastAPI

from ctrlcache.fastapi import cache
from ctrlcache.httpx import get_cache_control

app = FastAPI()


@app.get("/items/", dependencies=[cache(max_age=60, stale_while_revalidate=120, public=True)])
async def read_item():
    return {"created_at": time.time()}


async def main():
    async with httpx.AsyncClient(transport=httpx.ASGITransport(app=app)) as client:
        response = await client.get("http://testserver/items/")
        cache_control = get_cache_control(response)
        print(f"Cache-Control: {cache_control}")
        print(f"Parsed settings: {cache_control.settings}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    asyncio.run(main())
