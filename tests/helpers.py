# tests/helpers.py
from __future__ import annotations

import httpx


async def register(client: httpx.AsyncClient, name: str | None, description: str | None = None, photo=None) -> httpx.Response:
    data = {}
    if name is not None:
        data["inventory_name"] = name
    if description is not None:
        data["description"] = description
    files = {"photo": photo} if photo is not None else None
    return await client.post("/register", data=data, files=files)


def created_id(resp: httpx.Response) -> int:
    assert resp.status_code == 201, resp.text
    return int(resp.headers["location"].rsplit("/", 1)[-1])
