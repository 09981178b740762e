from typing import Any, Dict

from httpx import AsyncClient


async def create_job(client: AsyncClient, payload: Dict[str, Any]) -> str:
    response = await client.post("/jobs", json=payload)
    assert response.status_code == 200, response.text
    return response.json()["insertedId"]


async def create_application(client: AsyncClient, payload: Dict[str, Any]) -> str:
    response = await client.post("/applications", json=payload)
    assert response.status_code == 200, response.text
    return response.json()["insertedId"]
