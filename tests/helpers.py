"""Helpers shared by the API tests."""

from datetime import datetime

from httpx import AsyncClient

ADMIN_KEY = "test-admin-key"
API = "/api/commands"


def parse_timestamp(value: str) -> datetime:
    """Parse an API timestamp; ``fromisoformat`` before 3.11 rejects a trailing Z."""
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


async def create_command(client: AsyncClient, **fields) -> str:
    """POST a command with the right key and return its id."""
    payload = {
        "title": "Sample",
        "commandText": "echo sample",
        "platform": "linux",
    }
    payload.update(fields)
    response = await client.post(API, json=payload, headers={"x-admin-key": ADMIN_KEY})
    assert response.status_code == 201, response.text
    return response.json()["id"]


async def list_commands(client: AsyncClient, **params) -> list[dict]:
    response = await client.get(API, params=params)
    assert response.status_code == 200, response.text
    return response.json()
