"""Named-collection query access used by the services.

Services receive a ``DocumentStore`` instead of reaching for the global Motor
client, so tests can hand them an in-memory implementation.
"""
from typing import Any, Protocol

from motor.motor_asyncio import AsyncIOMotorDatabase


class DocumentStore(Protocol):
    async def find(self, collection: str, query: dict[str, Any]) -> list[dict[str, Any]]:
        ...

    async def find_one(self, collection: str, query: dict[str, Any]) -> dict[str, Any] | None:
        ...


class MongoStore:
    """DocumentStore backed by a Motor database handle."""

    def __init__(self, database: AsyncIOMotorDatabase):
        self._db = database

    async def find(self, collection: str, query: dict[str, Any]) -> list[dict[str, Any]]:
        return await self._db[collection].find(query).to_list(length=None)

    async def find_one(self, collection: str, query: dict[str, Any]) -> dict[str, Any] | None:
        return await self._db[collection].find_one(query)
