"""MongoDB client wrapper."""

import logging
from typing import Any

from pymongo import AsyncMongoClient
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.server_api import ServerApi

from src.config import settings

logger = logging.getLogger(__name__)


class MongoStore:
    """Wrapper for the async PyMongo client.

    Holds the single connection shared by every request handler.
    """

    def __init__(
        self,
        uri: str | None = None,
        database: str | None = None,
        collection: str | None = None,
    ):
        """Initialize store with connection parameters.

        Args:
            uri: MongoDB connection string. Defaults to settings.
            database: Database name. Defaults to settings.
            collection: Meetings collection name. Defaults to settings.
        """
        self.uri = uri or settings.mongodb_uri
        self.database_name = database or settings.mongodb_database
        self.collection_name = collection or settings.mongodb_collection
        self._client: AsyncMongoClient | None = None

    async def connect(self) -> None:
        """Open the client and ping the deployment.

        Raises:
            PyMongoError: If the deployment is unreachable.
        """
        if self._client is not None:
            return

        client: AsyncMongoClient = AsyncMongoClient(
            self.uri,
            server_api=ServerApi("1", strict=True, deprecation_errors=True),
        )
        try:
            await client.admin.command("ping")
        except Exception:
            await client.close()
            raise

        self._client = client
        logger.info(f"Connected to MongoDB database: {self.database_name}")

    @property
    def meetings(self) -> AsyncCollection[dict[str, Any]]:
        """Get the meetings collection."""
        if not self._client:
            msg = "Not connected. Call connect() first."
            raise RuntimeError(msg)
        return self._client[self.database_name][self.collection_name]

    async def close(self) -> None:
        """Close the client."""
        if self._client:
            await self._client.close()
            self._client = None
            logger.info("MongoDB connection closed")

    async def is_healthy(self) -> bool:
        """Check if the deployment answers a ping."""
        try:
            if not self._client:
                return False
            result = await self._client.admin.command("ping")
            return result.get("ok") == 1
        except Exception:
            return False
