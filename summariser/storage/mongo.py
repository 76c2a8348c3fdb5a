"""Full-text store backed by a MongoDB collection."""

from __future__ import annotations

import logging

from pymongo import MongoClient
from pymongo.errors import PyMongoError

from summariser.errors import (
    STAGE_PERSIST_FULLTEXT,
    ConfigurationError,
    PersistenceError,
)
from summariser.storage.base import FullTextStore
from summariser.storage.models import FullTextRecord

logger = logging.getLogger(__name__)


class MongoFullTextStore(FullTextStore):
    """Insert :class:`FullTextRecord` documents into a MongoDB collection.

    A client is opened per insert and closed afterwards.  *database* is only
    used when the URI does not name one; it defaults to ``test``, the same
    database the MongoDB drivers fall back to.
    """

    def __init__(
        self,
        uri: str,
        database: str = "test",
        collection: str = "blog_texts",
    ) -> None:
        self.uri = uri
        self.database = database
        self.collection = collection

    def _client(self) -> MongoClient:
        return MongoClient(self.uri)

    def insert_full_text(self, record: FullTextRecord) -> None:
        """Insert *record* as a single document.

        Raises:
            ConfigurationError: If no URI is configured.
            PersistenceError: If the client cannot connect or the insert fails.
        """
        if not self.uri:
            raise ConfigurationError("MongoDB URI not set", STAGE_PERSIST_FULLTEXT)

        try:
            with self._client() as client:
                db = client.get_default_database(default=self.database)
                db[self.collection].insert_one(record.to_document())
        except PyMongoError as exc:
            logger.error("MongoDB error: %s", exc)
            raise PersistenceError(
                "Failed to save full text to MongoDB", STAGE_PERSIST_FULLTEXT
            ) from exc
