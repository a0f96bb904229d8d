from app.database import get_database
from app.store import DocumentStore, MongoStore


def get_store() -> DocumentStore:
    """Per-request store over the shared database handle."""
    return MongoStore(get_database())
