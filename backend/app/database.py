from app.config import get_settings
from app.utils.logger import get_logger
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from beanie import init_beanie

settings = get_settings()
logger = get_logger("database")

_mongo_client: AsyncIOMotorClient | None = None


async def init_db() -> None:
    """Initialize MongoDB (Beanie) and register document models."""
    global _mongo_client
    _mongo_client = AsyncIOMotorClient(
        settings.MONGODB_URI,
        serverSelectionTimeoutMS=settings.MONGODB_TIMEOUT_MS,
    )
    from app.models import Patient, Doctor

    await init_beanie(
        database=_mongo_client[settings.mongodb_db_name],
        document_models=[Patient, Doctor],
    )
    logger.info(f"Connected to MongoDB database '{settings.mongodb_db_name}'")


async def close_db() -> None:
    global _mongo_client
    if _mongo_client is not None:
        _mongo_client.close()
        _mongo_client = None


def get_database() -> AsyncIOMotorDatabase:
    """Shared database handle; init_db() must have run."""
    if _mongo_client is None:
        raise RuntimeError("Database not initialized; call init_db() first")
    return _mongo_client[settings.mongodb_db_name]


async def ping_db() -> bool:
    """Check MongoDB connectivity."""
    if not _mongo_client:
        return False
    try:
        await _mongo_client.admin.command("ping")
        return True
    except Exception as e:
        logger.warning(f"MongoDB ping failed: {e}")
        return False
