from typing import Optional
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from beanie import init_beanie
from app.config import settings
from app.models import document_models
from app.utils.logger import db_logger

motor_client: Optional[AsyncIOMotorClient] = None

def get_database(client: AsyncIOMotorClient) -> AsyncIOMotorDatabase:
    """Database named in DATABASE_URL, falling back to MONGO_DB_NAME."""
    return client.get_default_database(settings.MONGO_DB_NAME)

async def init_mongo(database: Optional[AsyncIOMotorDatabase] = None):
    """Register the Beanie documents and build their indexes."""
    global motor_client
    if database is None:
        # stored datetimes come back as aware UTC
        motor_client = AsyncIOMotorClient(settings.DATABASE_URL, tz_aware=True)
        database = get_database(motor_client)
    try:
        await init_beanie(database=database, document_models=document_models)
        db_logger.info("MongoDB connected successfully")
    except Exception as e:
        db_logger.error(f"MongoDB connection error: {e}")
        raise

async def close_mongo():
    """Close the MongoDB client, if this process opened one."""
    global motor_client
    if motor_client:
        motor_client.close()
        motor_client = None
