from typing import Optional

import certifi
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo import ASCENDING

from places_api import config
from places_api.errors import ServerError

# 전역 클라이언트와 DB 핸들
_client: Optional[AsyncIOMotorClient] = None
db: Optional[AsyncIOMotorDatabase] = None


async def connect():
    """
    Connect to MongoDB and keep the client and database handle in module globals.
    """
    global _client, db
    if not config.MONGO_URI:
        print(f"❌ MONGO_URI is not set. Looking for .env at: {config.env_path}")
        raise ValueError("MONGO_URI is not set in the environment or .env file")

    try:
        if config.MONGO_TLS:
            _client = AsyncIOMotorClient(config.MONGO_URI, tlsCAFile=certifi.where())
        else:
            _client = AsyncIOMotorClient(config.MONGO_URI)
        db = _client[config.DB_NAME]

        await db.command("ping")
        print("✅ Connected to MongoDB")
    except Exception as e:
        print(f"❌ MongoDB connection failed: {e}")
        _client = None
        db = None
        return

    await ensure_indexes(db)


async def close():
    global _client, db
    if _client is not None:
        _client.close()
        _client = None
        db = None
        print("🛑 MongoDB connection closed")


async def ensure_indexes(database: AsyncIOMotorDatabase):
    await database.places.create_index([("creator", ASCENDING)])
    await database.users.create_index([("email", ASCENDING)], unique=True)


def get_db() -> AsyncIOMotorDatabase:
    # Read the module global at call time, not at import time
    if db is None:
        raise ServerError("Database not connected")
    return db
