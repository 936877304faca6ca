import asyncio

from motor.motor_asyncio import AsyncIOMotorClient

from places_api import config
from places_api.db import ensure_indexes


async def main():
    client = AsyncIOMotorClient(config.MONGO_URI)
    db = client[config.DB_NAME]
    await ensure_indexes(db)

    print("Indexes created")
    client.close()

asyncio.run(main())
