import asyncio
import sys

from motor.motor_asyncio import AsyncIOMotorClient

from places_api import config
from places_api.models.user import UserIn, new_user_document
from places_api.security.auth import create_access_token


async def main(name: str, email: str):
    client = AsyncIOMotorClient(config.MONGO_URI)
    db = client[config.DB_NAME]
    user = new_user_document(UserIn(name=name, email=email))
    await db.users.insert_one(user)

    print("✅ Seeded demo user")
    print(f"   - User id: {user['_id']}")
    print(f"   - Token: {create_access_token(str(user['_id']), email)}")
    client.close()

if __name__ == "__main__":
    name = sys.argv[1] if len(sys.argv) > 1 else "Demo User"
    email = sys.argv[2] if len(sys.argv) > 2 else "demo@example.com"
    asyncio.run(main(name, email))
