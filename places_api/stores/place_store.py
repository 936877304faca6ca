import logging
from typing import Any, Dict, List, Optional

from fastapi import Depends
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import OperationFailure

from places_api.db import get_db
from places_api.models.utils import to_object_id

logger = logging.getLogger(__name__)


class PlaceStore:
    """
    Reads and writes places and the owning user's place list.

    Ids come in as strings; ones that are not valid ObjectIds match nothing.
    Driver errors (pymongo.errors.PyMongoError) are left to the caller.
    """

    def __init__(self, database: AsyncIOMotorDatabase):
        self.db = database

    async def find_place(self, place_id: str) -> Optional[Dict[str, Any]]:
        oid = to_object_id(place_id)
        if oid is None:
            return None
        return await self.db.places.find_one({"_id": oid})

    async def find_places_by_creator(self, user_id: str) -> List[Dict[str, Any]]:
        oid = to_object_id(user_id)
        if oid is None:
            return []
        cursor = self.db.places.find({"creator": oid})
        return await cursor.to_list(length=None)

    async def find_user(self, user_id: str) -> Optional[Dict[str, Any]]:
        oid = to_object_id(user_id)
        if oid is None:
            return None
        return await self.db.users.find_one({"_id": oid})

    async def find_place_with_creator(self, place_id: str) -> Optional[Dict[str, Any]]:
        """Place with `creator` replaced by the full user document (None if the user is gone)."""
        place = await self.find_place(place_id)
        if place is None:
            return None
        creator = await self.db.users.find_one({"_id": place["creator"]})
        return {**place, "creator": creator}

    async def create_place_for_user(self, place: Dict[str, Any], user_id: str) -> Dict[str, Any]:
        user_oid = to_object_id(user_id)
        async with await self.db.client.start_session() as session:
            async with session.start_transaction():
                await self.db.places.insert_one(place, session=session)
                result = await self.db.users.update_one(
                    {"_id": user_oid},
                    {"$push": {"places": place["_id"]}},
                    session=session,
                )
                # Aborts the insert too, no place without its owner
                if result.matched_count == 0:
                    raise OperationFailure(f"Owner {user_id} not found")
        logger.info(f"Created place {place['_id']} for user {user_id}")
        return place

    async def update_place_fields(self, place_id: str, fields: Dict[str, Any]) -> bool:
        """Returns False when the place no longer exists."""
        oid = to_object_id(place_id)
        result = await self.db.places.update_one({"_id": oid}, {"$set": fields})
        return result.matched_count > 0

    async def delete_place_for_user(self, place_id: str, user_id: str) -> None:
        place_oid = to_object_id(place_id)
        user_oid = to_object_id(user_id)
        async with await self.db.client.start_session() as session:
            async with session.start_transaction():
                await self.db.places.delete_one({"_id": place_oid}, session=session)
                result = await self.db.users.update_one(
                    {"_id": user_oid},
                    {"$pull": {"places": place_oid}},
                    session=session,
                )
                if result.matched_count == 0:
                    raise OperationFailure(f"Owner {user_id} not found")
        logger.info(f"Deleted place {place_id} of user {user_id}")


def get_place_store(database: AsyncIOMotorDatabase = Depends(get_db)) -> PlaceStore:
    return PlaceStore(database)
