from typing import Any, Dict

from bson import ObjectId
from pydantic import BaseModel, Field


class Location(BaseModel):
    lat: float
    lng: float


class PlaceUpdate(BaseModel):
    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=5)


class PlaceCreate(PlaceUpdate):
    address: str = Field(..., min_length=1)


# Fields a place owner may change after creation
MUTABLE_FIELDS = ("title", "description")


def new_place_document(payload: PlaceCreate, location: Location, image: str, creator: ObjectId) -> Dict[str, Any]:
    return {
        "_id": ObjectId(),
        "title": payload.title,
        "description": payload.description,
        "address": payload.address,
        "location": location.model_dump(),
        "image": image,
        "creator": creator,
    }


def apply_place_update(place: Dict[str, Any], update: PlaceUpdate) -> Dict[str, Any]:
    """Return a copy of `place` with the mutable fields taken from `update`."""
    changes = update.model_dump(include=set(MUTABLE_FIELDS))
    return {**place, **changes}


def is_creator(place: Dict[str, Any], user_id: str) -> bool:
    creator = place.get("creator")
    if isinstance(creator, dict):
        creator = creator.get("_id")
    return creator is not None and str(creator) == user_id
