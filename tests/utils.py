from pathlib import Path
from typing import Any, Dict

from bson import ObjectId

from places_api.errors import ValidationError
from places_api.models.place import Location
from places_api.models.user import UserIn, new_user_document
from places_api.security.auth import create_access_token

EMPIRE_STATE = "20 W 34th St, New York, NY 10001"
EMPIRE_STATE_LOCATION = Location(lat=40.7484405, lng=-73.9878584)

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 64


class StubGeocoder:
    def __init__(self):
        self.known = {EMPIRE_STATE: EMPIRE_STATE_LOCATION}
        self.calls = []

    async def resolve(self, address: str) -> Location:
        self.calls.append(address)
        if address not in self.known:
            raise ValidationError("Could not find location for the specified address.")
        return self.known[address]


def add_user(database, name: str = "Max", email: str = "max@example.com") -> Dict[str, Any]:
    user = new_user_document(UserIn(name=name, email=email))
    database.users.docs[user["_id"]] = user
    return user


def add_place(database, owner: Dict[str, Any], image: str = "uploads/images/missing.png", **fields) -> Dict[str, Any]:
    place = {
        "_id": ObjectId(),
        "title": "Empire State Building",
        "description": "One of the most famous sky scrapers in the world!",
        "address": EMPIRE_STATE,
        "location": EMPIRE_STATE_LOCATION.model_dump(),
        "image": image,
        "creator": owner["_id"],
    }
    place.update(fields)
    database.places.docs[place["_id"]] = place
    owner["places"].append(place["_id"])
    return place


def auth_headers(user: Dict[str, Any]) -> Dict[str, str]:
    token = create_access_token(str(user["_id"]), user["email"])
    return {"Authorization": f"Bearer {token}"}


def stored_images(upload_dir: Path):
    if not upload_dir.exists():
        return []
    return list(upload_dir.iterdir())
