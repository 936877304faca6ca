from bson import ObjectId

from places_api.models.place import (
    Location,
    PlaceCreate,
    PlaceUpdate,
    apply_place_update,
    is_creator,
    new_place_document,
)
from places_api.models.utils import serialize_doc, to_object_id


def test_new_place_document():
    creator = ObjectId()
    payload = PlaceCreate(title="Louvre", description="Museum in Paris", address="Rue de Rivoli")
    doc = new_place_document(payload, Location(lat=48.86, lng=2.33), "uploads/images/a.png", creator)

    assert isinstance(doc["_id"], ObjectId)
    assert doc["location"] == {"lat": 48.86, "lng": 2.33}
    assert doc["creator"] == creator
    assert doc["image"] == "uploads/images/a.png"


def test_apply_place_update_is_pure():
    place = {"_id": ObjectId(), "title": "Old", "description": "Old description", "address": "Somewhere"}
    original = dict(place)

    updated = apply_place_update(place, PlaceUpdate(title="New", description="New description"))

    assert place == original
    assert updated == {**original, "title": "New", "description": "New description"}


def test_is_creator():
    owner_id = ObjectId()
    assert is_creator({"creator": owner_id}, str(owner_id))
    assert is_creator({"creator": {"_id": owner_id, "name": "Max"}}, str(owner_id))
    assert not is_creator({"creator": owner_id}, str(ObjectId()))
    assert not is_creator({"creator": None}, str(owner_id))


def test_serialize_doc():
    place_id, user_id = ObjectId(), ObjectId()
    doc = {"_id": user_id, "name": "Max", "places": [place_id], "meta": {"_id": place_id}}
    assert serialize_doc(doc) == {
        "id": str(user_id),
        "name": "Max",
        "places": [str(place_id)],
        "meta": {"id": str(place_id)},
    }


def test_to_object_id():
    oid = ObjectId()
    assert to_object_id(str(oid)) == oid
    assert to_object_id(oid) is oid
    assert to_object_id("p1") is None
    assert to_object_id(None) is None
