from typing import Any, Optional

from bson import ObjectId


def to_object_id(value: Any) -> Optional[ObjectId]:
    """Parse an id string; returns None when it cannot be an ObjectId."""
    if isinstance(value, ObjectId):
        return value
    if not isinstance(value, str) or not ObjectId.is_valid(value):
        return None
    return ObjectId(value)


def serialize_doc(doc: Any) -> Any:
    """
    Make a MongoDB document JSON serializable.
    ObjectIds become strings and `_id` is exposed as `id`, nested values included.
    """
    if isinstance(doc, ObjectId):
        return str(doc)
    if isinstance(doc, list):
        return [serialize_doc(x) for x in doc]
    if isinstance(doc, dict):
        result = {}
        for k, v in doc.items():
            result["id" if k == "_id" else k] = serialize_doc(v)
        return result
    return doc
