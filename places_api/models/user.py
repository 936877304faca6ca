from typing import Any, Dict, Optional

from bson import ObjectId
from pydantic import BaseModel, EmailStr


class UserIn(BaseModel):
    name: str
    email: EmailStr
    image: Optional[str] = None


def new_user_document(user: UserIn) -> Dict[str, Any]:
    doc = user.model_dump()
    doc["_id"] = ObjectId()
    doc["places"] = []
    return doc
