from datetime import timedelta

import pytest
from bson import ObjectId
from jose import jwt

from places_api import config
from places_api.errors import Unauthorized
from places_api.security.auth import create_access_token, decode_access_token
from tests.utils import add_place, add_user


def test_token_carries_user_id():
    user_id = str(ObjectId())
    token = create_access_token(user_id, "max@example.com")
    assert decode_access_token(token) == user_id


def test_expired_token():
    token = create_access_token(str(ObjectId()), "max@example.com", expires_delta=timedelta(minutes=-1))
    with pytest.raises(Unauthorized):
        decode_access_token(token)


def test_token_signed_with_other_secret():
    token = jwt.encode({"userId": str(ObjectId())}, "not-" + config.JWT_SECRET, algorithm=config.JWT_ALGORITHM)
    with pytest.raises(Unauthorized):
        decode_access_token(token)


def test_token_without_user_id():
    token = jwt.encode({"email": "max@example.com"}, config.JWT_SECRET, algorithm=config.JWT_ALGORITHM)
    with pytest.raises(Unauthorized):
        decode_access_token(token)


def test_non_bearer_scheme_is_rejected(client, database):
    owner = add_user(database)
    place = add_place(database, owner)
    response = client.patch(
        f"/api/places/{place['_id']}",
        json={"title": "Empire State", "description": "Still a very tall building"},
        headers={"Authorization": "Basic bWF4OnNlY3JldA=="},
    )
    assert response.status_code == 401
    assert response.json() == {"message": "Authentication failed!"}
