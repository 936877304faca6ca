import logging

import pydantic
from fastapi import APIRouter, Body, Depends, Form, Response, status
from pymongo.errors import PyMongoError

from places_api.errors import NotFound, ServerError, Unauthorized, ValidationError
from places_api.models.place import (
    MUTABLE_FIELDS,
    PlaceCreate,
    PlaceUpdate,
    apply_place_update,
    is_creator,
    new_place_document,
)
from places_api.models.utils import serialize_doc, to_object_id
from places_api.security.auth import get_current_user_id
from places_api.services.geocoding import GoogleGeocoder, get_geocoder
from places_api.services.image_storage import ImageStorage, get_image_storage, store_uploaded_image
from places_api.stores.place_store import PlaceStore, get_place_store

logger = logging.getLogger(__name__)

router = APIRouter()

INVALID_INPUTS = "Invalid inputs passed, please check your data."


@router.get("/{place_id}", summary="Get a place by id")
async def get_place_by_id(place_id: str, store: PlaceStore = Depends(get_place_store)):
    try:
        place = await store.find_place(place_id)
    except PyMongoError as e:
        logger.error(f"Fetching place {place_id} failed: {e}")
        raise ServerError("Could not find that place.")

    if not place:
        raise NotFound("Could not find a place for the provided id.")

    return {"place": serialize_doc(place)}


@router.get("/user/{user_id}", summary="List places created by a user")
async def get_places_by_user_id(user_id: str, store: PlaceStore = Depends(get_place_store)):
    try:
        places = await store.find_places_by_creator(user_id)
    except PyMongoError as e:
        logger.error(f"Fetching places of user {user_id} failed: {e}")
        raise ServerError("Fetching places failed, please try again later!")

    # A user without places gets an empty list, not a 404
    return {"places": serialize_doc(places)}


@router.post("/", status_code=status.HTTP_201_CREATED, summary="Create a place")
async def create_place(
    title: str = Form(""),
    description: str = Form(""),
    address: str = Form(""),
    user_id: str = Depends(get_current_user_id),
    image_path: str = Depends(store_uploaded_image),
    store: PlaceStore = Depends(get_place_store),
    geocoder: GoogleGeocoder = Depends(get_geocoder),
):
    try:
        payload = PlaceCreate(title=title, description=description, address=address)
    except pydantic.ValidationError:
        raise ValidationError(INVALID_INPUTS)

    # Geocoder errors already carry their own status
    location = await geocoder.resolve(payload.address)

    creator = to_object_id(user_id)
    try:
        user = await store.find_user(user_id)
    except PyMongoError as e:
        logger.error(f"Loading user {user_id} failed: {e}")
        raise ServerError("Creating place failed, please try again.")

    if creator is None or not user:
        raise NotFound("Could not find user for provided id.")

    place = new_place_document(payload, location, image_path, creator)
    try:
        await store.create_place_for_user(place, user_id)
    except PyMongoError as e:
        logger.error(f"Creating place for user {user_id} failed: {e}")
        raise ServerError("Creating place failed, please try again.")

    return {"place": serialize_doc(place)}


@router.patch("/{place_id}", summary="Update the title and description of a place")
async def update_place(
    place_id: str,
    payload: dict = Body(...),
    user_id: str = Depends(get_current_user_id),
    store: PlaceStore = Depends(get_place_store),
):
    try:
        update = PlaceUpdate(**payload)
    except pydantic.ValidationError:
        raise ValidationError(INVALID_INPUTS)

    try:
        place = await store.find_place(place_id)
    except PyMongoError as e:
        logger.error(f"Loading place {place_id} failed: {e}")
        raise ServerError("Could not update that place.")

    if not place:
        raise NotFound("Could not find a place for the provided id.")

    if not is_creator(place, user_id):
        raise Unauthorized("You are not allowed to edit this place.")

    updated = apply_place_update(place, update)
    try:
        saved = await store.update_place_fields(place_id, {field: updated[field] for field in MUTABLE_FIELDS})
    except PyMongoError as e:
        logger.error(f"Saving place {place_id} failed: {e}")
        raise ServerError("Could not update that place.")

    if not saved:
        raise NotFound("Could not find a place for the provided id.")

    return {"createdPlace": serialize_doc(updated)}


@router.delete("/{place_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete a place")
async def delete_place(
    place_id: str,
    user_id: str = Depends(get_current_user_id),
    store: PlaceStore = Depends(get_place_store),
    storage: ImageStorage = Depends(get_image_storage),
):
    try:
        place = await store.find_place_with_creator(place_id)
    except PyMongoError as e:
        logger.error(f"Loading place {place_id} failed: {e}")
        raise ServerError("Could not delete place.")

    if not place:
        raise NotFound("Could not find a place for that id.")

    if not place["creator"]:
        raise NotFound("Could not find the creator of this place.")

    if not is_creator(place, user_id):
        raise Unauthorized("You are not allowed to delete this place.")

    try:
        await store.delete_place_for_user(place_id, user_id)
    except PyMongoError as e:
        logger.error(f"Deleting place {place_id} failed: {e}")
        raise ServerError("Could not delete place.")

    # The deletion is committed; a leftover image file is only logged
    if place.get("image"):
        storage.remove(place["image"])

    return Response(status_code=status.HTTP_204_NO_CONTENT)
