import logging
import os
import uuid
from pathlib import Path
from typing import Optional

from fastapi import Depends, File, Request, UploadFile

from places_api import config
from places_api.errors import ValidationError

logger = logging.getLogger(__name__)

MIME_TYPE_MAP = {
    "image/png": "png",
    "image/jpeg": "jpeg",
    "image/jpg": "jpg",
}


class ImageStorage:
    def __init__(self, upload_dir: Optional[str] = None, max_size: Optional[int] = None):
        self.upload_dir = Path(upload_dir or config.UPLOAD_DIR)
        self.max_size = max_size if max_size is not None else config.MAX_IMAGE_SIZE

    async def save(self, upload: UploadFile) -> str:
        """
        Store an uploaded image under a random name and return its path.
        """
        extension = MIME_TYPE_MAP.get(upload.content_type or "")
        if extension is None:
            raise ValidationError("Invalid mime type!")

        content = await upload.read()
        if len(content) > self.max_size:
            raise ValidationError(f"File too large. Maximum size: {self.max_size} bytes")

        self.upload_dir.mkdir(parents=True, exist_ok=True)
        path = self.upload_dir / f"{uuid.uuid4()}.{extension}"
        path.write_bytes(content)
        return str(path)

    def remove(self, path: str) -> bool:
        """Delete a stored image. Failures are logged, never raised."""
        try:
            os.remove(path)
            return True
        except OSError as e:
            logger.error(f"Could not delete image {path}: {e}")
            return False


# Provider (singleton) for dependency injection
_image_storage_instance = None


def get_image_storage() -> ImageStorage:
    global _image_storage_instance
    if _image_storage_instance is None:
        _image_storage_instance = ImageStorage()
    return _image_storage_instance


async def store_uploaded_image(
    request: Request,
    image: UploadFile = File(...),
    storage: ImageStorage = Depends(get_image_storage),
) -> str:
    path = await storage.save(image)
    # Lets the error handler drop the file if the request fails later on
    request.state.image_path = path
    request.state.image_storage = storage
    return path
