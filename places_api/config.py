import os
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

# .env lives in the project root
project_root = Path(__file__).parent.parent
env_path = project_root / ".env"

load_dotenv(dotenv_path=env_path)

# MongoDB; transactions need a replica set (or Atlas cluster)
MONGO_URI: Optional[str] = os.getenv("MONGO_URI")
DB_NAME: str = os.getenv("DB_NAME", "places")
MONGO_TLS: bool = os.getenv("MONGO_TLS") == "1"

# Auth
JWT_SECRET: str = os.getenv("JWT_SECRET", "change-me")
JWT_ALGORITHM: str = os.getenv("JWT_ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_MINUTES: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60"))

# Geocoding
GOOGLE_API_KEY: Optional[str] = os.getenv("GOOGLE_API_KEY")
GEOCODING_URL: str = os.getenv("GEOCODING_URL", "https://maps.googleapis.com/maps/api/geocode/json")

# Image uploads
UPLOAD_DIR: str = os.getenv("UPLOAD_DIR", "uploads/images")

MAX_IMAGE_SIZE: int = 500000
_max_image_size: Optional[str] = os.getenv("MAX_IMAGE_SIZE")
if _max_image_size:
    try:
        MAX_IMAGE_SIZE = int(_max_image_size)
    except ValueError:
        print(f"Could not convert MAX_IMAGE_SIZE to int, defaulting to {MAX_IMAGE_SIZE}")

CORS_ORIGINS: List[str] = os.getenv("CORS_ORIGINS", "").split(",") if os.getenv("CORS_ORIGINS") else ["*"]

# Server, for `python -m places_api`
HOST: str = os.getenv("HOST", "0.0.0.0")
PORT: int = int(os.getenv("PORT", "5000"))
RELOAD: bool = os.getenv("RELOAD") == "1"
