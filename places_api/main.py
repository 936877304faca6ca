import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from places_api import config
from places_api.db import close, connect
from places_api.errors import HttpError
from places_api.routers import places

logger = logging.getLogger(__name__)

app = FastAPI(title="Places API", version="0.1.0")


def _discard_uploaded_image(request: Request):
    """Remove an image stored earlier in a request that ended in an error."""
    path = getattr(request.state, "image_path", None)
    storage = getattr(request.state, "image_storage", None)
    if path and storage is not None:
        storage.remove(path)
        request.state.image_path = None


@app.exception_handler(HttpError)
async def http_error_handler(request: Request, exc: HttpError):
    _discard_uploaded_image(request)
    return JSONResponse(status_code=exc.code, content={"message": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    _discard_uploaded_image(request)
    return JSONResponse(status_code=422, content={"message": "Invalid inputs passed, please check your data."})


@app.exception_handler(StarletteHTTPException)
async def starlette_http_error_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404:
        return JSONResponse(status_code=404, content={"message": "Could not find this route."})
    return JSONResponse(status_code=exc.status_code, content={"message": str(exc.detail)})


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception on {request.url.path}: {type(exc).__name__}: {exc}", exc_info=exc)
    _discard_uploaded_image(request)
    return JSONResponse(status_code=500, content={"message": "An unknown error occurred!"})


app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
    allow_credentials=True,
)


@app.on_event("startup")
async def on_startup():
    await connect()


@app.on_event("shutdown")
async def on_shutdown():
    await close()


app.mount("/uploads/images", StaticFiles(directory=config.UPLOAD_DIR, check_dir=False), name="images")
app.include_router(places.router, prefix="/api/places", tags=["places"])
