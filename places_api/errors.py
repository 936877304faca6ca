from typing import Optional


class HttpError(Exception):
    """An error carrying the message and status code sent back to the client."""

    code = 500

    def __init__(self, message: str, code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code


class ValidationError(HttpError):
    code = 422


class NotFound(HttpError):
    code = 404


class Unauthorized(HttpError):
    code = 401


class ServerError(HttpError):
    code = 500
