# server/core/errors.py

from fastapi import Request, status
from fastapi.responses import JSONResponse


INTERNAL_MESSAGE = "ooops! things are not going that great after all"


# -------------------------------
# API Errors
# -------------------------------

class APIError(Exception):
    """
    Error that ends a request with a JSON body of the form
    {"message": ..., "code": ..., "type": ...}.
    """
    code = status.HTTP_500_INTERNAL_SERVER_ERROR
    type = "internal-server-error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def body(self) -> dict:
        return {"message": self.message, "code": self.code, "type": self.type}


class BadRequest(APIError):
    code = status.HTTP_400_BAD_REQUEST
    type = "bad-request"


class Unauthorized(APIError):
    code = status.HTTP_401_UNAUTHORIZED
    type = "unauthorized"


class NotFound(APIError):
    code = status.HTTP_404_NOT_FOUND
    type = "not-found"


class InternalServerError(APIError):
    def __init__(self, message: str = INTERNAL_MESSAGE):
        super().__init__(message)


async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    return JSONResponse(status_code=exc.code, content=exc.body())
