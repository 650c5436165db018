from fastapi import Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

# Errors the store client can raise: SQLAlchemy wraps driver errors, but an
# unreachable host can still surface as a bare OSError from the driver.
STORE_ERRORS = (SQLAlchemyError, OSError)


class StoreFailure(Exception):
    """
    A store call failed.

    Carries only the generic message shown to the caller; the underlying
    error is logged by the route that caught it.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


async def store_failure_handler(request: Request, exc: StoreFailure) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": exc.message},
    )
