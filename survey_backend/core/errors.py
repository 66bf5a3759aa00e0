"""HTTP-mapped failures raised by the route handlers."""

from fastapi import HTTPException, status


class ValidationError(HTTPException):
    """Missing or malformed client input."""

    def __init__(self, detail: str) -> None:
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class AuthError(HTTPException):
    """Unknown account or wrong password."""

    def __init__(self, detail: str) -> None:
        super().__init__(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail)


class NotFoundError(HTTPException):
    """A row that the operation requires does not exist."""

    def __init__(self, detail: str) -> None:
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class StorageError(HTTPException):
    """The database rejected or failed a statement.

    The database message is passed through to the caller unchanged.
    """

    def __init__(self, detail: str) -> None:
        super().__init__(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)


class ConflictError(StorageError):
    """A uniqueness constraint was violated on insert (duplicate email)."""


def describe_storage_failure(exc: Exception) -> str:
    # DBAPIError wraps the driver exception; its message is the useful part.
    original = getattr(exc, "orig", None)
    return str(original) if original is not None else str(exc)
