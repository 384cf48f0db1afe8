from contextlib import contextmanager
from typing import Any, Dict, Iterator, Optional
from fastapi import status

class BaseAPIException(Exception):
    """
    Parent class for every error the API raises on purpose.
    Keeps the error payload returned to the frontend uniform.
    """
    def __init__(
        self,
        message: str,
        code: str = "INTERNAL_ERROR",
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)

# =========================================================
# 1. COMMON ERRORS
# =========================================================

class NotFoundException(BaseAPIException):
    """404: read-by-id matched zero rows"""
    def __init__(self, message: str = "Resource not found"):
        super().__init__(
            message=message,
            code="NOT_FOUND",
            status_code=status.HTTP_404_NOT_FOUND
        )

# =========================================================
# 2. STORE ERRORS
# =========================================================

class DuplicateKeyError(BaseAPIException):
    """400: the store rejected a row on a unique or primary key."""
    def __init__(self, message: str = "Record already exists"):
        super().__init__(
            message=message,
            code="DUPLICATE_KEY",
            status_code=status.HTTP_400_BAD_REQUEST
        )

class InvalidCredentialsError(BaseAPIException):
    """401: no admin or student row matches the login pair"""
    def __init__(self, message: str = "Invalid Credentials"):
        super().__init__(
            message=message,
            code="INVALID_CREDENTIALS",
            status_code=status.HTTP_401_UNAUTHORIZED
        )

class StoreFailureError(BaseAPIException):
    """
    500: any other store error, including NOT NULL violations caused by
    fields missing from the request body.
    """
    def __init__(self, message: str = "Database error"):
        super().__init__(
            message=message,
            code="STORE_FAILURE",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
        )


@contextmanager
def error_messages(
    duplicate: Optional[str] = None,
    not_found: Optional[str] = None,
    invalid: Optional[str] = None,
    failure: Optional[str] = None,
) -> Iterator[None]:
    """
    Swap the generic message of a raised API error for the route's own.

    Usage:
        with error_messages(duplicate="Email already exists", failure="Database error"):
            gateway.create(fields)
    """
    messages = {
        "DUPLICATE_KEY": duplicate,
        "NOT_FOUND": not_found,
        "INVALID_CREDENTIALS": invalid,
        "STORE_FAILURE": failure,
    }
    try:
        yield
    except BaseAPIException as exc:
        message = messages.get(exc.code)
        if message:
            exc.message = message
        raise
