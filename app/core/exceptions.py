from typing import Any, Dict, Optional
from fastapi import status

class BaseAPIException(Exception):
    """
    Base class for every custom error raised by the API.
    Keeps the error body returned to the client in one format.
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
# REQUEST ERRORS
# =========================================================

class ValidationError(BaseAPIException):
    """400: a body field is missing, empty or has the wrong type"""
    def __init__(self, message: str = "Invalid request data", details: dict = None):
        super().__init__(
            message=message,
            code="VALIDATION_ERROR",
            status_code=status.HTTP_400_BAD_REQUEST,
            details=details
        )

class NotFoundError(BaseAPIException):
    """404: no record for the given id"""
    def __init__(self, message: str = "Resource not found"):
        super().__init__(
            message=message,
            code="NOT_FOUND",
            status_code=status.HTTP_404_NOT_FOUND
        )

class RouteNotFoundError(BaseAPIException):
    """404: no route matches the request path"""
    def __init__(self, method: str, path: str):
        super().__init__(
            message=f"The requested endpoint {method} {path} does not exist",
            code="ROUTE_NOT_FOUND",
            status_code=status.HTTP_404_NOT_FOUND
        )

# =========================================================
# SERVER ERRORS
# =========================================================

class StorageError(BaseAPIException):
    """
    500: the database rejected or failed a statement.
    The message stays generic; the cause is only logged.
    """
    def __init__(self, message: str = "A database error occurred"):
        super().__init__(
            message=message,
            code="STORAGE_ERROR",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
        )

class UnhandledError(BaseAPIException):
    """500: anything that escaped a handler"""
    def __init__(self, message: str = "An unexpected error occurred"):
        super().__init__(
            message=message,
            code="INTERNAL_SERVER_ERROR",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
        )
