"""
Custom exceptions for the SEO audit service.
"""
from fastapi import HTTPException, status


class UnauthorizedError(HTTPException):
    """Missing or invalid service token."""

    def __init__(self, detail: str = "invalid service token"):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
        )


class ServiceUnavailableError(HTTPException):
    """Server-side configuration is incomplete."""

    def __init__(self, detail: str):
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=detail,
        )

