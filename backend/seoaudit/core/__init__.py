"""
Core utilities for the SEO audit service.
"""
from seoaudit.core.exceptions import ServiceUnavailableError, UnauthorizedError

__all__ = [
    "ServiceUnavailableError",
    "UnauthorizedError",
]
