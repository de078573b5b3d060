"""
Internal service authentication.
"""
import secrets

from seoaudit.config import settings
from seoaudit.core.exceptions import ServiceUnavailableError, UnauthorizedError


def verify_service_token(token: str | None, expected: str | None = None) -> None:
    """
    Validate an X-Service-Token value.

    Raises UnauthorizedError when the token is missing or wrong, and
    ServiceUnavailableError when no expected token is configured.
    """
    if expected is None:
        expected = settings.INTERNAL_SERVICE_TOKEN

    if not token:
        raise UnauthorizedError("missing service token")

    if not expected:
        raise ServiceUnavailableError("internal service token not configured")

    if not secrets.compare_digest(token.encode(), expected.encode()):
        raise UnauthorizedError("invalid service token")
