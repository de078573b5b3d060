"""
FastAPI dependencies for authentication and engine configuration.
"""
from typing import Annotated

from fastapi import Depends, Header

from seoaudit.config import settings
from seoaudit.core.security import verify_service_token
from seoaudit.services.audit_engine import SEOAuditEngine


async def require_service_token(
    x_service_token: Annotated[str | None, Header()] = None,
) -> None:
    """Reject requests without a valid X-Service-Token header."""
    if not settings.SERVICE_AUTH_ENABLED:
        return
    verify_service_token(x_service_token)


def get_audit_engine() -> SEOAuditEngine:
    """Engine configured with the settings-derived threshold table."""
    return SEOAuditEngine(settings.audit_thresholds())


ServiceAuth = Depends(require_service_token)
AuditEngine = Annotated[SEOAuditEngine, Depends(get_audit_engine)]
