"""
Unit tests for service token verification and settings.
"""
import pytest
from fastapi import status

from seoaudit.config import Settings
from seoaudit.core.exceptions import ServiceUnavailableError, UnauthorizedError
from seoaudit.core.security import verify_service_token


class TestVerifyServiceToken:
    """Test token checks in the order the middleware applies them."""

    def test_valid_token(self):
        assert verify_service_token("secret", expected="secret") is None

    def test_missing_token(self):
        with pytest.raises(UnauthorizedError) as exc:
            verify_service_token(None, expected="secret")

        assert exc.value.status_code == status.HTTP_401_UNAUTHORIZED
        assert exc.value.detail == "missing service token"

    def test_missing_token_checked_before_configuration(self):
        """Test a missing header is reported even when nothing is configured."""
        with pytest.raises(UnauthorizedError):
            verify_service_token("", expected="")

    def test_not_configured(self):
        with pytest.raises(ServiceUnavailableError) as exc:
            verify_service_token("secret", expected="")

        assert exc.value.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR

    def test_wrong_token(self):
        with pytest.raises(UnauthorizedError) as exc:
            verify_service_token("guess", expected="secret")

        assert exc.value.detail == "invalid service token"


class TestSettings:
    """Test settings-derived configuration."""

    def test_audit_thresholds(self):
        settings = Settings(AUDIT_TITLE_MIN_LENGTH=20, AUDIT_DEAD_LINK_PENALTY=5)
        thresholds = settings.audit_thresholds()

        assert thresholds.title_min_length == 20
        assert thresholds.title_max_length == 60
        assert thresholds.dead_link_penalty == 5
        assert thresholds.dead_link_penalty_cap == 50

    def test_cors_origins_list(self):
        settings = Settings(CORS_ORIGINS="http://localhost:3000, https://example.com")

        assert settings.cors_origins_list == ["http://localhost:3000", "https://example.com"]
