from pydantic_settings import BaseSettings
from typing import List

from seoaudit.services.thresholds import AuditThresholds


class Settings(BaseSettings):
    PROJECT_NAME: str = "SEO Audit"
    VERSION: str = "0.1.0"
    ENVIRONMENT: str = "development"

    API_V1_STR: str = "/api/v1"

    CORS_ORIGINS: str = "*"

    LOG_LEVEL: str = "INFO"

    # Internal service authentication (X-Service-Token header)
    SERVICE_AUTH_ENABLED: bool = True
    INTERNAL_SERVICE_TOKEN: str = ""

    # Audit threshold overrides
    AUDIT_TITLE_MIN_LENGTH: int = 30
    AUDIT_TITLE_MAX_LENGTH: int = 60
    AUDIT_DESCRIPTION_MIN_LENGTH: int = 120
    AUDIT_DESCRIPTION_MAX_LENGTH: int = 160
    AUDIT_DEAD_LINK_PENALTY: int = 10
    AUDIT_DEAD_LINK_PENALTY_CAP: int = 50

    class Config:
        env_file = ".env"
        case_sensitive = True

    @property
    def cors_origins_list(self) -> List[str]:
        if isinstance(self.CORS_ORIGINS, str):
            return [o.strip() for o in self.CORS_ORIGINS.split(",")]
        return self.CORS_ORIGINS

    def audit_thresholds(self) -> AuditThresholds:
        return AuditThresholds(
            title_min_length=self.AUDIT_TITLE_MIN_LENGTH,
            title_max_length=self.AUDIT_TITLE_MAX_LENGTH,
            description_min_length=self.AUDIT_DESCRIPTION_MIN_LENGTH,
            description_max_length=self.AUDIT_DESCRIPTION_MAX_LENGTH,
            dead_link_penalty=self.AUDIT_DEAD_LINK_PENALTY,
            dead_link_penalty_cap=self.AUDIT_DEAD_LINK_PENALTY_CAP,
        )


settings = Settings()
