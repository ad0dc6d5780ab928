#config.py
from pydantic_settings import BaseSettings
from pydantic import AliasChoices, Field
from pydantic_settings import SettingsConfigDict
from typing import Optional, List
from functools import lru_cache

PLACEHOLDER_SECRET = "change-me-in-prod"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )
    # Application Settings
    APP_NAME: str = "DentalCare API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    DOCS_ENABLED: bool = True

    # Server Settings
    HOST: str = "0.0.0.0"
    PORT: int = 5000

    # Database Settings
    DATABASE_URL: str = "sqlite:///./dentalcare.db"
    SEED_APPOINTMENT_OPTIONS: bool = True

    # Security Settings (ACCESS_TOKEN is the name the clinic deployments already use)
    SECRET_KEY: str = Field(
        default=PLACEHOLDER_SECRET,
        validation_alias=AliasChoices("SECRET_KEY", "ACCESS_TOKEN", "JWT_SECRET_KEY"),
    )
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_DAYS: int = 7

    # Payments
    STRIPE_SECRET_KEY: str = ""
    PAYMENT_CURRENCY: str = "usd"

    # CORS Settings (comma-separated)
    ALLOWED_ORIGINS: str = "*"
    ALLOWED_METHODS: str = "GET,POST,PUT,DELETE,OPTIONS"
    ALLOWED_HEADERS: str = "*"

    # Logging Settings
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # Rate Limiting
    RATE_LIMIT_PER_MINUTE: int = 120
    REDIS_URL: Optional[str] = None

    def _split_csv(self, value: str) -> List[str]:
        if value is None:
            return []
        value = value.strip()
        if value == "":
            return []
        return [item.strip() for item in value.split(",")]

    @property
    def allowed_origins_list(self) -> List[str]:
        return self._split_csv(self.ALLOWED_ORIGINS)

    @property
    def allowed_methods_list(self) -> List[str]:
        return self._split_csv(self.ALLOWED_METHODS)

    @property
    def allowed_headers_list(self) -> List[str]:
        return self._split_csv(self.ALLOWED_HEADERS)

    @property
    def secret_configured(self) -> bool:
        return bool(self.SECRET_KEY) and self.SECRET_KEY != PLACEHOLDER_SECRET


@lru_cache()
def get_settings() -> Settings:
    return Settings()
