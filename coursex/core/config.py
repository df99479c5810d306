from pydantic_settings import BaseSettings
from typing import Optional, List

class Settings(BaseSettings):
    PROJECT_NAME: str = "CourseX"
    VERSION: str = "1.0.0"
    API_PREFIX: str = "/api"

    # CORS
    ALLOWED_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

    DATABASE_URL: str = "sqlite:///./coursex.db"
    TEST_DATABASE_URL: Optional[str] = None
    DATABASE_ECHO: bool = False

    # Bearer tokens issued by the identity provider
    IDENTITY_TOKEN_SECRET: str = "change-me"
    IDENTITY_TOKEN_ALGORITHM: str = "HS256"
    IDENTITY_TOKEN_AUDIENCE: Optional[str] = None
    IDENTITY_TOKEN_ISSUER: Optional[str] = None

    # Mirrored users with this email are always ADMIN
    ADMIN_EMAIL: Optional[str] = None

    # Payments; without a secret key the mock gateway is used
    STRIPE_SECRET_KEY: Optional[str] = None
    STRIPE_WEBHOOK_SECRET: Optional[str] = None
    PAYMENT_CURRENCY: str = "usd"
    PLATFORM_FEE_PERCENT: float = 10.0

    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"

    class Config:
        env_file = ".env"

settings = Settings()
