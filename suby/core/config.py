
from pydantic import Field
from pydantic_settings import BaseSettings

DEFAULT_JWT_SECRET = "suby-development-secret-change-me"

class Settings(BaseSettings):
    """Application configuration loaded from environment variables / .env file."""

    app_name: str = "Suby API"
    app_env: str = "development"
    app_port: int = 4000
    frontend_url: str = "http://localhost:3000"

    # Uploads (firm images)
    upload_dir: str = Field(default="uploads", alias="UPLOAD_DIR")
    max_upload_size_mb: int = Field(default=5, alias="MAX_UPLOAD_SIZE_MB")

    # Auth
    jwt_secret: str = Field(default=DEFAULT_JWT_SECRET, alias="JWT_SECRET")
    jwt_algorithm: str = Field(default="HS256", alias="JWT_ALGORITHM")
    jwt_expires_minutes: int = Field(default=60, alias="JWT_EXPIRES_MINUTES")
    bcrypt_rounds: int = Field(
        default=10, ge=4, le=31, alias="BCRYPT_ROUNDS",
    )  # bcrypt accepts 4..31

    # Database (SQLite for local dev, any async SQLAlchemy URL otherwise)
    database_url: str = Field(
        default="sqlite+aiosqlite:///./suby_dev.db",
        alias="DATABASE_URL",
    )
    auto_create_tables: bool = Field(default=True, alias="AUTO_CREATE_TABLES")
    audit_enabled: bool = Field(default=True, alias="AUDIT_ENABLED")

    # Multi-tenancy default
    default_client_id: str = Field(default="default", alias="DEFAULT_CLIENT_ID")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "populate_by_name": True,
    }

    @property
    def max_upload_size_bytes(self) -> int:
        return self.max_upload_size_mb * 1024 * 1024

    @property
    def uses_default_secret(self) -> bool:
        return self.jwt_secret == DEFAULT_JWT_SECRET

settings = Settings()
