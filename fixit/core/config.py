from typing import List, Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from pathlib import Path


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(Path(__file__).resolve().parent.parent.parent / ".env"),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Project Info
    PROJECT_NAME: str = Field(default="FixIt Repair Management System")
    VERSION: str = Field(default="1.0.0")
    API_V1_STR: str = Field(default="/api/v1")
    DEBUG: bool = Field(default=True)

    # Server Settings
    HOST: str = Field(default="0.0.0.0")
    PORT: int = Field(default=8000)
    WORKERS: int = Field(default=1)

    # Security
    SECRET_KEY: str = Field(default="your-secret-key-change-in-production")
    ALGORITHM: str = Field(default="HS256")
    ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(default=60 * 12)  # 12 hours

    # CORS Settings
    CORS_ORIGINS: List[str] = Field(default=["*"])
    CORS_CREDENTIALS: bool = Field(default=True)
    CORS_METHODS: List[str] = Field(default=["*"])
    CORS_HEADERS: List[str] = Field(default=["*"])

    # Logging
    LOG_LEVEL: str = Field(default="INFO")
    LOG_DIR: Path = Field(default=Path("logs"))

    # File Paths
    BASE_DIR: Path = Path(__file__).resolve().parent.parent.parent

    # Database Configuration (DATABASE_URL wins over the MySQL settings)
    DATABASE_URL: Optional[str] = None

    # MySQL Database Settings
    MYSQL_USER: str = Field(default="root")
    MYSQL_PASSWORD: str = Field(default="123456")
    MYSQL_HOST: str = Field(default="localhost")
    MYSQL_PORT: int = Field(default=3306)
    MYSQL_DB: str = Field(default="fixit_db")

    # Notifications
    NOTIFICATION_LIMIT: int = Field(default=50)
    NOTIFICATION_CACHE_FILE: Optional[Path] = Field(default=None)

    # Symptom assistant (OpenAI-compatible chat completion endpoint)
    ASSIST_API_URL: Optional[str] = Field(default=None)
    ASSIST_API_KEY: Optional[str] = Field(default=None)
    ASSIST_MODEL: str = Field(default="llama-3.1-8b-instant")
    ASSIST_TIMEOUT: float = Field(default=30.0)

    @property
    def SQLALCHEMY_DATABASE_URI(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"mysql+pymysql://{self.MYSQL_USER}:{self.MYSQL_PASSWORD}@{self.MYSQL_HOST}:{self.MYSQL_PORT}/{self.MYSQL_DB}?charset=utf8mb4"
        )

    @property
    def USES_MYSQL(self) -> bool:
        return self.SQLALCHEMY_DATABASE_URI.startswith("mysql")

    @field_validator("CORS_ORIGINS", "CORS_METHODS", "CORS_HEADERS", mode="before")
    def assemble_cors_list(cls, v: str | List[str]) -> List[str]:
        """Parse CORS settings from a comma-separated string or list."""
        if isinstance(v, str) and not v.startswith("["):
            return [i.strip() for i in v.split(",")]
        elif isinstance(v, (list, str)):
            return v
        raise ValueError(v)


# Create settings instance
settings = Settings()
