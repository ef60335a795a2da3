import json
import logging
from functools import lru_cache
from typing import Annotated

from pydantic import Field, PostgresDsn, computed_field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

log = logging.getLogger(__name__)


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    This class defines all configuration values used by the application,
    including database connection details, token verification parameters,
    business limits and API layout. Values are loaded from environment
    variables with fallback defaults.

    Attributes:
        database_url (PostgresDsn): Database connection URL for PostgreSQL.
        db_echo (bool): Whether SQLAlchemy should echo emitted SQL.
        secret_key (str): Secret key used to verify bearer tokens.
        algorithm (str): Algorithm used for JWT token encoding.
        access_token_expire_minutes (int): Lifetime of tokens issued by `manage.py issue-token`.
        api_prefix (str): Path prefix for every versioned API route.
        max_resumes_per_user (int): Ceiling on the number of resumes a user may own.
        default_page_size (int): Page size used when a list request gives none or an invalid one.
        max_page_size (int): Largest page size a list request may ask for.
        log_level (str): Root logging level applied at application start.
        cors_origins (list[str]): Origins allowed by the CORS middleware. `CORS_ORIGINS`
            takes a comma-separated list or a JSON array.

    """

    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="allow",
    )

    # Database settings
    db_host: str = Field(default="localhost", validation_alias="DB_HOST")
    db_port: int = Field(default=5432, validation_alias="DB_PORT")
    db_name: str = Field(default="resume_builder", validation_alias="DB_NAME")
    db_user: str = Field(default="postgres", validation_alias="DB_USER")
    db_password: str = Field(default="", validation_alias="DB_PASSWORD")
    db_echo: bool = Field(default=False, validation_alias="DB_ECHO")

    @computed_field
    @property
    def database_url(self) -> PostgresDsn:
        """
        Assembled database URL from components.

        Returns:
            PostgresDsn: The fully assembled PostgreSQL connection URL.

        Notes:
            1. Constructs the database URL using the components: scheme, username, password, host, port, and path.
            2. The scheme is set to "postgresql".

        """
        return PostgresDsn.build(
            scheme="postgresql",
            username=self.db_user,
            password=self.db_password,
            host=self.db_host,
            port=self.db_port,
            path=self.db_name,
        )

    # Security settings
    secret_key: str = Field(
        default="your-secret-key-change-in-production",
        validation_alias="SECRET_KEY",
    )
    algorithm: str = Field(default="HS256", validation_alias="ALGORITHM")
    access_token_expire_minutes: int = Field(
        default=120,
        validation_alias="ACCESS_TOKEN_EXPIRE_MINUTES",
    )

    # API layout
    api_prefix: str = Field(default="/api/v1", validation_alias="API_PREFIX")
    cors_origins: Annotated[list[str], NoDecode] = Field(default=["*"], validation_alias="CORS_ORIGINS")

    @field_validator("cors_origins", mode="before")
    @classmethod
    def split_cors_origins(cls, value):
        """Accept `CORS_ORIGINS` as a JSON array or as comma-separated origins."""
        if not isinstance(value, str):
            return value
        if value.lstrip().startswith("["):
            return json.loads(value)
        return [origin.strip() for origin in value.split(",") if origin.strip()]

    # Business limits
    max_resumes_per_user: int = Field(default=10, validation_alias="MAX_RESUMES_PER_USER")
    default_page_size: int = Field(default=20, validation_alias="DEFAULT_PAGE_SIZE")
    max_page_size: int = Field(default=100, validation_alias="MAX_PAGE_SIZE")

    # Logging
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")


@lru_cache
def get_settings() -> Settings:
    """
    Get the global settings instance.

    Returns:
        Settings: The global settings instance, containing all configuration values.

    Raises:
        ValidationError: If environment variables are present but invalid.

    Notes:
        1. Reads configuration from environment variables and the .env file.
        2. If environment variables are not set, default values are used.
        3. The function returns a cached instance to avoid repeated parsing of the .env file.
        4. This function performs disk access to read the .env file on first call.

    """
    return Settings()
