"""Application settings read from the environment.

Persistence settings live in ``domain.toml`` and are picked by ``PROTEAN_ENV``;
everything the HTTP layer needs is collected here.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-backed settings for the storefront service."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Sessions
    jwt_secret: str = Field(default="storefront-dev-secret")
    jwt_algorithm: str = Field(default="HS256")
    jwt_expires_minutes: int = Field(default=60, gt=0)
    auth_cookie_name: str = Field(default="storefrontCookieToken")
    bcrypt_rounds: int = Field(default=12, ge=4, le=31)

    # Configured administrator, logged in without a stored user
    admin_email: str | None = None
    admin_password: str | None = None
    require_admin_for_products: bool = False

    # Catalogue
    default_page_size: int = Field(default=10, gt=0)
    mock_product_count: int = Field(default=100, ge=0)

    # Comma-separated list
    cors_origins: str = Field(default="*")

    @property
    def cors_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    @property
    def socket_cors_origins(self) -> str | list[str]:
        """Socket.IO takes the bare string ``*`` for any origin, not a list holding it."""
        origins = self.cors_origin_list
        return "*" if "*" in origins else origins


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()
