from __future__ import annotations

from pydantic import Field

from checkout.settings.base import CheckoutBaseSettings


class DatabaseSettings(CheckoutBaseSettings):
    """
    Database connection settings.
    Variables are read with the DB_ prefix (e.g. DB_DATABASE_URL).
    """

    database_url: str = Field("sqlite+aiosqlite:///./checkout.db")
    echo_sql: bool = Field(False)

    # Pool options (ignored for SQLite)
    pool_size: int = Field(5)
    max_overflow: int = Field(10)
    pool_timeout: int = Field(30)
    pool_recycle: int = Field(3600)

    model_config = {**CheckoutBaseSettings.model_config, "env_prefix": "DB_"}

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")
