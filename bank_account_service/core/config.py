"""Application configuration using pydantic settings with structured sections."""

from functools import lru_cache
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ServerSettings(BaseModel):
    host: str = "0.0.0.0"
    port: int = 8082
    reload: bool = False


class DatabaseSettings(BaseModel):
    url: str = Field(default="sqlite+aiosqlite:///:memory:", alias="url")
    echo: bool = False
    pool_size: Optional[int] = None
    max_overflow: Optional[int] = None

    @property
    def is_memory_sqlite(self) -> bool:
        return self.url.startswith("sqlite") and (":memory:" in self.url or self.url.endswith("://"))


class LoggingSettings(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    json_format: bool = Field(default=False, alias="json")


class SeedSettings(BaseModel):
    """Demo data loaded at startup when the customer table is empty."""

    enabled: bool = True
    customers: list[str] = Field(default_factory=lambda: ["Mohamed", "Yassine", "Hanae", "Imane"])
    accounts_per_customer: int = Field(default=10, ge=0)
    currency: str = "MAD"
    max_balance: float = Field(default=10_000.0, gt=0)


class GraphQLSettings(BaseModel):
    path: str = "/graphql"
    graphiql: bool = True


class Settings(BaseSettings):
    """Top-level application settings with nested sections."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_nested_delimiter="__",
        extra="ignore",
        case_sensitive=False,
    )

    environment: Literal["development", "staging", "production", "test"] = "development"
    debug: bool = False
    project_name: str = "Bank Account Service"
    api_prefix: str = "/api"

    server: ServerSettings = ServerSettings()
    database: DatabaseSettings = DatabaseSettings()
    logging: LoggingSettings = LoggingSettings()
    seed: SeedSettings = SeedSettings()
    graphql: GraphQLSettings = GraphQLSettings()

    @property
    def database_url(self) -> str:
        return self.database.url

    @property
    def host(self) -> str:
        return self.server.host

    @property
    def port(self) -> int:
        return self.server.port

    @property
    def data_rest_prefix(self) -> str:
        return f"{self.api_prefix}/data"


@lru_cache()
def get_settings() -> Settings:
    return Settings()
