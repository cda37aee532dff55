from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings


class RestaurantSettings(BaseSettings):
    """
    Restaurant floor settings.
    Loaded from .env file with the RESTAURANT_ prefix.
    """

    name: str = Field(default="Tableside")
    table_count: int = Field(default=20, ge=1)
    storage_backend: Literal["memory", "sqlalchemy"] = Field(default="memory")
    seed_catalog: bool = Field(default=True)
    log_level: str = Field(default="INFO")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "RESTAURANT_",
        "extra": "ignore",
    }
