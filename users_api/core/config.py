# File: users_api/core/config.py

import os
from functools import lru_cache
from typing import List, Literal

from pydantic import BaseModel, ConfigDict, field_validator


class Settings(BaseModel):
    model_config = ConfigDict(validate_default=True)

    # Basic app info
    PROJECT_NAME: str = "Users API"
    VERSION: str = "0.1.0"

    api_prefix: str = "/api"
    host: str = os.getenv("HOST", "127.0.0.1")
    port: int = int(os.getenv("PORT", "8000"))
    debug: bool = os.getenv("DEBUG", "false").lower() in ("1", "true", "yes")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # CORS (dev front-end)
    backend_cors_origins: List[str] = os.getenv(
        "BACKEND_CORS_ORIGINS",
        "http://localhost:3000,http://127.0.0.1:3000",
    )

    # Database
    database_url: str = os.getenv("DATABASE_URL", "sqlite:///./users.db")

    # Fixed parameters for GET /api/users
    users_filter_name: str = os.getenv("USERS_FILTER_NAME", "Sally")
    users_order_by: Literal["id", "name", "email", "age"] = os.getenv("USERS_ORDER_BY", "age")
    users_direction: Literal["asc", "desc"] = os.getenv("USERS_DIRECTION", "asc")
    users_skip: int = int(os.getenv("USERS_SKIP", "1"))
    users_take: int = int(os.getenv("USERS_TAKE", "2"))

    @field_validator("backend_cors_origins", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v):
        if isinstance(v, str):
            return [i.strip() for i in v.split(",") if i.strip()]
        if isinstance(v, list):
            return v
        return []

    @field_validator("users_skip", "users_take")
    @classmethod
    def non_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError("must be >= 0")
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
