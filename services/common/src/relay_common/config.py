"""Shared configuration models for infrastructure components."""

from pydantic import BaseModel


class RedisConfig(BaseModel, frozen=True):
    """Redis connection configuration."""

    host: str
    port: int = 6379
    db: int = 0
