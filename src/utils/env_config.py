import os
import re
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ValidationError, field_validator

from src.utils.path import path_dic

load_dotenv(path_dic["env"])

_TTL_UNITS = {"s": 1, "m": 60, "h": 3600, "d": 86400}


class ConfigError(Exception):
    def __init__(self, msg="환경 설정 오류"):
        self.msg = msg
        super().__init__(self.msg)


def parse_ttl(value) -> int:
    """
        "10m", "1d", "30s", "3600" -> 초 단위
    """
    if isinstance(value, int):
        if value <= 0:
            raise ValueError(f"invalid ttl: {value}")
        return value

    match = re.fullmatch(r"\s*(\d+)\s*([smhd]?)\s*", str(value))
    if not match or int(match.group(1)) <= 0:
        raise ValueError(f"invalid ttl: {value}")

    return int(match.group(1)) * _TTL_UNITS.get(match.group(2) or "s")


class JwtConfig(BaseModel):
    access_secret: str
    refresh_secret: str
    access_ttl: int = 600
    refresh_ttl: int = 86400
    algorithm: str = "HS256"

    @field_validator("access_secret", "refresh_secret")
    @classmethod
    def validate_secret(cls, v):
        if v is None or len(v) < 32:
            raise ValueError("[JwtConfig] secret must be at least 32 characters")
        return v

    @field_validator("access_ttl", "refresh_ttl", mode="before")
    @classmethod
    def validate_ttl(cls, v):
        return parse_ttl(v)


class DatabaseConfig(BaseModel):
    url: Optional[str] = None
    host: Optional[str] = None
    port: int = 3306
    user: Optional[str] = None
    password: str = ""
    database: Optional[str] = None

    def sqlalchemy_url(self) -> str:
        if self.url:
            return self.url

        if not self.host or not self.user or not self.database:
            raise ConfigError("DB_HOST, DB_USER, DB_NAME 설정 필요")

        return f"mysql+asyncmy://{self.user}:{self.password}@{self.host}:{self.port}/{self.database}"


class AppConfig(BaseModel):
    jwt: JwtConfig
    database: DatabaseConfig


@lru_cache
def get_config() -> AppConfig:
    try:
        return AppConfig(
            jwt=JwtConfig(
                access_secret=os.environ.get("JWT_ACCESS_SECRET", ""),
                refresh_secret=os.environ.get("JWT_REFRESH_SECRET", ""),
                access_ttl=os.environ.get("JWT_ACCESS_TTL", "10m"),
                refresh_ttl=os.environ.get("JWT_REFRESH_TTL", "1d"),
            ),
            database=DatabaseConfig(
                url=os.environ.get("DATABASE_URL") or None,
                host=os.environ.get("DB_HOST"),
                port=int(os.environ.get("DB_PORT", 3306)),
                user=os.environ.get("DB_USER"),
                password=os.environ.get("DB_PASS", ""),
                database=os.environ.get("DB_NAME"),
            ),
        )

    except ValidationError as e:
        raise ConfigError(str(e)) from e
