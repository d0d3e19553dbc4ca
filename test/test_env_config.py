import pytest

from src.utils.env_config import parse_ttl, JwtConfig, DatabaseConfig, ConfigError


@pytest.mark.parametrize("value, expected", [
    ("30s", 30),
    ("10m", 600),
    ("2h", 7200),
    ("1d", 86400),
    ("45", 45),
    (120, 120),
])
def test_parse_ttl(value, expected):
    assert parse_ttl(value) == expected


@pytest.mark.parametrize("value", ["", "abc", "10x", "0m", "-5", 0])
def test_parse_ttl_invalid(value):
    with pytest.raises(ValueError):
        parse_ttl(value)


def test_short_secret_rejected():
    with pytest.raises(ValueError):
        JwtConfig(access_secret="short", refresh_secret="x" * 32)


def test_database_url():
    assert DatabaseConfig(url="sqlite+aiosqlite:///a.db").sqlalchemy_url() == "sqlite+aiosqlite:///a.db"
    assert DatabaseConfig(host="db", user="root", database="fraud").sqlalchemy_url() == \
        "mysql+asyncmy://root:@db:3306/fraud"

    with pytest.raises(ConfigError):
        DatabaseConfig(host="db").sqlalchemy_url()
