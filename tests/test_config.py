import pytest
from pydantic import ValidationError

from app.config import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    settings = Settings(_env_file=None)

    assert settings.database_url == "sqlite:///./companies.db"
    assert settings.homepage_timeout > settings.deep_page_timeout
    assert settings.user_agent == "Mozilla/5.0"


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("DEEP_PAGE_TIMEOUT", "5")
    monkeypatch.setenv("USER_AGENT", "Acme/1.0")

    settings = Settings(_env_file=None)

    assert settings.deep_page_timeout == 5.0
    assert settings.user_agent == "Acme/1.0"


def test_homepage_timeout_must_be_longer(monkeypatch):
    monkeypatch.setenv("HOMEPAGE_TIMEOUT", "10")
    monkeypatch.setenv("DEEP_PAGE_TIMEOUT", "10")

    with pytest.raises(ValidationError):
        Settings(_env_file=None)
