import httpx
import pytest
from httpx import ASGITransport

from app.db.session import build_engine, build_session_factory, init_db
from app.repositories.company_repository import CompanyRepository


@pytest.fixture
def mock_env(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite://")
    monkeypatch.setenv("HOMEPAGE_TIMEOUT", "15")
    monkeypatch.setenv("DEEP_PAGE_TIMEOUT", "10")


@pytest.fixture
def repository():
    engine = build_engine("sqlite://")
    init_db(engine)
    yield CompanyRepository(build_session_factory(engine))
    engine.dispose()


@pytest.fixture
async def client(mock_env):
    from app.main import app, lifespan

    async with lifespan(app):
        async with httpx.AsyncClient(
            transport=ASGITransport(app=app),
            base_url="http://test",
        ) as c:
            yield c
