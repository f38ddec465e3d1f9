import logging
import sys
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from app.config import Settings
from app.db.session import build_engine, build_session_factory, init_db
from app.exceptions.handlers import request_validation_error_handler
from app.repositories.company_repository import CompanyRepository
from app.routers.companies import router as companies_router
from app.services.company_scraper import CompanyScraperService
from app.services.website_scraper import WebsiteScraperService


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = Settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stdout,
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)

    engine = build_engine(settings.database_url)
    init_db(engine)
    repository = CompanyRepository(build_session_factory(engine))

    async with httpx.AsyncClient() as client:
        website_scraper = WebsiteScraperService(
            client,
            user_agent=settings.user_agent,
            homepage_timeout=settings.homepage_timeout,
            deep_page_timeout=settings.deep_page_timeout,
        )

        app.state.company_repository = repository
        app.state.company_scraper = CompanyScraperService(website_scraper, repository)

        yield

    engine.dispose()


app = FastAPI(title="Company Profile Scraper", lifespan=lifespan)

app.add_exception_handler(RequestValidationError, request_validation_error_handler)

app.include_router(companies_router)
