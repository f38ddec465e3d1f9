import asyncio
import logging
import time
from datetime import datetime, timezone
from enum import StrEnum

from app.mappers.field_extractors import extract_fields
from app.mappers.field_merger import merge_extractions
from app.mappers.scrape_status import classify_scrape_status
from app.repositories.company_repository import CompanyRepository
from app.schemas.company import CompanyProfile, ScrapeStatus
from app.schemas.responses import ErrorCode, ScrapeError, ScrapeMeta, ScrapeResponse
from app.services.website_scraper import WebsiteScraperService

logger = logging.getLogger(__name__)

SOURCE = "httpx+deep-pages"

VALIDATION_MESSAGE = "website is required"
SCRAPE_FAILED_MESSAGE = "Unable to scrape company website"


class ScrapeStage(StrEnum):
    fetching_home = "fetching_home"
    extracting_home = "extracting_home"
    fetching_deep = "fetching_deep"
    extracting_deep = "extracting_deep"
    merging = "merging"
    classifying = "classifying"
    persisting = "persisting"


def _failure(code: ErrorCode, message: str) -> ScrapeResponse:
    return ScrapeResponse(
        success=False,
        status=ScrapeStatus.failed,
        data=None,
        error=ScrapeError(code=code, message=message),
    )


class CompanyScraperService:
    def __init__(
        self,
        website_scraper: WebsiteScraperService,
        repository: CompanyRepository,
    ):
        self._website_scraper = website_scraper
        self._repository = repository

    async def scrape(self, website: str | None) -> ScrapeResponse:
        """Scrape a company website into a stored profile. Never raises."""
        started = time.monotonic()

        if not website or not website.strip():
            return _failure(ErrorCode.validation_error, VALIDATION_MESSAGE)

        stage = ScrapeStage.fetching_home
        try:
            homepage = await self._website_scraper.fetch_homepage(website)

            stage = ScrapeStage.extracting_home
            home_extraction = extract_fields(homepage)

            stage = ScrapeStage.fetching_deep
            deep_pages = await self._website_scraper.fetch_deep_pages(website)

            stage = ScrapeStage.extracting_deep
            deep_extractions = [extract_fields(page) for page in deep_pages]

            stage = ScrapeStage.merging
            candidate = merge_extractions(home_extraction, deep_extractions)

            stage = ScrapeStage.classifying
            status = classify_scrape_status(candidate)

            stage = ScrapeStage.persisting
            profile = CompanyProfile(
                website=website,
                **candidate.model_dump(),
                scrape_status=status,
                last_scraped_at=datetime.now(timezone.utc),
            )
            company = await asyncio.to_thread(self._repository.upsert, profile)
        except Exception:
            logger.exception("Company scrape failed for %s at stage %s", website, stage)
            return _failure(ErrorCode.scrape_failed, SCRAPE_FAILED_MESSAGE)

        duration_ms = int((time.monotonic() - started) * 1000)
        logger.info(
            "Scraped %s: status=%s deep_pages=%d duration_ms=%d",
            website, status, len(deep_pages), duration_ms,
        )
        return ScrapeResponse(
            success=True,
            status=status,
            data=company,
            error=None,
            meta=ScrapeMeta(source=SOURCE, duration_ms=duration_ms),
        )
