from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from app.schemas.website import Platform


class ScrapeStatus(StrEnum):
    success = "success"
    partial = "partial"
    failed = "failed"


class ProfileCandidate(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str | None = None
    about: str | None = None
    email: str | None = None
    phones: list[str] = []
    location: str | None = None
    socials: dict[str, str] = {}
    platform: Platform = Platform.unknown


class CompanyProfile(ProfileCandidate):
    website: str
    scrape_status: ScrapeStatus
    last_scraped_at: datetime
