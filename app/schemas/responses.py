from enum import StrEnum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from app.schemas.company import CompanyProfile, ScrapeStatus


class ErrorCode(StrEnum):
    validation_error = "VALIDATION_ERROR"
    scrape_failed = "SCRAPE_FAILED"


class ScrapeRequest(BaseModel):
    website: str | None = None


class ScrapeError(BaseModel):
    code: ErrorCode
    message: str


class ScrapeMeta(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    source: str
    duration_ms: int


class ScrapeResponse(BaseModel):
    success: bool
    status: ScrapeStatus
    data: CompanyProfile | None = None
    error: ScrapeError | None = None
    meta: ScrapeMeta | None = None

    def to_payload(self) -> dict:
        """JSON body for the wire: camelCase keys, ``meta`` only when present."""
        payload = self.model_dump(mode="json", by_alias=True)
        if self.meta is None:
            payload.pop("meta")
        return payload
