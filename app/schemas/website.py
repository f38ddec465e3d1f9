from enum import StrEnum

from pydantic import BaseModel


class Platform(StrEnum):
    shopify = "shopify"
    unknown = "unknown"


class SourcePage(BaseModel):
    url: str
    html: str


class PageFetchResult(BaseModel):
    """Outcome of one deep-page fetch: either a page or the reason it is absent."""

    url: str
    page: SourcePage | None = None
    reason: str | None = None  # "timeout" | "http_404" | "transport: ..." etc.

    @property
    def ok(self) -> bool:
        return self.page is not None


class FieldExtraction(BaseModel):
    name: str | None = None
    about: str | None = None
    email: str | None = None
    phones: list[str] = []  # +91 prefixed, first-seen order
    location: str | None = None
    socials: dict[str, str] = {}
    platform: Platform = Platform.unknown
