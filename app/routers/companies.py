import asyncio

from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse

from app.dependencies import CompanyRepositoryDep, CompanyScraperDep
from app.schemas.company import CompanyProfile
from app.schemas.responses import ScrapeRequest, ScrapeResponse

router = APIRouter()


@router.post("/companies/scrape", response_model=ScrapeResponse)
async def scrape_company(
    service: CompanyScraperDep,
    request: ScrapeRequest | None = None,
) -> JSONResponse:
    result = await service.scrape(request.website if request else None)
    return JSONResponse(status_code=200, content=result.to_payload())


@router.get("/companies", response_model=CompanyProfile)
async def get_company(website: str, repository: CompanyRepositoryDep) -> CompanyProfile:
    company = await asyncio.to_thread(repository.get_by_website, website)
    if company is None:
        raise HTTPException(status_code=404, detail="Company not found")
    return company
