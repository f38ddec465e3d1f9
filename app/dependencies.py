from typing import Annotated

from fastapi import Depends, Request

from app.repositories.company_repository import CompanyRepository
from app.services.company_scraper import CompanyScraperService


def get_company_scraper(request: Request) -> CompanyScraperService:
    return request.app.state.company_scraper


def get_company_repository(request: Request) -> CompanyRepository:
    return request.app.state.company_repository


CompanyScraperDep = Annotated[CompanyScraperService, Depends(get_company_scraper)]
CompanyRepositoryDep = Annotated[CompanyRepository, Depends(get_company_repository)]
