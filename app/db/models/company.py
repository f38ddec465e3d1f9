from datetime import datetime, timezone

from sqlalchemy import JSON, Column, DateTime, Integer, String, Text

from app.db.base import Base


class CompanyORM(Base):
    __tablename__ = "companies"

    id = Column(Integer, primary_key=True, autoincrement=True)
    website = Column(String, nullable=False, unique=True)

    name = Column(String, nullable=True)
    about = Column(Text, nullable=True)
    email = Column(String, nullable=True)
    phones = Column(JSON, nullable=False, default=list)
    location = Column(Text, nullable=True)
    socials = Column(JSON, nullable=False, default=dict)
    platform = Column(String, nullable=False, default="unknown")

    scrape_status = Column(String, nullable=False)
    last_scraped_at = Column(DateTime(timezone=True), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))
