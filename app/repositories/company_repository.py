from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.orm import Session, sessionmaker

from app.db.models.company import CompanyORM
from app.exceptions.custom import CompanyStoreError
from app.schemas.company import CompanyProfile

_UPSERT_INSERTS = {
    "sqlite": sqlite_insert,
    "postgresql": pg_insert,
}


def _to_row(profile: CompanyProfile) -> dict:
    return {
        "website": profile.website,
        "name": profile.name,
        "about": profile.about,
        "email": profile.email,
        "phones": list(profile.phones),
        "location": profile.location,
        "socials": dict(profile.socials),
        "platform": profile.platform.value,
        "scrape_status": profile.scrape_status.value,
        "last_scraped_at": profile.last_scraped_at,
    }


def _as_utc(value: datetime) -> datetime:
    # SQLite drops the offset on DateTime(timezone=True)
    return value.replace(tzinfo=timezone.utc) if value.tzinfo is None else value


def _to_response(orm: CompanyORM) -> CompanyProfile:
    return CompanyProfile(
        website=orm.website,
        name=orm.name,
        about=orm.about,
        email=orm.email,
        phones=orm.phones or [],
        location=orm.location,
        socials=orm.socials or {},
        platform=orm.platform,
        scrape_status=orm.scrape_status,
        last_scraped_at=_as_utc(orm.last_scraped_at),
    )


class CompanyRepository:
    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    def get_by_website(self, website: str) -> CompanyProfile | None:
        with self._session_factory() as session:
            orm = self._find(session, website)
            return _to_response(orm) if orm else None

    def upsert(self, profile: CompanyProfile) -> CompanyProfile:
        """Insert or fully replace the row keyed by ``website``, return the stored row."""
        row = _to_row(profile)
        with self._session_factory() as session:
            insert = _UPSERT_INSERTS.get(session.get_bind().dialect.name)
            if insert is None:
                raise CompanyStoreError(
                    f"Upsert not supported for dialect {session.get_bind().dialect.name}"
                )

            stmt = insert(CompanyORM).values(**row)
            stmt = stmt.on_conflict_do_update(
                index_elements=[CompanyORM.website],
                set_={k: stmt.excluded[k] for k in row if k != "website"},
            )
            session.execute(stmt)
            session.commit()
            return _to_response(self._find(session, profile.website))

    def _find(self, session: Session, website: str) -> CompanyORM | None:
        return session.scalars(
            select(CompanyORM).where(CompanyORM.website == website)
        ).one_or_none()
