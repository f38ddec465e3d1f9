from app.schemas.company import ProfileCandidate, ScrapeStatus

MIN_ABOUT_LENGTH = 50


def classify_scrape_status(profile: ProfileCandidate) -> ScrapeStatus:
    """Coarse quality label for a completed scrape.

    Never returns ``failed``; that status is reserved for pipeline faults.
    """
    if profile.name and profile.about and len(profile.about.strip()) >= MIN_ABOUT_LENGTH:
        return ScrapeStatus.success
    return ScrapeStatus.partial
