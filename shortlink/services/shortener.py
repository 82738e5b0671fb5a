from typing import Optional
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
import logging

from shortlink.core.exceptions import SlugAllocationError, SlugNotFoundError
from shortlink.db import repository
from shortlink.db.Models.models import ShortUrl
from shortlink.utils.encoding import generate_slug, suffix_slug
from shortlink.utils.validation import is_reserved_slug, validate_custom_slug, validate_target_url


logger = logging.getLogger(__name__)

MAX_SLUG_ATTEMPTS = 10


class URLService:

    @staticmethod
    def next_candidate(custom_slug: Optional[str], attempt: int) -> str:
        if custom_slug:
            return custom_slug if attempt == 0 else suffix_slug(custom_slug)
        return generate_slug()

    @staticmethod
    def is_slug_taken(db: Session, slug: str) -> bool:
        return is_reserved_slug(slug) or repository.slug_exists(db, slug)

    @staticmethod
    def create_short_url(db: Session, target_url, custom_slug: Optional[str] = None) -> ShortUrl:
        """
        Validate ``target_url`` and store it under a free slug.

        The first candidate is ``custom_slug`` when given, otherwise a random
        8-character identifier. A taken candidate is replaced by
        ``custom_slug`` plus a random 4-character suffix, or by a fresh random
        identifier, for at most MAX_SLUG_ATTEMPTS candidates in total. A unique
        constraint violation on insert counts as a taken candidate, since the
        existence check and the insert are not one atomic step.
        """
        target_url = validate_target_url(target_url)
        custom_slug = validate_custom_slug(custom_slug)

        for attempt in range(MAX_SLUG_ATTEMPTS):
            slug = URLService.next_candidate(custom_slug, attempt)
            if URLService.is_slug_taken(db, slug):
                logger.info("Slug collision on attempt %d/%d: '%s'", attempt + 1, MAX_SLUG_ATTEMPTS, slug)
                continue
            try:
                return repository.create_short_url(db, slug, target_url)
            except IntegrityError:
                logger.info("Slug '%s' claimed concurrently on attempt %d/%d", slug, attempt + 1, MAX_SLUG_ATTEMPTS)

        logger.error("Failed to allocate a unique slug after %d attempts (custom=%r)", MAX_SLUG_ATTEMPTS, custom_slug)
        raise SlugAllocationError()

    @staticmethod
    def get_target_url(db: Session, slug: str) -> str:
        db_url = repository.get_by_slug(db, slug)
        if db_url is None:
            raise SlugNotFoundError()
        return db_url.target_url

    @staticmethod
    def resolve_and_count(db: Session, slug: str) -> str:
        target_url = repository.increment_click_returning_target(db, slug)
        if target_url is None:
            raise SlugNotFoundError()
        return target_url
