from typing import Optional
from sqlalchemy import select, update
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
import logging

from shortlink.db.Models.models import ShortUrl, utcnow

logger = logging.getLogger(__name__)


def get_by_slug(db: Session, slug: str) -> Optional[ShortUrl]:
    return db.execute(select(ShortUrl).where(ShortUrl.slug == slug)).scalar_one_or_none()


def slug_exists(db: Session, slug: str) -> bool:
    return db.execute(select(ShortUrl.id).where(ShortUrl.slug == slug)).first() is not None


def create_short_url(db: Session, slug: str, target_url: str) -> ShortUrl:
    """Insert a new mapping. Raises IntegrityError if the slug is already stored."""
    db_url = ShortUrl(slug=slug, target_url=target_url, clicks=0)
    try:
        db.add(db_url)
        db.commit()
        db.refresh(db_url)
        return db_url
    except IntegrityError as e:
        db.rollback()
        logger.warning("IntegrityError creating ShortUrl slug=%s: %s", slug, str(e.orig))
        raise


def increment_click(db: Session, slug: str) -> int:
    updated = db.execute(
        update(ShortUrl)
        .where(ShortUrl.slug == slug)
        .values(clicks=ShortUrl.clicks + 1, last_accessed_at=utcnow())
    ).rowcount
    db.commit()
    return updated


def increment_click_returning_target(db: Session, slug: str) -> Optional[str]:
    """Count a click and fetch the target in one statement; None when the slug is unknown."""
    target_url = db.execute(
        update(ShortUrl)
        .where(ShortUrl.slug == slug)
        .values(clicks=ShortUrl.clicks + 1, last_accessed_at=utcnow())
        .returning(ShortUrl.target_url)
    ).scalar_one_or_none()
    db.commit()
    return target_url
