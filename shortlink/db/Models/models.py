from sqlalchemy import Column, String, Integer, DateTime
from sqlalchemy.orm import declarative_base
from datetime import datetime, timezone

Base = declarative_base()


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ShortUrl(Base):
    __tablename__ = "short_urls"

    id = Column(Integer, primary_key=True, autoincrement=True)

    # Public identifier; the unique index is the final word on slug collisions
    slug = Column(String, unique=True, index=True, nullable=False)
    target_url = Column(String, nullable=False)

    clicks = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    last_accessed_at = Column(DateTime(timezone=True), nullable=True)
