import pytest

from shortlink.core.exceptions import (
    InvalidURLFormatError,
    SlugAllocationError,
    SlugNotFoundError,
    URLRequiredError,
)
from shortlink.db import repository
from shortlink.db.Models.models import ShortUrl
from shortlink.services import shortener as shortener_module
from shortlink.services.shortener import MAX_SLUG_ATTEMPTS, URLService


def test_generated_slug_retries_after_collision(db_session, monkeypatch):
    repository.create_short_url(db_session, "AAAAAAAA", "https://example.com/existing")
    candidates = iter(["AAAAAAAA", "BBBBBBBB"])
    monkeypatch.setattr(shortener_module, "generate_slug", lambda: next(candidates))

    db_url = URLService.create_short_url(db_session, "https://example.com/new")
    assert db_url.slug == "BBBBBBBB"


def test_allocation_gives_up_after_max_attempts(db_session, monkeypatch):
    repository.create_short_url(db_session, "AAAAAAAA", "https://example.com/existing")
    calls = []

    def always_same():
        calls.append(1)
        return "AAAAAAAA"

    monkeypatch.setattr(shortener_module, "generate_slug", always_same)

    with pytest.raises(SlugAllocationError):
        URLService.create_short_url(db_session, "https://example.com/new")
    assert len(calls) == MAX_SLUG_ATTEMPTS


def test_insert_conflict_is_treated_as_taken(db_session, monkeypatch):
    """Two allocations of one custom slug that both pass the existence check never share it."""
    monkeypatch.setattr(repository, "slug_exists", lambda db, slug: False)

    first = URLService.create_short_url(db_session, "https://example.com/a", "promo")
    second = URLService.create_short_url(db_session, "https://example.com/b", "promo")

    assert first.slug == "promo"
    assert second.slug.startswith("promo-")
    assert db_session.query(ShortUrl).filter(ShortUrl.slug == "promo").count() == 1
    assert db_session.query(ShortUrl).count() == 2


def test_next_candidate():
    assert URLService.next_candidate("brand", 0) == "brand"
    assert URLService.next_candidate("brand", 1).startswith("brand-")
    assert len(URLService.next_candidate(None, 0)) == 8
    assert len(URLService.next_candidate(None, 5)) == 8


def test_create_rejects_bad_urls(db_session):
    with pytest.raises(URLRequiredError):
        URLService.create_short_url(db_session, None)
    with pytest.raises(InvalidURLFormatError):
        URLService.create_short_url(db_session, "not-a-url")


def test_resolve_and_count(db_session):
    repository.create_short_url(db_session, "inline", "https://example.com/inline")

    assert URLService.resolve_and_count(db_session, "inline") == "https://example.com/inline"
    db_session.expire_all()
    assert repository.get_by_slug(db_session, "inline").clicks == 1


def test_lookups_raise_for_unknown_slug(db_session):
    with pytest.raises(SlugNotFoundError):
        URLService.get_target_url(db_session, "missing")
    with pytest.raises(SlugNotFoundError):
        URLService.resolve_and_count(db_session, "missing")
