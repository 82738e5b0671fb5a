from fastapi import APIRouter, Depends, status, BackgroundTasks, Request
from fastapi.responses import RedirectResponse
from sqlalchemy.orm import Session
import logging

from shortlink.api.responses import error_response, internal_error_response
from shortlink.core.config import settings
from shortlink.core.exceptions import InvalidSlugError, InvalidTargetURLError, SlugAllocationError, SlugNotFoundError
from shortlink.db.Connection import database
from shortlink.schemas import ErrorResponse, ShortenRequest, ShortenResponse
from shortlink.services.shortener import URLService
from shortlink.services import metrics

logger = logging.getLogger(__name__)

router = APIRouter()


def build_short_url(request: Request, slug: str) -> str:
    origin = settings.BASE_URL or f"{request.url.scheme}://{request.url.netloc}"
    return f"{origin.rstrip('/')}/{slug}"


@router.post(
    "/api/shorten",
    response_model=ShortenResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    tags=["shorten"],
)
def shorten_url_endpoint(url_request: ShortenRequest, request: Request, db: Session = Depends(database.get_db)):
    try:
        db_url = URLService.create_short_url(db, url_request.url, url_request.slug)
    except (InvalidTargetURLError, InvalidSlugError) as e:
        logger.warning(f"Rejected shorten request: {e}")
        return error_response(status.HTTP_400_BAD_REQUEST, str(e))
    except SlugAllocationError as e:
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(e))
    except Exception as e:
        logger.exception("Error creating short URL")
        return internal_error_response(e)

    logger.info(f"API success: Shortened {db_url.target_url[:50]}... to {db_url.slug}")
    return ShortenResponse(
        slug=db_url.slug,
        short_url=build_short_url(request, db_url.slug),
        target_url=db_url.target_url,
    )


@router.get(
    "/{slug}",
    response_class=RedirectResponse,
    status_code=status.HTTP_307_TEMPORARY_REDIRECT,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    tags=["redirect"],
)
def redirect_to_url_endpoint(slug: str, background_tasks: BackgroundTasks, db: Session = Depends(database.get_db)):
    """
    Redirect to the target URL of a slug and count the click.

    In background mode the click is recorded after the response has been
    sent; in inline mode lookup and increment are one UPDATE ... RETURNING.
    """
    try:
        if settings.CLICK_TRACKING_MODE == "inline":
            target_url = URLService.resolve_and_count(db, slug)
        else:
            target_url = URLService.get_target_url(db, slug)
            metrics.schedule_click(background_tasks, slug)
    except SlugNotFoundError as e:
        logger.warning(f"Redirect 404: Slug not found: {slug}")
        return error_response(status.HTTP_404_NOT_FOUND, str(e))
    except Exception:
        logger.exception(f"Error redirecting {slug}")
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")

    logger.info(f"Redirect {slug} -> {target_url[:50]}")
    return RedirectResponse(url=target_url, status_code=status.HTTP_307_TEMPORARY_REDIRECT)
