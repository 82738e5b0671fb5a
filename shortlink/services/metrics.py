from shortlink.db.Connection import database
from shortlink.db import repository
import logging

logger = logging.getLogger(__name__)


def record_click(slug: str):
    db = database.SessionLocal()
    try:
        updated = repository.increment_click(db, slug)
        if updated:
            logger.info("metrics.record_click: click counted for %s", slug)
        else:
            logger.warning("metrics.record_click: no row for %s, click dropped", slug)
    except Exception:
        logger.exception("metrics.record_click: failed to update DB for %s", slug)
    finally:
        db.close()


def schedule_click(background_tasks, slug):
    background_tasks.add_task(record_click, slug)
