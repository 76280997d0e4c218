from typing import Callable, List, Optional
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
import logging

from app.db.Models.models import ShortenedURL

logger = logging.getLogger(__name__)


def _commit_and_refresh(db: Session, mapping: ShortenedURL) -> ShortenedURL:
    try:
        db.add(mapping)
        db.commit()
        db.refresh(mapping)
        return mapping
    except IntegrityError as e:
        db.rollback()
        logger.warning(
            "IntegrityError creating ShortenedURL alias=%s full_url=%s: %s",
            mapping.alias, mapping.full_url[:50], str(e.orig) if e.orig is not None else str(e)
        )
        raise


class MappingRepository:
    """Durable alias -> URL table.

    Every call opens its own session, so each mutation commits (or rolls
    back) as a single transaction. Lookups return ``None``/``False`` instead
    of raising; deciding what a missing row means is the caller's job.
    """

    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def exists(self, alias: str) -> bool:
        with self._session_factory() as db:
            return db.query(ShortenedURL.id).filter(ShortenedURL.alias == alias).first() is not None

    def save(self, alias: str, full_url: str) -> Optional[ShortenedURL]:
        """Insert a mapping; ``None`` means the alias is already taken."""
        with self._session_factory() as db:
            mapping = ShortenedURL(alias=alias, full_url=full_url)
            try:
                return _commit_and_refresh(db, mapping)
            except IntegrityError:
                return None

    def find_by_alias(self, alias: str) -> Optional[ShortenedURL]:
        with self._session_factory() as db:
            return db.query(ShortenedURL).filter(ShortenedURL.alias == alias).first()

    def delete(self, alias: str) -> bool:
        with self._session_factory() as db:
            deleted = db.query(ShortenedURL).filter(ShortenedURL.alias == alias).delete(
                synchronize_session=False
            )
            db.commit()
            return deleted > 0

    def list_all(self) -> List[ShortenedURL]:
        with self._session_factory() as db:
            return db.query(ShortenedURL).order_by(ShortenedURL.id).all()
