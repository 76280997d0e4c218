from sqlalchemy import Column, String, Integer, DateTime
from sqlalchemy.orm import declarative_base
from datetime import datetime, timezone

Base = declarative_base()


def _utcnow():
    return datetime.now(timezone.utc)


class ShortenedURL(Base):
    __tablename__ = "shortened_urls"

    # Numeric surrogate primary key, assigned by the database
    id = Column(Integer, primary_key=True, autoincrement=True)

    # Alias: the unique constraint is what serialises concurrent creates
    alias = Column(String(64), unique=True, index=True, nullable=False)

    full_url = Column(String(2048), nullable=False)
    created_at = Column(DateTime, default=_utcnow, nullable=False)

    def __repr__(self):
        return f"<ShortenedURL alias={self.alias!r} full_url={self.full_url[:50]!r}>"
