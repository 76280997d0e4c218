from typing import Dict, List, Optional
import logging

from app.core.errors import ShortenerError
from app.db.repository import MappingRepository
from app.services.alias_allocator import AliasAllocator


logger = logging.getLogger(__name__)


class URLService:

    def __init__(self, repository: MappingRepository, allocator: AliasAllocator, base_url: str):
        self.repository = repository
        self.allocator = allocator
        self.base_url = base_url.rstrip("/")

    def build_short_url(self, alias: str) -> str:
        return f"{self.base_url}/{alias}"

    def shorten_url(self, full_url: str, custom_alias: Optional[str] = None) -> str:
        alias = self.allocator.determine_alias(custom_alias)
        if alias is None:
            raise ShortenerError.generation_exhausted(self.allocator.max_attempts)

        if self.repository.exists(alias):
            logger.warning(f"Alias collision: '{alias}' is already in use")
            raise ShortenerError.alias_already_exists(alias)

        # a concurrent create can still win the race; the unique constraint decides
        mapping = self.repository.save(alias, full_url)
        if mapping is None:
            logger.warning(f"Alias '{alias}' taken by a concurrent request")
            raise ShortenerError.alias_already_exists(alias)

        logger.info("Created shortened URL: %s -> %s", alias, full_url[:50])
        return self.build_short_url(mapping.alias)

    def get_full_url(self, alias: str) -> str:
        mapping = self.repository.find_by_alias(alias)
        if mapping is None:
            raise ShortenerError.alias_not_found(alias)
        return mapping.full_url

    def delete_url(self, alias: str) -> None:
        if not self.repository.delete(alias):
            raise ShortenerError.alias_not_found(alias)
        logger.info("Deleted shortened URL: %s", alias)

    def get_all_urls(self) -> List[Dict[str, str]]:
        return [
            {
                "alias": m.alias,
                "full_url": m.full_url,
                "short_url": self.build_short_url(m.alias),
            } for m in self.repository.list_all()
        ]
