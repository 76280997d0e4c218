import logging
import random
from typing import Callable, Optional

from app.utils.encoding import ALIAS_LENGTH, generate_alias
from app.utils.validators import RESERVED_ALIASES

logger = logging.getLogger(__name__)

MAX_ATTEMPTS = 10


class AliasAllocator:
    """Picks the alias for a new mapping.

    A non-blank custom alias is passed through untouched; its uniqueness is
    checked by the caller. Otherwise random aliases are drawn until one is
    free according to ``exists`` and not a reserved route name, giving up
    after ``max_attempts`` draws.
    """

    def __init__(
        self,
        exists: Callable[[str], bool],
        rng: Optional[random.Random] = None,
        length: int = ALIAS_LENGTH,
        max_attempts: int = MAX_ATTEMPTS,
    ):
        self._exists = exists
        self._rng = rng or random.SystemRandom()
        self.length = length
        self.max_attempts = max_attempts

    def determine_alias(self, custom_alias: Optional[str] = None) -> Optional[str]:
        """Return the alias to use, or ``None`` when every random draw collided."""
        if custom_alias and custom_alias.strip():
            return custom_alias
        return self._generate_unique_alias()

    def _generate_unique_alias(self) -> Optional[str]:
        for attempt in range(self.max_attempts):
            alias = generate_alias(self._rng, self.length)
            if alias not in RESERVED_ALIASES and not self._exists(alias):
                return alias
            logger.info(f"Alias collision on attempt {attempt + 1}/{self.max_attempts}")

        logger.error(f"Failed to generate unique alias after {self.max_attempts} attempts")
        return None
