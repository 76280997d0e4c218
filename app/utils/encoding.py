import random
import string

# Base62 alphabet (case-sensitive aliases)
ALPHABET = string.ascii_lowercase + string.ascii_uppercase + string.digits
ALIAS_LENGTH = 6


def generate_alias(rng: random.Random, length: int = ALIAS_LENGTH) -> str:
    """Draw ``length`` characters uniformly from the base62 alphabet.

    ``rng`` should be a ``random.SystemRandom`` outside of tests: generated
    aliases double as access tokens for unlisted URLs.
    """
    return ''.join(rng.choice(ALPHABET) for _ in range(length))


def is_generated_alias(alias: str, length: int = ALIAS_LENGTH) -> bool:
    return len(alias) == length and all(ch in ALPHABET for ch in alias)
