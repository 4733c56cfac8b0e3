"""Random slug generation."""

import random
import string
from typing import Optional


class SlugGenerator:
    """Generate random URL-safe slugs.

    Generation is a pure function of the random source and the fixed
    alphabet/length, so tests can pass a seeded ``random.Random``.
    """

    # 64 URL-safe characters (same alphabet as nanoid)
    URL_SAFE_CHARS = "_-" + string.digits + string.ascii_letters

    def __init__(
        self,
        default_length: int = 10,
        alphabet: str = URL_SAFE_CHARS,
        rng: Optional[random.Random] = None,
    ):
        """Initialize slug generator.

        Args:
            default_length: Length of generated slugs
            alphabet: Characters to draw from
            rng: Random source (defaults to the OS CSPRNG, which is thread-safe)
        """
        if default_length < 1:
            raise ValueError("default_length must be at least 1")
        if len(set(alphabet)) < 2:
            raise ValueError("alphabet needs at least two distinct characters")

        self.default_length = default_length
        self.alphabet = alphabet
        self.rng = rng or random.SystemRandom()

    def generate(self, length: Optional[int] = None) -> str:
        """Generate a random slug.

        Args:
            length: Length of the slug (uses default if not specified)

        Returns:
            Random slug
        """
        length = length or self.default_length
        return ''.join(self.rng.choices(self.alphabet, k=length))

    @property
    def keyspace_size(self) -> int:
        """Number of distinct slugs at the default length."""
        return len(self.alphabet) ** self.default_length

    def collision_probability(self, existing: int) -> float:
        """Chance that a single fresh candidate hits one of ``existing`` slugs."""
        return min(1.0, existing / self.keyspace_size)

    def is_valid_format(self, slug: str) -> bool:
        """Check that every character of ``slug`` belongs to the alphabet."""
        return bool(slug) and all(c in self.alphabet for c in slug)
