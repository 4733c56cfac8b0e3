"""Tests for slug generation."""

import random

import pytest
from shortlink.slug import SlugGenerator


class TestSlugGenerator:
    """Test slug generation."""

    def test_generate_default_length(self):
        generator = SlugGenerator()

        slug = generator.generate()
        assert len(slug) == 10
        assert generator.is_valid_format(slug)

    def test_generate_custom_length(self):
        generator = SlugGenerator(default_length=10)

        slug = generator.generate(length=16)
        assert len(slug) == 16
        assert generator.is_valid_format(slug)

    def test_alphabet_is_url_safe(self):
        """Test that the alphabet has 64 characters that need no escaping."""
        alphabet = SlugGenerator.URL_SAFE_CHARS

        assert len(alphabet) == 64
        assert len(set(alphabet)) == 64
        assert all(c.isalnum() or c in "-_" for c in alphabet)

    def test_seeded_source_is_deterministic(self):
        """Same seed, same sequence of slugs."""
        first = SlugGenerator(rng=random.Random(42))
        second = SlugGenerator(rng=random.Random(42))

        assert [first.generate() for _ in range(5)] == [second.generate() for _ in range(5)]

    def test_generated_slugs_are_distinct(self):
        generator = SlugGenerator()

        slugs = {generator.generate() for _ in range(1000)}
        # 64^10 possibilities
        assert len(slugs) == 1000

    def test_collision_probability(self):
        generator = SlugGenerator(default_length=10)

        assert generator.keyspace_size == 64 ** 10
        assert generator.collision_probability(1_000_000) < 1e-11
        assert generator.collision_probability(0) == 0

    def test_is_valid_format(self):
        generator = SlugGenerator()

        assert generator.is_valid_format("abc123")
        assert generator.is_valid_format("ABC_123")
        assert generator.is_valid_format("test-code")

        assert not generator.is_valid_format("")
        assert not generator.is_valid_format("abc 123")
        assert not generator.is_valid_format("abc@123")

    def test_rejects_bad_parameters(self):
        with pytest.raises(ValueError):
            SlugGenerator(default_length=0)

        with pytest.raises(ValueError):
            SlugGenerator(alphabet="aaaa")
