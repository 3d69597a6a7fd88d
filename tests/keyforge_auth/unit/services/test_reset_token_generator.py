"""Unit tests for ResetTokenGenerator."""

import string

from keyforge_auth.services import ResetTokenGenerator


class TestResetTokenGenerator:
    """Tests for reset token value generation."""

    def setup_method(self):
        """Set up test fixtures."""
        self.generator = ResetTokenGenerator()

    def test_token_is_64_hex_characters(self):
        """32 random bytes are hex encoded."""
        value = self.generator.generate()
        assert len(value) == 64
        assert set(value) <= set(string.hexdigits.lower())

    def test_tokens_are_unique(self):
        """Consecutive tokens never repeat."""
        values = {self.generator.generate() for _ in range(200)}
        assert len(values) == 200
