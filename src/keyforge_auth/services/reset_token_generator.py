"""Generator for password reset token values."""

import secrets


class ResetTokenGenerator:
    """Produces unpredictable reset token values.

    Each value is 32 bytes from the OS CSPRNG, hex encoded to 64 characters.
    """

    TOKEN_BYTES = 32

    def generate(self) -> str:
        return secrets.token_hex(self.TOKEN_BYTES)
