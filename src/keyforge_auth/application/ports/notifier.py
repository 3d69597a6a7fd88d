"""Port for delivering password reset tokens out-of-band."""

from abc import ABC, abstractmethod
from typing import Any


class PasswordResetNotifier(ABC):
    """Delivers a reset token to the user it was issued for."""

    @abstractmethod
    async def send_password_reset_message(
        self,
        recipient: str,
        reset_token: str,
        claims: dict[str, Any],
    ) -> None:
        """Send the reset token to ``recipient``.

        Parameters
        ----------
        recipient
            The email address of the user
        reset_token
            The secret token value the user has to present
        claims
            The user's claims, available to message templates
        """
