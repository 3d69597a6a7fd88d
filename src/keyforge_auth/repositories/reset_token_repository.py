"""Abstract repository interface for password reset tokens."""

from abc import ABC, abstractmethod

from keyforge_auth.schemas import ResetToken


class ResetTokenRepository(ABC):
    """Abstract repository for password reset tokens."""

    @abstractmethod
    async def create(self, token: ResetToken) -> int:
        """Persist a new token.

        Parameters
        ----------
        token
            The token to store; its ``id`` is ignored

        Returns
        -------
        The identifier assigned to the token
        """

    @abstractmethod
    async def find_by_email_and_value(
        self,
        email: str,
        value: str,
    ) -> list[ResetToken]:
        """Find every token issued for ``email`` carrying ``value``.

        Tokens of all kinds are returned; filtering by kind is up to the caller.

        Parameters
        ----------
        email
            The owner email
        value
            The secret token value presented by the user

        Returns
        -------
        Matching tokens, possibly empty
        """

    @abstractmethod
    async def delete(self, token_id: int) -> None:
        """Delete a token by its identifier.

        Parameters
        ----------
        token_id
            The identifier returned by ``create``
        """
