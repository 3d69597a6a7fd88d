"""Port for issuing signed credentials."""

from abc import ABC, abstractmethod
from typing import Any


class CredentialSigner(ABC):
    """Issues a compact, verifiable credential for an authenticated user."""

    @abstractmethod
    def issue(self, email: str, claims: dict[str, Any]) -> str:
        """Issue a credential for ``email`` embedding ``claims``.

        Parameters
        ----------
        email
            The authenticated user's email
        claims
            The user's stored claims, embedded verbatim

        Returns
        -------
        The encoded credential string
        """
