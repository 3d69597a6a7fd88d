"""Abstract repository interface for users.

This interface defines the contract for user persistence.
Implementations can use SQLAlchemy, an in-memory store, or any other storage.
"""

from abc import ABC, abstractmethod

from keyforge_auth.schemas import User


class UserRepository(ABC):
    """
    Abstract repository interface for registered users.

    The credential provider only reads users and replaces password hashes.
    Creating users belongs to the admin surface; ``add`` exists for it.
    """

    @abstractmethod
    async def find_by_email(self, email: str) -> User | None:
        """
        Find a user by email.

        Parameters
        ----------
        email
            The user's email, compared case-sensitively

        Returns
        -------
        The user if found, None otherwise
        """

    @abstractmethod
    async def add(self, user: User) -> None:
        """
        Store a new user.

        Parameters
        ----------
        user
            The user to store; its email must not be registered yet
        """

    @abstractmethod
    async def update(self, user: User) -> None:
        """
        Replace the stored record of an existing user.

        Parameters
        ----------
        user
            The updated user, matched by email

        Raises
        ------
        UserNotFoundError
            If no user with that email is stored
        """
