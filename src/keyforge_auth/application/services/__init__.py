"""Application services for keyforge_auth."""

from keyforge_auth.application.services.credential_provider import CredentialProvider

__all__ = ["CredentialProvider"]
