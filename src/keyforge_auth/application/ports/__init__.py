"""Ports the credential provider depends on besides its repositories."""

from keyforge_auth.application.ports.notifier import PasswordResetNotifier
from keyforge_auth.application.ports.signer import CredentialSigner

__all__ = ["CredentialSigner", "PasswordResetNotifier"]
