from keyforge_auth.infrastructure.email.email_service import (
    EmailNotConfiguredError,
    EmailService,
)

__all__ = ["EmailNotConfiguredError", "EmailService"]
