"""Concrete collaborators of the credential provider."""
