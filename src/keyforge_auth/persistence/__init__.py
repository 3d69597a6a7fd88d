"""Persistence implementations for keyforge_auth.

This package contains database-specific implementations of the
repository interfaces defined in keyforge_auth.repositories.

Structure:
    persistence/
    └── sqlalchemy/     # SQLAlchemy (async) implementation
"""
