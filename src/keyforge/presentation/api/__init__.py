"""FastAPI transport for the credential provider.

Use ``keyforge.presentation.api.app:app`` as the uvicorn target or call
``create_app()`` for a fresh instance.
"""
