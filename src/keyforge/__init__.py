"""keyforge - credential provider service.

Issues signed access tokens for registered users and runs the
self-service password reset flow over HTTP.
"""

__version__ = "0.1.0"
