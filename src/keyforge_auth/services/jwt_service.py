"""JWT credential service.

Issues ES512-signed access tokens embedding the user's claims and verifies
them again with the derived public key.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Any

import jwt
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec

from keyforge_auth.application.ports import CredentialSigner
from keyforge_auth.exceptions import InvalidTokenError
from keyforge_auth.schemas import TokenPayload

logger = logging.getLogger(__name__)

# Claims set by the service itself; user claims never override them
REGISTERED_CLAIMS = frozenset({"email", "sub", "iat", "nbf", "exp", "iss", "aud"})


class JWTService(CredentialSigner):
    """Service for JWT creation and verification.

    Examples
    --------
    >>> service = JWTService(private_key_pem=pem)
    >>> token = service.issue("user@example.com", {"role": "admin"})
    >>> payload = service.verify_token(token)
    >>> print(payload.claims["role"])
    """

    DEFAULT_ACCESS_EXPIRE_MINUTES = 240
    ALGORITHM = "ES512"
    CURVE_NAME = "secp521r1"

    def __init__(
        self,
        private_key_pem: str,
        access_token_expire_minutes: int = DEFAULT_ACCESS_EXPIRE_MINUTES,
        issuer: str | None = None,
        audience: str | None = None,
    ):
        """Initialize the JWT service.

        Parameters
        ----------
        private_key_pem
            PEM encoded ECDSA P-521 private key. Must be kept secure.
        access_token_expire_minutes
            Minutes until an issued token expires (default 240)
        issuer
            Optional ``iss`` claim set on issued tokens and required on verify
        audience
            Optional ``aud`` claim set on issued tokens and required on verify

        Raises
        ------
        ValueError
            If the key is empty, unparsable, or not a P-521 EC key
        """
        if not private_key_pem:
            msg = "JWT private key cannot be empty"
            raise ValueError(msg)

        try:
            private_key = serialization.load_pem_private_key(
                private_key_pem.encode("utf-8"),
                password=None,
            )
        except (ValueError, TypeError) as e:
            msg = f"JWT private key could not be parsed: {e}"
            raise ValueError(msg) from e

        if not isinstance(private_key, ec.EllipticCurvePrivateKey):
            msg = "JWT private key must be an ECDSA key"
            raise ValueError(msg)
        if private_key.curve.name != self.CURVE_NAME:
            msg = (
                f"JWT private key must use curve {self.CURVE_NAME} for "
                f"{self.ALGORITHM}, got {private_key.curve.name}"
            )
            raise ValueError(msg)

        self._private_key = private_key
        self._public_key = private_key.public_key()
        self._access_expire = timedelta(minutes=access_token_expire_minutes)
        self._issuer = issuer
        self._audience = audience

    def issue(self, email: str, claims: dict[str, Any]) -> str:
        """Create a signed access token for ``email``.

        Parameters
        ----------
        email
            The authenticated user's email
        claims
            User claims merged into the payload. Registered claims
            (email, sub, iat, nbf, exp, iss, aud) always win.

        Returns
        -------
        The encoded JWT token string
        """
        return self._create_token(email, claims, self._access_expire)

    def verify_token(self, token: str) -> TokenPayload:
        """Verify and decode a JWT token.

        Parameters
        ----------
        token
            The JWT token string to verify

        Returns
        -------
        TokenPayload containing the decoded data

        Raises
        ------
        InvalidTokenError
            If token is invalid, expired, or malformed
        """
        options: dict[str, Any] = {"require": ["exp", "email"]}
        try:
            payload = jwt.decode(
                token,
                self._public_key,
                algorithms=[self.ALGORITHM],
                audience=self._audience,
                issuer=self._issuer,
                options=options,
            )

            return TokenPayload(
                email=payload["email"],
                exp=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
                claims={
                    key: value
                    for key, value in payload.items()
                    if key not in REGISTERED_CLAIMS
                },
            )

        except jwt.ExpiredSignatureError as e:
            raise InvalidTokenError("Token has expired") from e
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {e}") from e
        except (KeyError, ValueError) as e:
            raise InvalidTokenError(f"Malformed token payload: {e}") from e

    def public_key_pem(self) -> str:
        """Return the PEM encoded public key relying parties verify with."""
        return self._public_key.public_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PublicFormat.SubjectPublicKeyInfo,
        ).decode("utf-8")

    def _create_token(
        self,
        email: str,
        claims: dict[str, Any],
        expires_delta: timedelta,
    ) -> str:
        now = datetime.now(tz=timezone.utc)

        shadowed = REGISTERED_CLAIMS.intersection(claims)
        if shadowed:
            logger.warning(
                "Ignoring user claims that collide with registered claims: %s",
                ", ".join(sorted(shadowed)),
            )

        payload: dict[str, Any] = {
            key: value for key, value in claims.items() if key not in shadowed
        }
        payload.update(
            {
                "email": email,
                "sub": email,
                "iat": now,
                "nbf": now,
                "exp": now + expires_delta,
            },
        )
        if self._issuer:
            payload["iss"] = self._issuer
        if self._audience:
            payload["aud"] = self._audience

        return jwt.encode(payload, self._private_key, algorithm=self.ALGORITHM)
