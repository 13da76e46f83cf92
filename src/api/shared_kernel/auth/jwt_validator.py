"""JWT validation for session tokens issued by the identity provider.

Tokens are signed with a shared secret. The validator checks signature
and expiry and extracts the user id claim.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from jose import JWTError, jwt
from jose.exceptions import ExpiredSignatureError

if TYPE_CHECKING:
    from shared_kernel.auth.observability import JWTValidatorProbe


@dataclass(frozen=True)
class TokenClaims:
    """Validated JWT claims."""

    user_id: str
    email: str | None


class InvalidTokenError(Exception):
    """Raised when JWT validation fails."""

    pass


class JWTValidator:
    """Validates shared-secret signed JWTs.

    The user id is read from the configured claim, falling back to ``sub``.
    """

    def __init__(
        self,
        secret_key: str,
        probe: JWTValidatorProbe,
        algorithm: str = "HS256",
        user_id_claim: str = "id",
    ):
        """Initialize the JWT validator.

        Args:
            secret_key: Shared signing secret.
            probe: Observability probe for logging events.
            algorithm: Signing algorithm (default: HS256).
            user_id_claim: JWT claim to use for user ID (default: id).
        """
        self._secret_key = secret_key
        self._probe = probe
        self._algorithm = algorithm
        self._user_id_claim = user_id_claim

    def validate_token(self, token: str) -> TokenClaims:
        """Validate JWT and return claims.

        Args:
            token: The JWT token string.

        Returns:
            TokenClaims containing the validated claims.

        Raises:
            InvalidTokenError: If token is invalid, expired, or verification fails.
        """
        try:
            claims = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"verify_aud": False},
            )
        except ExpiredSignatureError as e:
            self._probe.token_validation_failed(reason="Token expired")
            raise InvalidTokenError("Token has expired") from e
        except JWTError as e:
            self._probe.token_validation_failed(reason=f"JWT error: {e}")
            raise InvalidTokenError(f"Invalid token: {e}") from e

        user_id = claims.get(self._user_id_claim)
        if user_id is None:
            user_id = claims.get("sub")
        if user_id is None or str(user_id).strip() == "":
            self._probe.token_validation_failed(
                reason=f"Missing {self._user_id_claim} claim"
            )
            raise InvalidTokenError(f"Missing required claim: {self._user_id_claim}")

        email = claims.get("email")
        self._probe.token_validated(user_id=str(user_id))

        return TokenClaims(
            user_id=str(user_id),
            email=str(email) if email is not None else None,
        )
