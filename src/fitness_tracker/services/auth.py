"""Password hashing and access tokens."""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from uuid import UUID

import bcrypt
import jwt

from fitness_tracker.domain.accounts import Account, TokenClaims
from fitness_tracker.domain.errors import InvalidToken

# bcrypt ignores input past 72 bytes; newer releases reject it instead.
_BCRYPT_MAX_BYTES = 72


@dataclass
class PasswordHasher:
    """Salted bcrypt hashing for account passwords."""

    rounds: int = 10

    def hash(self, password: str) -> str:
        """Return a salted hash for the password."""
        hashed = bcrypt.hashpw(_encode(password), bcrypt.gensalt(rounds=self.rounds))
        return hashed.decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        """Return True when the password matches the stored hash."""
        try:
            return bcrypt.checkpw(_encode(password), password_hash.encode("utf-8"))
        except ValueError:
            return False


@dataclass
class TokenService:
    """Issues and verifies signed access tokens."""

    secret: str
    algorithm: str = "HS256"
    ttl_minutes: int = 60

    def issue(self, account: Account, now: datetime | None = None) -> str:
        """Return a signed token identifying the account."""
        issued_at = now or datetime.now(tz=UTC)
        payload = {
            "userId": str(account.id),
            "name": account.name,
            "email": account.email,
            "iat": issued_at,
            "exp": issued_at + timedelta(minutes=self.ttl_minutes),
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def verify(self, token: str) -> TokenClaims:
        """Decode a token, raising InvalidToken when it can't be trusted."""
        try:
            payload = jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                options={"require": ["exp", "userId"]},
            )
            user_id = UUID(str(payload["userId"]))
        except (jwt.InvalidTokenError, ValueError) as exc:
            raise InvalidToken() from exc
        return TokenClaims(
            user_id=user_id,
            name=str(payload.get("name", "")),
            email=str(payload.get("email", "")),
        )


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:_BCRYPT_MAX_BYTES]
