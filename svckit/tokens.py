"""JSON Web Token helpers signed with HMAC."""

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

import jwt

from svckit.errors import log_error

_HMAC_ALGORITHMS = ["HS256", "HS384", "HS512"]
_BEARER = "Bearer "


class TokenError(Exception):
    """Raised when a token cannot be produced, read or trusted."""


def _to_numeric(value):
    return int(value.timestamp())


def _from_numeric(value):
    return datetime.fromtimestamp(value, tz=timezone.utc)


@dataclass
class StandardClaims:
    """Registered JWT claims plus the subject's ``id``."""

    id: str = ""
    issuer: str | None = None
    subject: str | None = None
    audience: list[str] | None = None
    expires_at: datetime | None = None
    not_before: datetime | None = None
    issued_at: datetime | None = None
    jwt_id: str | None = None

    def to_dict(self):
        """Return the claims as a JSON-ready mapping, omitting empty ones."""
        data = {}
        if self.issuer:
            data["iss"] = self.issuer
        if self.subject:
            data["sub"] = self.subject
        if self.audience:
            data["aud"] = list(self.audience)
        if self.expires_at is not None:
            data["exp"] = _to_numeric(self.expires_at)
        if self.not_before is not None:
            data["nbf"] = _to_numeric(self.not_before)
        if self.issued_at is not None:
            data["iat"] = _to_numeric(self.issued_at)
        if self.jwt_id:
            data["jti"] = self.jwt_id
        data["id"] = self.id
        return data

    @classmethod
    def from_dict(cls, data):
        """Build claims from a decoded token payload."""
        audience = data.get("aud")
        if isinstance(audience, str):
            audience = [audience]
        elif audience is not None:
            audience = list(audience)

        def moment(key):
            value = data.get(key)
            return None if value is None else _from_numeric(value)

        return cls(
            id=data.get("id", ""),
            issuer=data.get("iss"),
            subject=data.get("sub"),
            audience=audience,
            expires_at=moment("exp"),
            not_before=moment("nbf"),
            issued_at=moment("iat"),
            jwt_id=data.get("jti"),
        )


class JWTUtil:
    """Creates, reads and checks HMAC-signed tokens."""

    def generate(self, claims, secret):
        """Sign ``claims`` with HS256 and return the compact token."""
        payload = claims.to_dict() if hasattr(claims, "to_dict") else dict(claims)
        try:
            return jwt.encode(payload, secret, algorithm="HS256")
        except (TypeError, ValueError, jwt.PyJWTError) as exc:
            raise log_error(TokenError(str(exc))) from exc

    def parse(self, token_string, secret):
        """Verify ``token_string`` and return its claims."""
        try:
            payload = jwt.decode(
                token_string,
                secret,
                algorithms=_HMAC_ALGORITHMS,
                options={"verify_aud": False, "verify_iat": False},
            )
        except jwt.PyJWTError as exc:
            raise log_error(TokenError(str(exc))) from exc
        return StandardClaims.from_dict(payload)

    def extract_token_from_header(self, headers):
        """Return the bearer token from an ``Authorization`` header."""
        auth_header = ""
        if isinstance(headers, Mapping):
            for name, value in headers.items():
                if name.lower() == "authorization":
                    auth_header = value
                    break
        if not auth_header.startswith(_BEARER):
            raise log_error(TokenError("invalid token type"))
        return auth_header.removeprefix(_BEARER)

    def validate_token(self, token_string, secret):
        """Raise ``TokenError`` unless the token is valid."""
        self.parse(token_string, secret)

    def create_standard_claims(self, id, expire_time):
        """Return claims for ``id`` issued now and expiring after ``expire_time``."""
        if not isinstance(expire_time, timedelta):
            expire_time = timedelta(seconds=expire_time)
        now = datetime.now(timezone.utc).replace(microsecond=0)
        return StandardClaims(id=id, issued_at=now, expires_at=now + expire_time)