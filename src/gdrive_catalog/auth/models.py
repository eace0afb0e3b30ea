"""OAuth token models."""

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any, Optional


def _utcnow() -> datetime:
    # google-auth compares expiry against naive UTC datetimes
    return datetime.now(timezone.utc).replace(tzinfo=None)


@dataclass(frozen=True)
class TokenResponse:
    """Bearer credentials returned by the token endpoint."""

    access_token: Optional[str]
    refresh_token: Optional[str] = None
    token_type: str = "Bearer"
    expires_in: Optional[int] = None
    scope: Optional[str] = None
    id_token: Optional[str] = None
    issued_at: datetime = field(default_factory=_utcnow)

    @classmethod
    def from_response(cls, data: dict[str, Any]) -> "TokenResponse":
        """Build a token from a decoded token endpoint response.

        Args:
            data: JSON body of the token endpoint response

        Returns:
            TokenResponse instance
        """
        expires_in = data.get("expires_in")
        return cls(
            access_token=data.get("access_token"),
            refresh_token=data.get("refresh_token"),
            token_type=data.get("token_type") or "Bearer",
            expires_in=int(expires_in) if expires_in is not None else None,
            scope=data.get("scope"),
            id_token=data.get("id_token"),
        )

    @property
    def has_access_token(self) -> bool:
        """Check if the access token is present and not blank."""
        return bool(self.access_token and self.access_token.strip())

    @property
    def expiry(self) -> Optional[datetime]:
        """Naive UTC expiry time, if the endpoint reported a lifetime."""
        if self.expires_in is None:
            return None
        return self.issued_at + timedelta(seconds=self.expires_in)

    @property
    def scopes(self) -> list[str]:
        """Scopes granted by the endpoint."""
        return self.scope.split() if self.scope else []

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dict."""
        return {
            "access_token": self.access_token,
            "refresh_token": self.refresh_token,
            "token_type": self.token_type,
            "expires_in": self.expires_in,
            "scope": self.scope,
            "expiry": self.expiry.isoformat() if self.expiry else None,
        }
