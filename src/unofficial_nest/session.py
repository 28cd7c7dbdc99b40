"""Session state consumed by the request builder."""

from __future__ import annotations

import dataclasses
import re
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Mapping, Protocol, runtime_checkable

from .constants import EXPIRES_FORMAT
from .errors import SessionError

_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = {
    name: index
    for index, name in enumerate(
        ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"),
        start=1,
    )
}
_EXPIRES_RE = re.compile(
    r"(?P<weekday>[A-Za-z]{3}), (?P<day>\d{2})-(?P<month>[A-Za-z]{3})-(?P<year>\d{4}) "
    r"(?P<hour>\d{2}):(?P<minute>\d{2}):(?P<second>\d{2}) [A-Z]{1,5}$"
)


@runtime_checkable
class Session(Protocol):
    """Read-only view of a logged-in session.

    Implementations may perform I/O inside :meth:`require_login` (for example a
    login round-trip); the builder only reads the attributes afterwards.
    """

    @property
    def transport_url(self) -> str: ...

    @property
    def user_id(self) -> str: ...

    @property
    def access_token(self) -> str: ...

    def require_login(self) -> None: ...


@dataclass(frozen=True)
class NestSession:
    """Immutable snapshot of the credentials returned by a login call."""

    transport_url: str = ""
    user_id: str = ""
    access_token: str = ""
    expires_at: datetime | None = None

    @classmethod
    def from_login_response(cls, data: Mapping[str, Any]) -> "NestSession":
        """Build a session from the decoded JSON body of a login response."""
        token = data.get("access_token")
        user_id = data.get("userid")
        if not token or not user_id:
            raise SessionError("Login response is missing access_token or userid", context=dict(data))

        urls = data.get("urls") or {}
        expires = data.get("expires_in")
        return cls(
            transport_url=str(urls.get("transport_url") or ""),
            user_id=str(user_id),
            access_token=str(token),
            expires_at=parse_expires(expires) if expires else None,
        )

    @property
    def is_logged_in(self) -> bool:
        try:
            self.require_login()
        except SessionError:
            return False
        return True

    def require_login(self, now: datetime | None = None) -> None:
        if not self.access_token or not self.user_id or not self.transport_url:
            raise SessionError("Not logged in")
        if self.expires_at is not None:
            current = now or datetime.now(timezone.utc)
            if current >= self.expires_at:
                raise SessionError(
                    f"Session expired at {self.expires_at.isoformat()}",
                    context=self.expires_at,
                )

    def with_transport_url(self, transport_url: str) -> "NestSession":
        return dataclasses.replace(self, transport_url=transport_url)


def parse_expires(value: str) -> datetime:
    """Parse a timestamp laid out like ``Mon, 02-Jan-2006 15:04:05 GMT``.

    Day and month names are matched against fixed English tables, so the
    result does not depend on the process locale. Any zone abbreviation is
    accepted and the time is read as UTC.
    """
    match = _EXPIRES_RE.match(value.strip())
    if not match or match["weekday"] not in _WEEKDAYS or match["month"] not in _MONTHS:
        raise SessionError(
            f"Invalid expiry timestamp {value!r}, expected layout {EXPIRES_FORMAT!r}",
            context=value,
        )
    try:
        return datetime(
            int(match["year"]),
            _MONTHS[match["month"]],
            int(match["day"]),
            int(match["hour"]),
            int(match["minute"]),
            int(match["second"]),
            tzinfo=timezone.utc,
        )
    except ValueError as exc:
        raise SessionError(f"Invalid expiry timestamp {value!r}", context=value) from exc


__all__ = ["NestSession", "Session", "parse_expires"]
