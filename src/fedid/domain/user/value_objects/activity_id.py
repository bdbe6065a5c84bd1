"""ActivityId value object.

A federation-wide user identifier in ActivityPub style, e.g.
``https://example.com/users/alice``.
"""

from dataclasses import dataclass

from fedid.domain.user.exceptions import InvalidActivityIdError

HTTPS_SCHEME = "https://"
LOCAL_USER_PATH = "users"


@dataclass(frozen=True)
class ActivityId:
    """Value object wrapping an https:// actor URI.

    Examples
    --------
    >>> aid = ActivityId.for_local_user("example.com", "alice")
    >>> str(aid)
    'https://example.com/users/alice'
    >>> aid.to_acct("example.com")
    'alice'
    >>> aid.to_acct("other.org")
    'alice@example.com'
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.startswith(
            HTTPS_SCHEME,
        ):
            raise InvalidActivityIdError(str(self.value))

    @classmethod
    def for_local_user(cls, host: str, username: str) -> "ActivityId":
        """Build the activity id of a user hosted on this instance."""
        return cls(f"{HTTPS_SCHEME}{host}/{LOCAL_USER_PATH}/{username}")

    @property
    def host(self) -> str:
        """Authority part of the URI (between the scheme and the first slash)."""
        return self.value[len(HTTPS_SCHEME) :].split("/", 1)[0]

    @property
    def username(self) -> str:
        """Last non-empty path segment."""
        segments = [s for s in self.value[len(HTTPS_SCHEME) :].split("/") if s]
        return segments[-1] if len(segments) > 1 else ""

    def to_acct(self, local_host: str) -> str:
        """Render as ``name`` for local users, ``name@host`` otherwise."""
        if self.host == local_host:
            return self.username
        return f"{self.username}@{self.host}"

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"ActivityId('{self.value}')"
