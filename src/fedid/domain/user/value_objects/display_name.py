"""DisplayName value object."""

from dataclasses import dataclass

from fedid.domain.user.exceptions import EmptyDisplayNameError


@dataclass(frozen=True)
class DisplayName:
    """Human-readable name shown for a user. Must not be empty."""

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise EmptyDisplayNameError()

    def __str__(self) -> str:
        return self.value
