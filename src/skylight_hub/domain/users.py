"""User and authentication domain models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    """The signed-in account."""

    id: str
    email: str
    name: str | None = None
    phone: str | None = None
    subscription_status: str | None = None

    @property
    def display_name(self) -> str:
        return self.name or self.email

    @property
    def initials(self) -> str:
        if self.name:
            words = self.name.split()
            if len(words) >= 2:  # noqa: PLR2004
                return (words[0][:1] + words[1][:1]).upper()
            return self.name[:2].upper()
        return self.email[:2].upper()


@dataclass(frozen=True)
class LoginResult:
    """Credentials returned by a successful login."""

    user_id: str
    email: str
    token: str
    subscription_status: str | None = None
