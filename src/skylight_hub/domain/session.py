"""Explicit session state shared by the transport, services and aggregators."""

from dataclasses import dataclass, field
from enum import Enum

from skylight_hub.domain.frames import Frame
from skylight_hub.domain.users import User


class AuthState(Enum):
    """Where the user is in the sign-in flow."""

    UNAUTHENTICATED = "unauthenticated"
    AUTHENTICATED = "authenticated"
    FRAME_SELECTED = "frame_selected"


@dataclass
class SessionContext:
    """Credentials and the selected household for one signed-in user."""

    user_id: str | None = None
    token: str | None = None
    frame_id: str | None = None
    frame: Frame | None = None
    user: User | None = None
    available_frames: list[Frame] = field(default_factory=list)

    @property
    def is_authenticated(self) -> bool:
        return self.token is not None

    @property
    def current_frame_id(self) -> str | None:
        if self.frame is not None:
            return self.frame.id
        return self.frame_id

    @property
    def state(self) -> AuthState:
        if not self.is_authenticated:
            return AuthState.UNAUTHENTICATED
        if self.current_frame_id is None:
            return AuthState.AUTHENTICATED
        return AuthState.FRAME_SELECTED

    def credentials(self) -> tuple[str, str] | None:
        """Return `(user_id, token)` when both are known."""
        if self.user_id is None or self.token is None:
            return None
        return self.user_id, self.token

    def sign_in(self, user_id: str, token: str) -> None:
        self.user_id = user_id
        self.token = token

    def select_frame(self, frame: Frame) -> None:
        self.frame = frame
        self.frame_id = frame.id

    def clear_frame_selection(self) -> None:
        self.frame = None
        self.frame_id = None

    def clear(self) -> None:
        """Forget credentials, user and frame selection."""
        self.user_id = None
        self.token = None
        self.user = None
        self.available_frames = []
        self.clear_frame_selection()
