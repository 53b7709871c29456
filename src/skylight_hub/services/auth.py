"""Sign-in flow and frame selection."""

import asyncio
import logging
from dataclasses import dataclass

from skylight_hub.adapters import endpoints
from skylight_hub.adapters.skylight_client import SkylightTransport
from skylight_hub.domain.frames import Frame
from skylight_hub.domain.session import SessionContext
from skylight_hub.domain.users import LoginResult, User
from skylight_hub.errors import SkylightError
from skylight_hub.jsonapi.document import parse_document
from skylight_hub.mappers.common import map_primary
from skylight_hub.mappers.users import login_from_resource, user_from_resource
from skylight_hub.services.frames import FramesService

_logger = logging.getLogger(__name__)


@dataclass
class AuthService:
    """Signs the user in and keeps the session's user and frame current."""

    transport: SkylightTransport
    frames_service: FramesService
    session: SessionContext

    async def login(self, email: str, password: str) -> LoginResult:
        """Exchange credentials for a token, then load the user and frames."""
        payload = await self.transport.request(endpoints.login(email, password))
        result = map_primary(parse_document(payload), login_from_resource)
        self.session.sign_in(result.user_id, result.token)
        await self.load_frames()
        return result

    def logout(self) -> None:
        self.session.clear()

    async def restore(self) -> None:
        """Refresh session details for credentials loaded from storage."""
        if not self.session.is_authenticated:
            return
        frame_id = self.session.current_frame_id
        if frame_id is not None:
            await self.load_frame_info(frame_id)
        else:
            await self.load_frames()

    async def get_current_user(self) -> User:
        payload = await self.transport.request(endpoints.get_current_user())
        return map_primary(parse_document(payload), user_from_resource)

    async def load_frames(self) -> list[Frame]:
        """Load the user and the available frames concurrently.

        A sole available frame is selected automatically. Failures are
        logged and leave an empty frame list.
        """
        user_result, frames_result = await asyncio.gather(
            self.get_current_user(),
            self.frames_service.get_frames(),
            return_exceptions=True,
        )
        if isinstance(user_result, SkylightError):
            _logger.warning("Failed to load user info: %s", user_result)
        elif isinstance(user_result, BaseException):
            raise user_result
        else:
            self.session.user = user_result

        frames: list[Frame] = []
        if isinstance(frames_result, SkylightError):
            _logger.warning("Failed to fetch frames: %s", frames_result)
        elif isinstance(frames_result, BaseException):
            raise frames_result
        else:
            frames = frames_result

        self.session.available_frames = frames
        if len(frames) == 1:
            self.select_frame(frames[0])
        return frames

    async def load_frame_info(self, frame_id: str) -> Frame | None:
        try:
            frame = await self.frames_service.get_frame(frame_id)
        except SkylightError as exc:
            _logger.warning("Failed to load frame %s: %s", frame_id, exc)
            return None
        self.session.select_frame(frame)
        return frame

    def select_frame(self, frame: Frame) -> None:
        self.session.select_frame(frame)

    def clear_frame_selection(self) -> None:
        self.session.clear_frame_selection()
