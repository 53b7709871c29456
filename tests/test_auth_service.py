"""Tests for sign-in and frame selection."""

import asyncio

from skylight_hub.domain.session import AuthState, SessionContext
from skylight_hub.errors import ServerError
from skylight_hub.services.auth import AuthService
from skylight_hub.services.frames import FramesService


def _frame(frame_id: str, name: str):
    return {
        "id": frame_id,
        "type": "frame",
        "attributes": {"name": name, "timezone": "UTC"},
    }


def _login_payload():
    return {
        "data": {
            "id": "user-1",
            "type": "authenticated_user",
            "attributes": {"email": "sam@example.com", "token": "token-1"},
        }
    }


def _user_payload():
    return {
        "data": {
            "id": "user-1",
            "type": "user",
            "attributes": {"email": "sam@example.com"},
        }
    }


def _service(transport, session: SessionContext) -> AuthService:
    return AuthService(
        transport=transport,
        frames_service=FramesService(transport),
        session=session,
    )


def test_login_selects_sole_frame(transport) -> None:
    transport.respond("POST", "/api/sessions", _login_payload())
    transport.respond("GET", "/api/user", _user_payload())
    transport.respond("GET", "/api/frames", {"data": [_frame("frame-1", "Home")]})
    session = SessionContext()

    result = asyncio.run(_service(transport, session).login("sam@example.com", "pw"))

    assert result.token == "token-1"
    assert session.credentials() == ("user-1", "token-1")
    assert session.user is not None
    assert session.user.email == "sam@example.com"
    assert session.state is AuthState.FRAME_SELECTED
    assert session.current_frame_id == "frame-1"


def test_login_with_several_frames_waits_for_selection(transport) -> None:
    transport.respond("POST", "/api/sessions", _login_payload())
    transport.respond("GET", "/api/user", _user_payload())
    transport.respond(
        "GET",
        "/api/frames",
        {"data": [_frame("frame-1", "Home"), _frame("frame-2", "Cabin")]},
    )
    session = SessionContext()
    service = _service(transport, session)

    asyncio.run(service.login("sam@example.com", "pw"))

    assert session.state is AuthState.AUTHENTICATED
    assert [frame.id for frame in session.available_frames] == ["frame-1", "frame-2"]

    service.select_frame(session.available_frames[1])
    assert session.current_frame_id == "frame-2"


def test_load_frames_tolerates_failures(transport) -> None:
    transport.respond("GET", "/api/user", ServerError(500))
    transport.respond("GET", "/api/frames", ServerError(503))
    session = SessionContext(user_id="user-1", token="token-1")

    frames = asyncio.run(_service(transport, session).load_frames())

    assert frames == []
    assert session.user is None
    assert session.state is AuthState.AUTHENTICATED


def test_restore_reloads_selected_frame(transport) -> None:
    transport.respond("GET", "/api/frames/frame-1", {"data": _frame("frame-1", "Home")})
    session = SessionContext(user_id="user-1", token="token-1", frame_id="frame-1")

    asyncio.run(_service(transport, session).restore())

    assert session.frame is not None
    assert session.frame.name == "Home"


def test_restore_keeps_frame_id_when_lookup_fails(transport) -> None:
    session = SessionContext(user_id="user-1", token="token-1", frame_id="frame-1")

    asyncio.run(_service(transport, session).restore())

    assert session.frame is None
    assert session.current_frame_id == "frame-1"


def test_logout_clears_session(transport, session: SessionContext) -> None:
    _service(transport, session).logout()

    assert session.state is AuthState.UNAUTHENTICATED
    assert session.current_frame_id is None
