"""
Guard для защищённых страниц.

AuthGuard решает синхронно: пускает, если сессия активна, иначе
показывает ошибку и уводит на /home.
"""
import logging
from typing import List, Optional, Protocol, Sequence

from fastapi import Request

from core.exceptions import NavigationDenied
from core.security import decode_user_id

log = logging.getLogger(__name__)

DENIED_MESSAGE = "You shall not pass !!!"
HOME_ROUTE = "/home"


class SessionState(Protocol):
    def logged_in(self) -> bool:
        ...


class Navigator(Protocol):
    def navigate(self, commands: Sequence[str]) -> None:
        ...


class AlertService(Protocol):
    def error(self, message: str) -> None:
        ...


class AuthGuard:
    def __init__(self, auth_service: SessionState, router: Navigator, alertify: AlertService):
        self.auth_service = auth_service
        self.router = router
        self.alertify = alertify

    def can_activate(self) -> bool:
        if self.auth_service.logged_in():
            return True
        # не залогинен: на главную
        self.alertify.error(DENIED_MESSAGE)
        self.router.navigate([HOME_ROUTE])
        return False


class TokenSessionState:
    """Сессия активна, пока токен валиден и не просрочен."""

    def __init__(self, token: Optional[str]):
        self.token = token

    @classmethod
    def from_request(cls, request: Request) -> "TokenSessionState":
        authorization = request.headers.get("Authorization", "")
        scheme, _, token = authorization.partition(" ")
        if scheme.lower() == "bearer" and token:
            return cls(token)
        return cls(request.cookies.get("token"))

    def logged_in(self) -> bool:
        if not self.token:
            return False
        return decode_user_id(self.token) is not None


class RedirectNavigator:
    def __init__(self):
        self.location: Optional[str] = None

    def navigate(self, commands: Sequence[str]) -> None:
        self.location = "/" + "/".join(part.strip("/") for part in commands)


class FlashAlertService:
    def __init__(self):
        self.messages: List[str] = []

    def error(self, message: str) -> None:
        log.warning("Alert: %s", message)
        self.messages.append(message)


async def require_login(request: Request) -> None:
    """Dependency для защищённых страниц."""
    navigator = RedirectNavigator()
    alerts = FlashAlertService()
    guard = AuthGuard(TokenSessionState.from_request(request), navigator, alerts)
    if not guard.can_activate():
        log.info("Guard denied %s", request.url.path)
        raise NavigationDenied(navigator.location or HOME_ROUTE, alerts.messages)

