import logging
from datetime import datetime

from fastapi import Depends, Request

from core.security import get_current_user_id
from repositories.dating import DatingRepository, get_repository

log = logging.getLogger(__name__)


async def log_user_activity(
    request: Request,
    user_id: int = Depends(get_current_user_id),
    repo: DatingRepository = Depends(get_repository),
) -> None:
    """Обновляет last_active вызывающего пользователя на каждом запросе."""
    user = await repo.get_user(user_id)
    if user is None:
        return
    user.last_active = datetime.utcnow()
    if not await repo.save_all():
        log.warning("Could not update last_active for user %s", user_id)
        return
    log.info("User %s %s %s", user_id, request.method, request.url.path)
