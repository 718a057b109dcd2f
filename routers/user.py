from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Path, Query, Response, status

from core.activity import log_user_activity
from core.exceptions import UserUpdateError
from core.security import get_current_user_id
from models.like import Like
from repositories.dating import DatingRepository, LikeResult, get_repository
from schemas.pagination import UserParams
from schemas.user import UserForDetailedDto, UserForListDto, UserForUpdateDto
from utils.mapper import apply_user_update, to_user_for_detailed, to_users_for_list
from utils.pagination import add_pagination

router = APIRouter(
    prefix="/api/user",
    tags=["users"],
    dependencies=[Depends(log_user_activity)],
)


def user_params_query(
    page_number: int = Query(1, alias="pageNumber", ge=1),
    page_size: int = Query(10, alias="pageSize", ge=1),
    gender: Optional[str] = Query(None),
    min_age: int = Query(18, alias="minAge", ge=0),
    max_age: int = Query(99, alias="maxAge", ge=0),
    order_by: Optional[str] = Query(None, alias="orderBy"),
    likers: bool = Query(False),
    likees: bool = Query(False),
) -> UserParams:
    return UserParams(
        page_number=page_number,
        page_size=page_size,
        gender=gender,
        min_age=min_age,
        max_age=max_age,
        order_by=order_by,
        likers=likers,
        likees=likees,
    )


async def require_own_user_id(
    user_id: int = Path(..., description="ID пользователя из маршрута"),
    current_user_id: int = Depends(get_current_user_id),
) -> int:
    """id из маршрута должен совпадать с id из токена; проверяется до разбора тела."""
    if user_id != current_user_id:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")
    return user_id


def opposite_gender(gender: Optional[str]) -> str:
    return "female" if gender == "male" else "male"


@router.get(
    "",
    response_model=List[UserForListDto],
    summary="Список пользователей с пагинацией"
)
async def get_users(
    response: Response,
    user_params: UserParams = Depends(user_params_query),
    current_user_id: int = Depends(get_current_user_id),
    repo: DatingRepository = Depends(get_repository),
) -> List[UserForListDto]:
    # id берём только из токена
    user_params.user_id = current_user_id

    user_from_repo = await repo.get_user(current_user_id)

    if not user_params.gender:
        user_params.gender = opposite_gender(user_from_repo.gender if user_from_repo else None)

    users = await repo.get_users(user_params)

    users_to_return = to_users_for_list(users)
    add_pagination(response, users.current_page, users.page_size, users.total_count, users.total_pages)
    return users_to_return


@router.get(
    "/{user_id}",
    response_model=UserForDetailedDto,
    name="GetUser",
    summary="Получить профиль пользователя по id"
)
async def get_user(
    user_id: int = Path(..., description="ID пользователя"),
    repo: DatingRepository = Depends(get_repository),
) -> UserForDetailedDto:
    user = await repo.get_user(user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return to_user_for_detailed(user)


@router.put(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Обновить свой профиль"
)
async def update_user(
    user_for_update: UserForUpdateDto,
    user_id: int = Depends(require_own_user_id),
    repo: DatingRepository = Depends(get_repository),
):
    user_from_repo = await repo.get_user(user_id)
    if user_from_repo is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    apply_user_update(user_for_update, user_from_repo)

    if await repo.save_all():
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    raise UserUpdateError(user_id)


@router.post(
    "/{user_id}/like/{recipient_id}",
    status_code=status.HTTP_200_OK,
    summary="Поставить лайк пользователю"
)
async def like_user(
    recipient_id: int = Path(..., description="ID того, кого лайкают"),
    user_id: int = Depends(require_own_user_id),
    repo: DatingRepository = Depends(get_repository),
):
    # 1) Лайк уже есть
    like: Optional[Like] = await repo.get_like(user_id, recipient_id)
    if like is not None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="You already liked the user")

    # 2) Пользователь, которого лайкают, существует
    if await repo.get_user(recipient_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")

    # 3) Вставка; дубль из параллельного запроса ловит ключ в БД
    result = await repo.add_like(user_id, recipient_id)
    if result is LikeResult.CREATED:
        return Response(status_code=status.HTTP_200_OK)
    if result is LikeResult.DUPLICATE:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="You already liked the user")

    raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Failed to like user")
