# routers/auth.py
from fastapi import APIRouter, Depends, HTTPException, status

from core.security import create_access_token, create_password_hash, verify_password
from models.user import User
from repositories.dating import DatingRepository, get_repository
from schemas.auth import TokenResponse
from schemas.user import UserForDetailedDto, UserForLoginDto, UserForRegisterDto
from utils.mapper import to_user_for_detailed, to_user_for_list

router = APIRouter(prefix="/api/auth", tags=["Auth"])


@router.post(
    "/register",
    response_model=UserForDetailedDto,
    status_code=status.HTTP_201_CREATED,
    summary="Регистрация нового пользователя"
)
async def register(
    user_for_register: UserForRegisterDto,
    repo: DatingRepository = Depends(get_repository),
) -> UserForDetailedDto:
    username = user_for_register.username.lower()
    if await repo.get_user_by_username(username) is not None:
        raise HTTPException(status_code=400, detail="Username already exists")

    password_hash, password_salt = create_password_hash(user_for_register.password)
    user = User(
        username=username,
        password_hash=password_hash,
        password_salt=password_salt,
        gender=user_for_register.gender,
        known_as=user_for_register.known_as,
        date_of_birth=user_for_register.date_of_birth,
        city=user_for_register.city,
        country=user_for_register.country,
        photos=[],
    )
    repo.add(user)
    if not await repo.save_all():
        raise HTTPException(status_code=400, detail="Could not register user")

    return to_user_for_detailed(user)


@router.post(
    "/login",
    response_model=TokenResponse,
    summary="Логин по username/паролю → выдаёт JWT"
)
async def login(
    user_for_login: UserForLoginDto,
    repo: DatingRepository = Depends(get_repository),
) -> TokenResponse:
    user = await repo.get_user_by_username(user_for_login.username)
    if user is None or not verify_password(user_for_login.password, user.password_hash, user.password_salt):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid username or password",
        )

    access_token = create_access_token(user.id, user.username)
    return TokenResponse(token=access_token, user=to_user_for_list(user))
