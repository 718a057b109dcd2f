import logging
import time

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, RedirectResponse
from starlette import status

from core.config import settings
from core.database import engine
from core.exceptions import NavigationDenied, UserUpdateError
from models.base import Base
from models import like, photo, user  # noqa: F401  регистрируем таблицы в Base.metadata

from routers.auth import router as auth_router
from routers.user import router as user_router
from routers.pages import router as pages_router
from routers.health import router as health_router

app = FastAPI(
    title="DatingApp API",
    version="0.1.0",
    description="Backend сайта знакомств: пользователи, профили, лайки"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["Pagination"],
)

logger = logging.getLogger("uvicorn.error")


@app.middleware("http")
async def log_request_time(request: Request, call_next):
    start_time = time.perf_counter()
    response = await call_next(request)
    process_time = (time.perf_counter() - start_time) * 1000
    logger.info(
        f"{request.method} {request.url.path} completed in {process_time:.2f} ms"
    )
    return response


@app.exception_handler(UserUpdateError)
async def user_update_error_handler(request: Request, exc: UserUpdateError):
    logger.error(exc.detail)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": exc.detail},
    )


@app.exception_handler(NavigationDenied)
async def navigation_denied_handler(request: Request, exc: NavigationDenied):
    response = RedirectResponse(exc.location, status_code=status.HTTP_303_SEE_OTHER)
    response.set_cookie(settings.ALERT_COOKIE_NAME, " ".join(exc.messages), max_age=60)
    return response


app.include_router(auth_router)
app.include_router(user_router)
app.include_router(pages_router)
app.include_router(health_router)


@app.on_event("startup")
async def on_startup():
    # Создаём все таблицы
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


@app.get("/")
async def root():
    return {"message": "DatingApp API"}


@app.on_event("shutdown")
async def shutdown():
    # Закрываем все соединения пула
    await engine.dispose()
