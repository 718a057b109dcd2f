# routers/pages.py
from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from core.guard import require_login

router = APIRouter(tags=["pages"])

PAGE_TEMPLATE = "<!doctype html><html><head><title>DatingApp · {title}</title></head><body><app-root data-view=\"{view}\"></app-root></body></html>"


def render(view: str, title: str) -> HTMLResponse:
    return HTMLResponse(PAGE_TEMPLATE.format(view=view, title=title))


@router.get("/home", response_class=HTMLResponse, summary="Главная (публичная)")
async def home():
    return render("home", "Home")


@router.get("/members", response_class=HTMLResponse, dependencies=[Depends(require_login)])
async def member_list():
    return render("members", "Matches")


@router.get("/members/{user_id}", response_class=HTMLResponse, dependencies=[Depends(require_login)])
async def member_detail(user_id: int):
    return render(f"members/{user_id}", "Member")


@router.get("/member/edit", response_class=HTMLResponse, dependencies=[Depends(require_login)])
async def member_edit():
    return render("member/edit", "Edit profile")


@router.get("/messages", response_class=HTMLResponse, dependencies=[Depends(require_login)])
async def messages():
    return render("messages", "Messages")


@router.get("/lists", response_class=HTMLResponse, dependencies=[Depends(require_login)])
async def lists():
    return render("lists", "Lists")
