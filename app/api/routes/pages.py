"""Server-rendered pages."""

from typing import List, Optional

from fastapi import APIRouter, Query, Request
from pydantic import BaseModel

from infrastructure.rendering import render_html
from infrastructure.services import TemplateRendererDep

router = APIRouter(tags=["Pages"])


class User(BaseModel):
    first_name: str
    last_name: str


SAMPLE_USERS: List[User] = [
    User(first_name="Mark", last_name="Bates"),
    User(first_name="Chuck", last_name="Berry"),
]


@router.get("/")
def index(
    request: Request,
    renderer: TemplateRendererDep,
    variant: Optional[List[str]] = Query(default=None),
):
    """Greeting page; ``?variant=alt`` selects index_alt.html when present."""
    return render_html(request, renderer, "index.html", suffixes=variant)


@router.get("/plural")
def plural(request: Request, renderer: TemplateRendererDep):
    return render_html(request, renderer, "plural.html")


@router.get("/format")
def format_users(request: Request, renderer: TemplateRendererDep):
    return render_html(request, renderer, "format.html", {"users": SAMPLE_USERS})


@router.get("/localized")
def localized(request: Request, renderer: TemplateRendererDep):
    return render_html(request, renderer, "localized_view.html")


@router.get("/welcome")
def welcome(request: Request, renderer: TemplateRendererDep):
    """Full page using a layout partial and fingerprinted assets."""
    return render_html(request, renderer, "welcome.html", {"users": SAMPLE_USERS})
