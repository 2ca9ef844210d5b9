"""
HTML-страницы (Jinja2). Данные читаются через те же сервисы, что и API;
действия на страницах выполняются fetch-запросами к /api с cookie сессии.
"""
from pathlib import Path

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import RedirectResponse
from fastapi.templating import Jinja2Templates
from sqlalchemy.orm import Session

from fittrack.api.auth import get_optional_user
from fittrack.core.db import get_db
from fittrack.core.errors import FitTrackError
from fittrack.models import ActivityType, User, UserRole
from fittrack.models.base import utcnow
from fittrack.services import activity_service, admin_service, group_service, leaderboard_service, user_service, weight_service
from fittrack.services.periods import MONTHLY, VIEW_TYPES, normalize_view_type, parse_date, period_window

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))

router = APIRouter(include_in_schema=False)


def _login_redirect():
    return RedirectResponse("/login", status_code=303)


def _render(request: Request, template: str, user: User | None, **context):
    context["current_user"] = user
    context["is_admin"] = user is not None and user.role == UserRole.ADMIN
    return templates.TemplateResponse(request, template, context)


@router.get("/")
def index(user: User | None = Depends(get_optional_user)):
    return RedirectResponse("/dashboard" if user else "/login", status_code=303)


@router.get("/login")
def login_page(request: Request, user: User | None = Depends(get_optional_user)):
    if user:
        return RedirectResponse("/dashboard", status_code=303)
    return _render(request, "login.html", None)


@router.get("/register")
def register_page(request: Request):
    return _render(request, "register.html", None)


@router.get("/dashboard")
def dashboard_page(
    request: Request,
    group_id: str | None = Query(None, alias="groupId"),
    date_param: str | None = Query(None, alias="date"),
    view_type: str = Query(MONTHLY, alias="viewType"),
    db: Session = Depends(get_db),
    user: User | None = Depends(get_optional_user),
):
    if user is None:
        return _login_redirect()

    view_type = normalize_view_type(view_type)
    groups = group_service.list_groups(db, user)
    selected = next((g for g in groups if g.id == group_id), groups[0] if groups else None)

    try:
        base = parse_date(date_param) if date_param else utcnow()
    except FitTrackError:
        base = utcnow()

    by_day, recent = {}, []
    if selected is not None:
        by_day, _, _ = activity_service.aggregate_group_activities(db, user, selected.id, base, view_type)
        recent = activity_service.list_group_recent_activities(db, selected.id)

    start, end = period_window(MONTHLY, utcnow())
    return _render(
        request, "dashboard.html", user,
        groups=groups,
        selected=selected,
        base_date=base.date().isoformat(),
        view_type=view_type,
        view_types=VIEW_TYPES,
        by_day=by_day,
        recent=recent,
        leaderboard=leaderboard_service.leaderboard(db, start, end),
        summary=activity_service.activity_summary(db, user, utcnow().date()),
    )


@router.get("/tracker")
def tracker_page(request: Request, db: Session = Depends(get_db), user: User | None = Depends(get_optional_user)):
    if user is None:
        return _login_redirect()
    return _render(
        request, "tracker.html", user,
        groups=group_service.list_groups(db, user),
        activities=activity_service.list_own_activities(db, user),
        activity_types=[t.value for t in ActivityType],
        today=utcnow().date().isoformat(),
    )


@router.get("/weight")
def weight_page(request: Request, db: Session = Depends(get_db), user: User | None = Depends(get_optional_user)):
    if user is None:
        return _login_redirect()
    return _render(
        request, "weight.html", user,
        weights=weight_service.list_weights(db, user),
        today=utcnow().date().isoformat(),
    )


@router.get("/profile")
def profile_page(request: Request, db: Session = Depends(get_db), user: User | None = Depends(get_optional_user)):
    if user is None:
        return _login_redirect()
    return _render(
        request, "profile.html", user,
        photo=user_service.current_photo(db, user.id),
        groups=group_service.list_groups(db, user, show_all=True),
    )


@router.get("/admin")
def admin_page(request: Request, db: Session = Depends(get_db), user: User | None = Depends(get_optional_user)):
    if user is None:
        return _login_redirect()
    # Роль проверяется до чтения админских данных
    if user.role != UserRole.ADMIN:
        return RedirectResponse("/dashboard", status_code=303)
    return _render(request, "admin.html", user, overview=admin_service.admin_overview(db))
