import datetime as dt
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session
from liftlog.cache import DASHBOARD_PATH, ViewCache, get_view_cache
from liftlog.db import get_db
from liftlog.deps.auth import CurrentUser, get_current_user
from liftlog.repositories.workout_repo import WorkoutRepository
from liftlog.schemas.common import DATE_PATTERN
from liftlog.schemas.views import DashboardRead, DayWorkoutRead

router = APIRouter(prefix="/dashboard", tags=["dashboard"])

@router.get("", response_model=DashboardRead)
def workouts_for_day(
    date: str | None = Query(None, pattern=DATE_PATTERN, description="YYYY-MM-DD, defaults to today"),
    db: Session = Depends(get_db),
    current: CurrentUser = Depends(get_current_user),
    cache: ViewCache = Depends(get_view_cache),
):
    try:
        day = dt.date.fromisoformat(date) if date else dt.date.today()
    except ValueError:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail="Invalid date format")
    key = (current.id, day.isoformat())

    view = cache.get(DASHBOARD_PATH, key)
    if view is None:
        workouts = WorkoutRepository(db).get_day(current.id, day)
        view = DashboardRead(
            date=day,
            workouts=[DayWorkoutRead.model_validate(w) for w in workouts],
        )
        cache.set(DASHBOARD_PATH, key, view)
    return view
