from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from liftlog.cache import DASHBOARD_PATH, ViewCache, get_view_cache, workout_path
from liftlog.db import get_db
from liftlog.deps.auth import CurrentUser, get_current_user
from liftlog.errors import NotFoundError
from liftlog.repositories.set_repo import SetRepository
from liftlog.schemas.common import Success
from liftlog.schemas.workout_set import SetCreate, SetRef, SetUpdate

router = APIRouter(prefix="/workouts", tags=["sets"])

@router.post(
    "/{workout_id}/exercises/{workout_exercise_id}/sets",
    response_model=SetRef,
    status_code=status.HTTP_201_CREATED,
)
def add_set(
    workout_id: int,
    workout_exercise_id: int,
    payload: SetCreate,
    db: Session = Depends(get_db),
    current: CurrentUser = Depends(get_current_user),
    cache: ViewCache = Depends(get_view_cache),
):
    try:
        new_set = SetRepository(db).create(
            current.id,
            workout_exercise_id=workout_exercise_id,
            set_number=payload.set_number,
            weight=payload.weight,
            reps=payload.reps,
            workout_id=workout_id,
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    cache.invalidate(DASHBOARD_PATH, workout_path(workout_id))
    return SetRef(set_id=new_set.id)

@router.patch("/{workout_id}/sets/{set_id}", response_model=Success)
def update_set(
    workout_id: int,
    set_id: int,
    payload: SetUpdate,
    db: Session = Depends(get_db),
    current: CurrentUser = Depends(get_current_user),
    cache: ViewCache = Depends(get_view_cache),
):
    if SetRepository(db).update(current.id, set_id, workout_id=workout_id, **payload.changes()) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Set not found")
    cache.invalidate(DASHBOARD_PATH, workout_path(workout_id))
    return Success()

@router.delete("/{workout_id}/sets/{set_id}", response_model=Success)
def delete_set(
    workout_id: int,
    set_id: int,
    db: Session = Depends(get_db),
    current: CurrentUser = Depends(get_current_user),
    cache: ViewCache = Depends(get_view_cache),
):
    if not SetRepository(db).delete(current.id, set_id, workout_id=workout_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Set not found")
    cache.invalidate(DASHBOARD_PATH, workout_path(workout_id))
    return Success()
