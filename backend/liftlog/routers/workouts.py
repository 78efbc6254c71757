from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from liftlog.cache import DASHBOARD_PATH, ViewCache, get_view_cache, workout_path
from liftlog.db import get_db
from liftlog.deps.auth import CurrentUser, get_current_user
from liftlog.repositories.workout_repo import WorkoutRepository
from liftlog.schemas.common import Success
from liftlog.schemas.views import WorkoutDetailRead
from liftlog.schemas.workout import WorkoutCreate, WorkoutRef, WorkoutUpdate

router = APIRouter(prefix="/workouts", tags=["workouts"])

@router.post("", response_model=WorkoutRef, status_code=status.HTTP_201_CREATED)
def create_workout(
    payload: WorkoutCreate,
    db: Session = Depends(get_db),
    current: CurrentUser = Depends(get_current_user),
    cache: ViewCache = Depends(get_view_cache),
):
    workout = WorkoutRepository(db).create(
        current.id, day=payload.day, name=payload.name, notes=payload.notes
    )
    cache.invalidate(DASHBOARD_PATH)
    return WorkoutRef(workout_id=workout.id, date=payload.date)

@router.get("/{workout_id}", response_model=WorkoutDetailRead)
def get_workout(
    workout_id: int,
    db: Session = Depends(get_db),
    current: CurrentUser = Depends(get_current_user),
    cache: ViewCache = Depends(get_view_cache),
):
    path = workout_path(workout_id)
    view = cache.get(path, current.id)
    if view is None:
        detail = WorkoutRepository(db).get_detail(current.id, workout_id)
        if detail is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Workout not found")
        view = WorkoutDetailRead.model_validate(detail)
        cache.set(path, current.id, view)
    return view

@router.patch("/{workout_id}", response_model=WorkoutRef)
def update_workout(
    workout_id: int,
    payload: WorkoutUpdate,
    db: Session = Depends(get_db),
    current: CurrentUser = Depends(get_current_user),
    cache: ViewCache = Depends(get_view_cache),
):
    workout = WorkoutRepository(db).update(current.id, workout_id, **payload.changes())
    if workout is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Workout not found")
    cache.invalidate(DASHBOARD_PATH, workout_path(workout_id))
    return WorkoutRef(workout_id=workout.id, date=payload.date)

@router.delete("/{workout_id}", response_model=Success)
def delete_workout(
    workout_id: int,
    db: Session = Depends(get_db),
    current: CurrentUser = Depends(get_current_user),
    cache: ViewCache = Depends(get_view_cache),
):
    if not WorkoutRepository(db).delete(current.id, workout_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Workout not found")
    cache.invalidate(DASHBOARD_PATH, workout_path(workout_id))
    return Success()
