from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from liftlog.cache import DASHBOARD_PATH, ViewCache, get_view_cache, workout_path
from liftlog.db import get_db
from liftlog.deps.auth import CurrentUser, get_current_user
from liftlog.errors import NotFoundError
from liftlog.repositories.workout_exercise_repo import WorkoutExerciseRepository
from liftlog.schemas.common import Success
from liftlog.schemas.workout_exercise import WorkoutExerciseCreate, WorkoutExerciseRef

router = APIRouter(prefix="/workouts", tags=["workout-exercises"])

@router.post("/{workout_id}/exercises", response_model=WorkoutExerciseRef, status_code=status.HTTP_201_CREATED)
def add_exercise(
    workout_id: int,
    payload: WorkoutExerciseCreate,
    db: Session = Depends(get_db),
    current: CurrentUser = Depends(get_current_user),
    cache: ViewCache = Depends(get_view_cache),
):
    try:
        we = WorkoutExerciseRepository(db).add(
            current.id, workout_id=workout_id, exercise_id=payload.exercise_id, order=payload.order
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    cache.invalidate(DASHBOARD_PATH, workout_path(workout_id))
    return WorkoutExerciseRef(workout_exercise_id=we.id)

@router.delete("/{workout_id}/exercises/{workout_exercise_id}", response_model=Success)
def remove_exercise(
    workout_id: int,
    workout_exercise_id: int,
    db: Session = Depends(get_db),
    current: CurrentUser = Depends(get_current_user),
    cache: ViewCache = Depends(get_view_cache),
):
    # The row must sit under this workout, so the detail view we refresh is the right one
    if not WorkoutExerciseRepository(db).remove(current.id, workout_exercise_id, workout_id=workout_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Workout exercise not found")
    cache.invalidate(DASHBOARD_PATH, workout_path(workout_id))
    return Success()
