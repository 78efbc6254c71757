from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from liftlog.db import get_db
from liftlog.deps.auth import CurrentUser, get_current_user
from liftlog.repositories.exercise_repo import ExerciseRepository
from liftlog.schemas.exercise import ExerciseRead

router = APIRouter(prefix="/exercises", tags=["exercises"])

@router.get("", response_model=list[ExerciseRead])
def list_exercises(db: Session = Depends(get_db), _current: CurrentUser = Depends(get_current_user)):
    # Catalog is global: authenticated, but not filtered by owner
    return ExerciseRepository(db).list_all()
