"""Response shapes for the nested day and detail views."""
import datetime as dt
from pydantic import BaseModel

class DaySetRead(BaseModel):
    set_number: int
    weight: str | None = None
    reps: int | None = None

    model_config = {"from_attributes": True}

class DayExerciseRead(BaseModel):
    id: int
    name: str
    sets: list[DaySetRead]

    model_config = {"from_attributes": True}

class DayWorkoutRead(BaseModel):
    id: int
    name: str | None = None
    date: dt.date
    notes: str | None = None
    exercises: list[DayExerciseRead]

    model_config = {"from_attributes": True}

class DashboardRead(BaseModel):
    date: dt.date
    workouts: list[DayWorkoutRead]

class DetailSetRead(DaySetRead):
    id: int

class DetailExerciseRead(BaseModel):
    id: int
    exercise_id: int
    name: str
    order: int
    sets: list[DetailSetRead]

    model_config = {"from_attributes": True}

class WorkoutDetailRead(BaseModel):
    id: int
    name: str | None = None
    date: dt.date
    notes: str | None = None
    started_at: dt.datetime | None = None
    completed_at: dt.datetime | None = None
    exercises: list[DetailExerciseRead]

    model_config = {"from_attributes": True}
