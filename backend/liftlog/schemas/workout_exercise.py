from typing import Annotated
from pydantic import BaseModel, Field

# INTEGER columns are 32-bit signed
MAX_INT = 2**31 - 1

class WorkoutExerciseCreate(BaseModel):
    exercise_id: Annotated[int, Field(ge=1, le=MAX_INT)]
    order: Annotated[int, Field(ge=-MAX_INT - 1, le=MAX_INT)] = 0

class WorkoutExerciseRef(BaseModel):
    workout_exercise_id: int
