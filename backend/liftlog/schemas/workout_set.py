from decimal import Decimal
from typing import Annotated
from pydantic import AfterValidator, BaseModel, Field

from liftlog.schemas.workout_exercise import MAX_INT

PosInt = Annotated[int, Field(ge=1, le=MAX_INT)]
NonNegInt = Annotated[int, Field(ge=0, le=MAX_INT)]

def _fits_numeric_6_2(v: str) -> str:
    if Decimal(v) >= Decimal("10000"):
        raise ValueError("weight must be below 10000")
    return v

# Decimal string with at most two fractional digits, e.g. "135" or "135.50"
WeightStr = Annotated[str, Field(pattern=r"^\d+(\.\d{1,2})?$"), AfterValidator(_fits_numeric_6_2)]

class SetCreate(BaseModel):
    set_number: PosInt
    weight: WeightStr | None = None
    reps: NonNegInt | None = None

class SetUpdate(BaseModel):
    weight: WeightStr | None = None
    reps: NonNegInt | None = None

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)

class SetRef(BaseModel):
    set_id: int
