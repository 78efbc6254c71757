import datetime as dt
from typing import Annotated
from pydantic import BaseModel, Field

from liftlog.schemas.common import DateStr

NameStr = Annotated[str, Field(max_length=255)]
NotesStr = Annotated[str, Field(max_length=1000)]

class WorkoutCreate(BaseModel):
    name: NameStr | None = None
    date: DateStr
    notes: NotesStr | None = None

    @property
    def day(self) -> dt.date:
        return dt.date.fromisoformat(self.date)

class WorkoutUpdate(BaseModel):
    # Omitted name/notes stay as they are; explicit null clears them
    name: NameStr | None = None
    date: DateStr
    notes: NotesStr | None = None

    @property
    def day(self) -> dt.date:
        return dt.date.fromisoformat(self.date)

    def changes(self) -> dict:
        fields = self.model_dump(exclude_unset=True, exclude={"date"})
        fields["date"] = self.day
        return fields

class WorkoutRef(BaseModel):
    workout_id: int
    date: str
