from pydantic import BaseModel

class ExerciseRead(BaseModel):
    id: int
    name: str

    model_config = {"from_attributes": True}
