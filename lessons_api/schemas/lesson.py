# lessons_api/schemas/lesson.py

from typing import List, Optional, Union

from pydantic import BaseModel, Field

class Location(BaseModel):
    city: str
    spaces: Union[int, float]

class Lesson(BaseModel):
    """
    Схема урока для документации. Документы отдаются как есть,
    поэтому лишние поля разрешены.
    """
    id: Optional[str] = Field(None, alias="_id")
    subject: str
    locations: List[Location] = []

    model_config = {
        "extra": "allow",
        "populate_by_name": True
    }

# ────────────── Изменение мест ──────────────
class SpacesUpdate(BaseModel):
    subject: str
    city: str
    spaces: Union[int, float]

class SpacesUpdateResponse(SpacesUpdate):
    ok: bool = True
