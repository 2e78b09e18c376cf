# lessons_api/schemas/system.py

from datetime import datetime

from pydantic import BaseModel

class HealthResponse(BaseModel):
    ok: bool = True
    status: str = "healthy"
    time: datetime

class RouteInfo(BaseModel):
    method: str
    path: str

class MessageResponse(BaseModel):
    message: str
