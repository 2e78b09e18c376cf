# lessons_api/schemas/order.py

from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, Field

# ────────────── Нормализованный заказ (после валидации) ──────────────
class NewOrder(BaseModel):
    name: str
    phone: str
    items: List[Any]
    total: float

# ────────────── Заказ в базе ──────────────
class Order(NewOrder):
    id: Optional[str] = Field(None, alias="_id")
    createdAt: datetime

    model_config = {
        "populate_by_name": True
    }

class OrderResponse(BaseModel):
    message: str
    order: Order
