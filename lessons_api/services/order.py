# lessons_api/services/order.py

from datetime import datetime, timezone

from lessons_api.schemas.order import NewOrder, Order
from lessons_api.utils.database import Store
from lessons_api.utils.log import Log


async def place_order_service(order: NewOrder, store: Store, log: Log) -> Order:
    """
    Сохранение нового заказа.
    createdAt проставляет сервер; дубликаты не отсекаются.
    """
    orders = store.orders

    document = order.model_dump()
    document["createdAt"] = datetime.now(timezone.utc)
    result = await orders.insert_one(document)

    document["_id"] = str(result.inserted_id)
    await log.log_info("order", "Заказ создан", {"id": document["_id"], "total": order.total})
    return Order.model_validate(document)
