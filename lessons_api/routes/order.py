# lessons_api/routes/order.py

from fastapi import APIRouter, Depends, Request, status

from lessons_api.routes.common import error_response, get_log, get_store, read_payload
from lessons_api.schemas.order import OrderResponse
from lessons_api.schemas.system import MessageResponse
from lessons_api.services.order import place_order_service
from lessons_api.services.validation import validate_order
from lessons_api.utils.database import Store
from lessons_api.utils.log import Log

router = APIRouter()

# ────────────── CREATE ──────────────
@router.post(
    "/order",
    response_model=OrderResponse,
    status_code=status.HTTP_200_OK,
    summary="Оформить заказ",
    response_description="Возвращает сохранённый заказ с createdAt",
    responses={
        400: {"model": MessageResponse, "description": "Неверное имя, телефон, состав или сумма"},
        500: {"model": MessageResponse, "description": "Внутренняя ошибка сервера"},
    },
)
async def create_order(
    request: Request,
    store: Store = Depends(get_store),
    log: Log = Depends(get_log),
):
    try:
        order = validate_order(await read_payload(request))
        saved = await place_order_service(order, store, log)
        return OrderResponse(message="Order saved successfully", order=saved)
    except Exception as e:
        return await error_response(log, "POST /api/order", e, "Failed to save order")
