# lessons_api/routes/lesson.py

from typing import List

from bson import ObjectId
from fastapi import APIRouter, Depends, Request, status
from fastapi.encoders import jsonable_encoder

from lessons_api.routes.common import error_response, get_log, get_store, read_payload
from lessons_api.schemas.lesson import Lesson, SpacesUpdateResponse
from lessons_api.schemas.system import MessageResponse
from lessons_api.services.lesson import list_lessons_service, update_spaces_service
from lessons_api.services.validation import validate_spaces_update
from lessons_api.utils.database import Store
from lessons_api.utils.log import Log

router = APIRouter()

# ────────────── READ ALL ──────────────
@router.get(
    "/lessons",
    status_code=status.HTTP_200_OK,
    summary="Получить список уроков",
    response_description="Возвращает все уроки в порядке хранения",
    responses={
        200: {"model": List[Lesson], "description": "Список уроков получен"},
        500: {"model": MessageResponse, "description": "База не готова или ошибка чтения"},
    },
)
async def read_lessons(
    store: Store = Depends(get_store),
    log: Log = Depends(get_log),
):
    try:
        lessons = await list_lessons_service(store, log)
        return jsonable_encoder(lessons, custom_encoder={ObjectId: str})
    except Exception as e:
        return await error_response(log, "GET /api/lessons", e, "Failed to load lessons")


# ────────────── UPDATE SPACES ──────────────
@router.put(
    "/lessons",
    response_model=SpacesUpdateResponse,
    status_code=status.HTTP_200_OK,
    summary="Обновить число мест",
    response_description="Новое значение spaces для города урока",
    responses={
        400: {"model": MessageResponse, "description": "Не хватает полей или spaces некорректно"},
        404: {"model": MessageResponse, "description": "Урок или город не найден"},
        500: {"model": MessageResponse, "description": "Внутренняя ошибка сервера"},
    },
)
async def update_spaces(
    request: Request,
    store: Store = Depends(get_store),
    log: Log = Depends(get_log),
):
    try:
        update = validate_spaces_update(await read_payload(request))
        updated = await update_spaces_service(update, store, log)
        return SpacesUpdateResponse(**updated.model_dump())
    except Exception as e:
        return await error_response(log, "PUT /api/lessons", e, "Failed to update spaces")
