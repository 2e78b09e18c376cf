# lessons_api/routes/system.py

from datetime import datetime, timezone
from typing import List

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from lessons_api.schemas.system import HealthResponse, RouteInfo

router = APIRouter()

# ────────────── Таблица маршрутов ──────────────
# Объявлена статически; тесты сверяют её с app.routes.
ROUTES: List[RouteInfo] = [
    RouteInfo(method="GET", path="/"),
    RouteInfo(method="GET", path="/health"),
    RouteInfo(method="GET", path="/__routes"),
    RouteInfo(method="GET", path="/api/lessons"),
    RouteInfo(method="POST", path="/api/order"),
    RouteInfo(method="PUT", path="/api/lessons"),
]


@router.get("/", response_class=PlainTextResponse, summary="Статус сервиса")
async def read_root():
    return "Lessons API is running. Try GET /health or /api/lessons"


@router.get("/health", response_model=HealthResponse, summary="Проверка живости")
async def health():
    # не трогает базу: отвечает, даже если MongoDB недоступна
    return HealthResponse(time=datetime.now(timezone.utc))


@router.get("/__routes", response_model=List[RouteInfo], summary="Список маршрутов")
async def list_routes():
    return ROUTES
