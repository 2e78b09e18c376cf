# lessons_api/main.py

import asyncio
from contextlib import asynccontextmanager, suppress

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import uvicorn
from dotenv import load_dotenv

from lessons_api.config import settings
from lessons_api.utils.log import Log
from lessons_api.utils.database import Store
from lessons_api.middleware.request_log import RequestLogMiddleware
from lessons_api.routes import system, lesson, order

# --- загрузка переменных окружения ---
load_dotenv()

# --- sync логгер для раннего старта ---
boot_log = Log()


async def connect_store(store: Store, log: Log):
    """
    Одна попытка подключения. Ошибка не роняет процесс:
    /health и / продолжают отвечать, маршруты с базой отдают 500.
    """
    try:
        await store.connect()
        await log.log_info(target="startup", message="Подключено к MongoDB", data={"db": store.db_name})
    except Exception as e:
        await log.log_error(target="startup", message=f"Ошибка подключения к MongoDB: {e}")


# ────────────── Lifespan ──────────────
@asynccontextmanager
async def lifespan(app: FastAPI):
    boot_log.log_info_sync(target="startup", message="lifespan: startup начат")

    if getattr(app.state, "log", None) is None:
        app.state.log = Log()
    store: Store = app.state.store

    # не ждём базу: сервер начинает слушать порт сразу
    connect_task = None
    if app.state.connect_on_startup and not store.ready:
        connect_task = asyncio.create_task(connect_store(store, app.state.log))

    yield

    # shutdown
    if connect_task is not None and not connect_task.done():
        connect_task.cancel()
        with suppress(asyncio.CancelledError):
            await connect_task
    await store.close()
    await app.state.log.log_info(target="shutdown", message="Остановка приложения")
    await app.state.log.shutdown()
    boot_log.log_info_sync(target="shutdown", message="Log корректно завершён")


# ────────────── Создаём FastAPI приложение ──────────────
def create_app(store: Store | None = None, log: Log | None = None, connect_on_startup: bool = True) -> FastAPI:
    app = FastAPI(title="Lessons API", lifespan=lifespan)

    app.state.store = store or Store()
    app.state.log = log
    app.state.connect_on_startup = connect_on_startup

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # лог каждого запроса
    app.add_middleware(RequestLogMiddleware)

    # ────────────── Подключение роутов ──────────────
    app.include_router(system.router, tags=["system"])
    app.include_router(lesson.router, prefix="/api", tags=["lessons"])
    app.include_router(order.router, prefix="/api", tags=["orders"])

    return app


app = create_app()


def run():
    boot_log.log_info_sync(target="startup", message="Запуск uvicorn.run", data={"port": settings.PORT})
    uvicorn.run(
        "lessons_api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level="info",
    )


# ────────────── Запуск uvicorn ──────────────
if __name__ == "__main__":
    run()
