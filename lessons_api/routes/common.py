# lessons_api/routes/common.py

from fastapi import Request
from fastapi.responses import JSONResponse

from lessons_api.errors import InvalidJsonError, LessonsApiError, NotFoundError, UnexpectedError, ValidationError
from lessons_api.utils.database import Store
from lessons_api.utils.log import Log


# ────────────── Зависимости ──────────────
def get_store(request: Request) -> Store:
    return request.app.state.store


def get_log(request: Request) -> Log:
    return request.app.state.log


async def read_payload(request: Request) -> dict:
    """JSON-тело запроса. Пустое тело или не-объект дают пустой словарь."""
    if not await request.body():
        return {}
    try:
        payload = await request.json()
    except (ValueError, RecursionError):
        # RecursionError: слишком глубокая вложенность
        raise InvalidJsonError()
    return payload if isinstance(payload, dict) else {}


# ────────────── Ошибка → HTTP ответ ──────────────
async def error_response(log: Log, label: str, exc: Exception, message: str) -> JSONResponse:
    """
    Переводит исключение в ответ.
    ValidationError → 400 и NotFoundError → 404 со своим текстом,
    всё остальное → 500 с общим текстом message; детали только в лог.
    """
    if isinstance(exc, ValidationError):
        await log.log_warning(label, exc.message)
        return JSONResponse(status_code=exc.status_code, content={"message": exc.message})

    if isinstance(exc, NotFoundError):
        return JSONResponse(status_code=exc.status_code, content={"message": exc.message})

    error = exc if isinstance(exc, LessonsApiError) else UnexpectedError(str(exc))
    await log.log_error(label, error.message, {"error": type(exc).__name__})
    return JSONResponse(status_code=error.status_code, content={"message": message})
