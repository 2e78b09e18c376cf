# lessons_api/middleware/request_log.py

import time

class RequestLogMiddleware:
    """Одна строка в лог на каждый HTTP запрос: метод, путь, статус, время."""

    def __init__(self, app):
        self.app = app

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        started = time.perf_counter()
        status_code = 500

        async def send_wrapper(message):
            nonlocal status_code
            if message["type"] == "http.response.start":
                status_code = message["status"]
            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        finally:
            # state есть только после старта lifespan
            log = getattr(scope["app"].state, "log", None) if "app" in scope else None
            if log is not None:
                elapsed = (time.perf_counter() - started) * 1000
                await log.log_info(
                    target="http",
                    message=f"{scope['method']} {scope['path']} {status_code} {elapsed:.1f} ms",
                )
