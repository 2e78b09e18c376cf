# lessons_api/utils/log.py
# Логирование событий

import os
import datetime
import logging

from aiologger import Logger
from aiologger.handlers.files import AsyncFileHandler

from lessons_api.config import settings


class Log:
    def __init__(self, log_dir: str | None = None, log_print: bool | None = None):
        self.log_dir = log_dir or settings.LOG_DIR
        os.makedirs(self.log_dir, exist_ok=True)
        self.log_print = settings.log_print if log_print is None else log_print
        self.handlers = {}

    def build_log_path(self, now: datetime.datetime) -> str:
        """
        Формируем путь к лог-файлу:
        lessons_api/log/2026/10/16.log
        """
        base_dir = os.path.join(self.log_dir, f"{now.year}", f"{now:%m}")
        os.makedirs(base_dir, exist_ok=True)
        return os.path.join(base_dir, f"{now:%d}.log")

    async def get_logger(self, target: str, now: datetime.datetime) -> Logger:
        """Асинхронный логгер для target; при смене дня открывается новый файл."""
        log_path = self.build_log_path(now)

        cached = self.handlers.get(target)
        if cached is None or cached["path"] != log_path:
            handler = AsyncFileHandler(filename=log_path, mode="a", encoding="utf-8")
            target_logger = Logger(name=f"lessons_api.{target}")
            target_logger.add_handler(handler)

            if cached is not None:
                await cached["logger"].shutdown()

            self.handlers[target] = {
                "path": log_path,
                "logger": target_logger,
            }

        return self.handlers[target]["logger"]

    def format_line(self, now: datetime.datetime, target: str, message: str, data: dict | None) -> str:
        line = f"{now:%d.%m.%Y %H:%M:%S} {target}: {message}"
        if data:
            line += f": {self.safe_serialize(data)}"
        return line

    def _echo(self, line: str, is_console: bool | None):
        should_print = self.log_print if is_console is None else is_console
        if should_print:
            print(line)

    # Асинхронное
    async def log_info(
        self,
        target: str = "",
        message: str = "",
        data: dict | None = None,
        is_console: bool = None,
    ):
        now = datetime.datetime.now()
        line = self.format_line(now, target, message, data)

        target_logger = await self.get_logger(target, now)
        await target_logger.info(line)

        self._echo(line, is_console)

    async def log_warning(self, target: str = "", message: str = "", data: dict | None = None, is_console: bool = None):
        await self.log_info(target, f"WARNING: {message}", data, is_console)

    async def log_error(
        self, target: str = "", message: str = "", data: dict | None = None, is_console: bool = True
    ):
        await self.log_info(target, f"ERROR: {message}", data, is_console)

    # Синхронное (до запуска event loop)
    def log_info_sync(
        self, target: str = "", message: str = "", data: dict | None = None, is_console: bool = None
    ):
        now = datetime.datetime.now()
        log_path = self.build_log_path(now)
        line = self.format_line(now, target, message, data)

        logger = logging.getLogger(f"lessons_api.sync.{target}")
        logger.setLevel(logging.INFO)
        logger.propagate = False

        # файл меняется раз в сутки
        handler = logger.handlers[0] if logger.handlers else None
        if handler is None or getattr(handler, "baseFilename", None) != os.path.abspath(log_path):
            if handler is not None:
                logger.removeHandler(handler)
                handler.close()
            handler = logging.FileHandler(log_path, mode="a", encoding="utf-8")
            handler.setFormatter(logging.Formatter("%(message)s"))
            logger.addHandler(handler)

        logger.info(line)
        self._echo(line, is_console)

    def log_warning_sync(self, target: str = "", message: str = "", data: dict | None = None, is_console: bool = None):
        self.log_info_sync(target, f"WARNING: {message}", data, is_console)

    def log_error_sync(
        self, target: str = "", message: str = "", data: dict | None = None, is_console: bool = True
    ):
        self.log_info_sync(target, f"ERROR: {message}", data, is_console)

    def safe_serialize(self, obj):
        """
        Преобразуем объект в сериализуемый вид для лога:
        - dict, list, tuple рекурсивно
        - Pydantic модели через model_dump
        - datetime в ISO-строку
        - любые несериализуемые объекты → строка с типом
        """
        if obj is None:
            return None
        elif isinstance(obj, (str, int, float, bool)):
            return obj
        elif isinstance(obj, (datetime.datetime, datetime.date)):
            return obj.isoformat()
        elif isinstance(obj, dict):
            return {k: self.safe_serialize(v) for k, v in obj.items()}
        elif isinstance(obj, (list, tuple, set)):
            return [self.safe_serialize(v) for v in obj]
        elif hasattr(obj, "model_dump"):  # Pydantic
            return self.safe_serialize(obj.model_dump())
        else:
            return f"<{type(obj).__name__}>"

    async def shutdown(self):
        for cached in list(self.handlers.values()):
            await cached["logger"].shutdown()
        self.handlers = {}
