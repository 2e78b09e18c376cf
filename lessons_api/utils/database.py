# lessons_api/utils/database.py

from pymongo import AsyncMongoClient

from lessons_api.config import settings
from lessons_api.errors import StoreUnavailableError

LESSONS = "lessons"
ORDERS = "orders"


class Store:
    """
    Доступ к MongoDB: одна ручка на процесс.

    Пока соединение не установлено, ready == False и любая попытка
    взять коллекцию поднимает StoreUnavailableError.
    """

    def __init__(self, uri: str | None = None, db_name: str | None = None, timeout_ms: int | None = None):
        self.uri = uri or settings.MONGO_URI
        self.db_name = db_name or settings.DB_NAME
        self.timeout_ms = timeout_ms or settings.MONGO_TIMEOUT_MS
        self.client = None
        self.db = None

    @property
    def ready(self) -> bool:
        return self.db is not None

    # ────────────── Подключение ──────────────
    async def connect(self):
        """Открывает клиент, проверяет связь ping-ом и привязывает базу."""
        client = AsyncMongoClient(self.uri, serverSelectionTimeoutMS=self.timeout_ms)
        try:
            await client.admin.command("ping")
        except Exception:
            await client.close()
            raise
        self.client = client
        self.attach(client[self.db_name])

    def attach(self, db):
        """Привязывает уже открытую базу (в тестах: mongomock)."""
        self.db = db

    async def close(self):
        if self.client is not None:
            await self.client.close()
        self.client = None
        self.db = None

    # ────────────── Коллекции ──────────────
    def collection(self, name: str):
        if not self.ready:
            raise StoreUnavailableError()
        return self.db[name]

    @property
    def lessons(self):
        return self.collection(LESSONS)

    @property
    def orders(self):
        return self.collection(ORDERS)
