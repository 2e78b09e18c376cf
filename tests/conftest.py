"""Общие фикстуры: mongomock за асинхронной обёрткой и тестовый клиент."""

import os
import tempfile

# до импорта lessons_api: Settings читается один раз
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="lessons_api_log_"))
os.environ.setdefault("LOG_PRINT", "0")

import mongomock
import pytest
from fastapi.testclient import TestClient

from lessons_api.main import create_app
from lessons_api.utils.database import Store
from lessons_api.utils.log import Log


class AsyncCursor:
    def __init__(self, cursor):
        self._cursor = cursor

    async def to_list(self, length=None):
        documents = list(self._cursor)
        return documents if length is None else documents[:length]


class AsyncCollection:
    """Асинхронный фасад над коллекцией mongomock (тот же набор методов, что у pymongo async)."""

    def __init__(self, collection):
        self._collection = collection

    def find(self, *args, **kwargs):
        return AsyncCursor(self._collection.find(*args, **kwargs))

    async def insert_one(self, document):
        return self._collection.insert_one(document)

    async def update_one(self, filter, update):
        return self._collection.update_one(filter, update)


class AsyncDatabase:
    def __init__(self, db):
        self._db = db

    def __getitem__(self, name):
        return AsyncCollection(self._db[name])


LESSONS = [
    {
        "subject": "Math",
        "locations": [
            {"city": "Berlin", "spaces": 5},
            {"city": "London", "spaces": 8},
        ],
    },
    {
        "subject": "English",
        "locations": [
            {"city": "Paris", "spaces": 3},
        ],
    },
]


@pytest.fixture
def mongo_db():
    """Синхронная mongomock-база с уроками: через неё тесты проверяют состояние."""
    db = mongomock.MongoClient()["lessons_app"]
    db["lessons"].insert_many([dict(lesson, locations=[dict(loc) for loc in lesson["locations"]]) for lesson in LESSONS])
    return db


@pytest.fixture
def log(tmp_path):
    return Log(log_dir=str(tmp_path / "log"), log_print=False)


@pytest.fixture
def store(mongo_db):
    store = Store()
    store.attach(AsyncDatabase(mongo_db))
    return store


@pytest.fixture
def client(store, log):
    app = create_app(store=store, log=log, connect_on_startup=False)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def offline_client(log):
    """Приложение, у которого база так и не подключилась."""
    app = create_app(store=Store(), log=log, connect_on_startup=False)
    with TestClient(app) as client:
        yield client
