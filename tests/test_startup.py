"""Старт приложения: сервер отвечает раньше, чем подключилась база."""

import asyncio
from pathlib import Path
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from lessons_api.errors import StoreUnavailableError
from lessons_api.main import connect_store, create_app
from lessons_api.utils.database import Store


def read_log(log):
    return "\n".join(p.read_text(encoding="utf-8") for p in sorted(Path(log.log_dir).rglob("*.log")))


@pytest.mark.asyncio
async def test_connect_failure_is_logged_not_raised(log):
    store = Store()
    store.connect = AsyncMock(side_effect=ConnectionError("no route to host"))

    await connect_store(store, log)

    assert not store.ready
    assert "ERROR: Ошибка подключения к MongoDB: no route to host" in read_log(log)


@pytest.mark.asyncio
async def test_connect_success_is_logged(log):
    store = Store(db_name="lessons_test")
    store.connect = AsyncMock()

    await connect_store(store, log)

    store.connect.assert_awaited_once()
    assert "Подключено к MongoDB" in read_log(log)


def test_health_answers_while_connect_is_pending(log):
    store = Store()
    release = asyncio.Event()

    async def slow_connect():
        await release.wait()

    store.connect = slow_connect
    app = create_app(store=store, log=log)

    with TestClient(app) as client:
        assert client.get("/health").status_code == 200
        assert client.get("/api/lessons").status_code == 500


def test_failed_connect_keeps_serving(log):
    store = Store()
    store.connect = AsyncMock(side_effect=ConnectionError("refused"))
    app = create_app(store=store, log=log)

    with TestClient(app) as client:
        assert client.get("/").status_code == 200
        assert client.get("/health").json()["ok"] is True
        assert client.put("/api/lessons", json={"subject": "Math", "city": "Berlin", "spaces": 1}).status_code == 500


def test_store_collection_requires_ready():
    store = Store()

    assert not store.ready
    with pytest.raises(StoreUnavailableError):
        store.collection("lessons")


@pytest.mark.asyncio
async def test_store_close_resets_ready(mongo_db):
    store = Store()
    store.attach(mongo_db)
    assert store.ready
    assert store.lessons.count_documents({}) == 2

    await store.close()

    assert not store.ready
