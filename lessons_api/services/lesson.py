# lessons_api/services/lesson.py

from lessons_api.errors import NotFoundError
from lessons_api.schemas.lesson import SpacesUpdate
from lessons_api.utils.database import Store
from lessons_api.utils.log import Log


async def list_lessons_service(store: Store, log: Log) -> list[dict]:
    """
    Все уроки в естественном порядке коллекции: без сортировки,
    фильтра и пагинации.
    """
    lessons = await store.lessons.find().to_list(length=None)

    await log.log_info("lesson", f"{len(lessons)} уроков загружено")
    return lessons


async def update_spaces_service(update: SpacesUpdate, store: Store, log: Log) -> SpacesUpdate:
    """
    Перезаписывает spaces у города внутри урока.

    Одно условное обновление: урок ищется по subject и городу в locations,
    позиционный оператор $ меняет только найденный элемент. Предыдущее
    значение не проверяется, последняя запись выигрывает.
    """
    result = await store.lessons.update_one(
        {"subject": update.subject, "locations.city": update.city},
        {"$set": {"locations.$.spaces": update.spaces}},
    )

    if result.matched_count == 0:
        await log.log_warning("lesson", "Урок или город не найден", update)
        raise NotFoundError("Lesson or city not found")

    await log.log_info("lesson", "Места обновлены", update)
    return update
