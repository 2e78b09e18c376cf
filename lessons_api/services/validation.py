# lessons_api/services/validation.py

import math
import re

from lessons_api.errors import (
    EmptyItemsError,
    InvalidNameError,
    InvalidPhoneError,
    InvalidSpacesError,
    InvalidTotalError,
    MissingFieldsError,
)
from lessons_api.schemas.lesson import SpacesUpdate
from lessons_api.schemas.order import NewOrder

NAME_RE = re.compile(r"[A-Za-z ]+")
PHONE_RE = re.compile(r"[0-9]+")
NUMBER_RE = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")
INT64_MIN, INT64_MAX = -2**63, 2**63


def to_number(value) -> float | None:
    """
    Приводит значение к конечному числу.
    Принимает int/float (но не bool) и строки с десятичной записью.
    Возвращает None, если привести нельзя.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return None
    elif isinstance(value, str) and NUMBER_RE.fullmatch(value.strip()):
        number = float(value.strip())
    else:
        return None
    return number if math.isfinite(number) else None


def validate_order(payload: dict) -> NewOrder:
    """
    Проверяет тело POST /api/order.
    Порядок проверок: name, phone, items, total; первая ошибка выигрывает.
    """
    name = payload.get("name")
    if not isinstance(name, str) or not NAME_RE.fullmatch(name):
        raise InvalidNameError()

    phone = payload.get("phone")
    if not isinstance(phone, str) or not PHONE_RE.fullmatch(phone):
        raise InvalidPhoneError()

    items = payload.get("items")
    if not isinstance(items, list) or not items:
        raise EmptyItemsError()

    total = to_number(payload.get("total"))
    if total is None:
        raise InvalidTotalError()

    return NewOrder(name=name.strip(), phone=phone.strip(), items=items, total=total)


def validate_spaces_update(payload: dict) -> SpacesUpdate:
    """Проверяет тело PUT /api/lessons."""
    subject = payload.get("subject")
    city = payload.get("city")
    spaces = payload.get("spaces")

    if not isinstance(subject, str) or not subject or not isinstance(city, str) or not city or spaces is None:
        raise MissingFieldsError()

    number = to_number(spaces)
    if number is None or number < 0:
        raise InvalidSpacesError()

    # 3.0 -> 3: места хранятся целым числом, если влезают в int64 BSON
    if number.is_integer() and INT64_MIN <= number < INT64_MAX:
        return SpacesUpdate(subject=subject, city=city, spaces=int(number))
    return SpacesUpdate(subject=subject, city=city, spaces=number)
