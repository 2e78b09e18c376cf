# lessons_api/errors.py

# ────────────── Базовое исключение ──────────────
class LessonsApiError(Exception):
    """Общий предок всех ошибок приложения."""

    status_code: int = 500
    message: str = "Internal server error"

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


# ────────────── 400: данные клиента ──────────────
class ValidationError(LessonsApiError):
    """Данные запроса не прошли проверку формата. Всегда 400."""

    status_code = 400
    message = "Invalid request"


class InvalidNameError(ValidationError):
    message = "Invalid name format"


class InvalidPhoneError(ValidationError):
    message = "Invalid phone format"


class EmptyItemsError(ValidationError):
    message = "Order must contain items"


class InvalidTotalError(ValidationError):
    message = "Invalid total"


class MissingFieldsError(ValidationError):
    message = "subject, city, and spaces are required"


class InvalidSpacesError(ValidationError):
    message = "spaces must be a non-negative number"


class InvalidJsonError(ValidationError):
    message = "Invalid JSON body"


# ────────────── 404 ──────────────
class NotFoundError(LessonsApiError):
    status_code = 404
    message = "Not found"


# ────────────── 500 ──────────────
class StoreUnavailableError(LessonsApiError):
    """Соединение с базой ещё не установлено."""

    message = "Database not ready"


class UnexpectedError(LessonsApiError):
    """Любая другая ошибка; детали остаются в логе."""

    message = "Unexpected error"
