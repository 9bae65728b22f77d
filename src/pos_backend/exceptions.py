from typing import Any


class PosError(Exception):
    """
    Базовая ошибка ядра.
    Роуты превращают её в JSON-ответ с нужным статусом.
    """

    status_code = 500

    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.message = message
        self.details = details


class OrderValidationError(PosError):
    """Некорректный заказ. До БД дело не доходит."""

    status_code = 400


class CatalogValidationError(PosError):
    status_code = 400


class NotFoundError(PosError):
    """Проект (или его каталог) не найден."""

    status_code = 404


class QueryError(PosError):
    """Ошибка чтения из БД."""


class TransactionError(PosError):
    """
    Ошибка в транзакции заказа. Транзакция уже откачена.
    details хранит диагностику БД, наружу отдаётся только в DEBUG.
    """
