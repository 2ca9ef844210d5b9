"""
Ошибки предметной области. Сервисы бросают их, а обработчик в main.py
превращает в JSON-ответ {"detail": ...} с нужным HTTP-статусом.
"""


class FitTrackError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class Unauthenticated(FitTrackError):
    status_code = 401


class Forbidden(FitTrackError):
    status_code = 403


class NotFound(FitTrackError):
    status_code = 404


class ValidationError(FitTrackError):
    status_code = 400


class Conflict(FitTrackError):
    # Клиенты ожидают 400 и для дубликатов (email, членство)
    status_code = 400


class InternalError(FitTrackError):
    status_code = 500
