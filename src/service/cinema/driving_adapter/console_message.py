"""Cashier-facing console messages."""

from typing import Final

from src.platform.exception.exceptions import CatalogFileKind
from src.service.cinema.domain.enum.operation_status import OperationStatus


OPERATION_MESSAGES: Final[dict[OperationStatus, str]] = {
    OperationStatus.TICKET_SOLD: 'Билет продан.',
    OperationStatus.SEAT_TAKEN: 'Извините, выбранное место уже занято.',
    OperationStatus.TICKET_RETURNED: 'Билет возвращен.',
    OperationStatus.TICKET_NOT_FOUND: 'Указанный билет не найден.',
    OperationStatus.MOVIE_UPDATED: 'Данные о фильме обновлены.',
    OperationStatus.MOVIE_NOT_FOUND: 'Фильм с указанным ID не найден.',
    OperationStatus.SHOWTIME_UPDATED: 'Данные о сеансе обновлены.',
    OperationStatus.SHOWTIME_NOT_FOUND: 'Сеанс с указанным фильмом и временем не найден.',
    OperationStatus.SEATS_MARKED: 'Места отмечены как занятые.',
}

# Completes "файл с информацией о ..." / "файл ..."
FILE_DESCRIPTIONS: Final[dict[CatalogFileKind, str]] = {
    CatalogFileKind.MOVIES: 'с информацией о фильмах',
    CatalogFileKind.SHOWTIMES: 'с информацией о сеансах',
    CatalogFileKind.SOLD_TICKETS: 'с информацией о проданных билетах',
}

MALFORMED_FILE_MESSAGE: Final[str] = 'Некорректные входные данные в файле {description}{location}!'
MALFORMED_LOCATION: Final[str] = ' (строка {line_no})'
MISSING_FILE_MESSAGE: Final[str] = 'Добавьте файл {description} {file_name} в папку {directory}!'
AVAILABLE_SEATS_HEADER: Final[str] = 'Доступные места для сеанса {time}:'
NO_AVAILABLE_SEATS: Final[str] = 'Свободных мест нет.'
UNEXPECTED_FAILURE: Final[str] = 'Что-то произошло!'
