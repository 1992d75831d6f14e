from enum import StrEnum
from pathlib import Path


class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(self, message: str, status_code: int) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class DomainError(CustomBaseError):
    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message, status_code)


class NotFoundError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 404)


class CatalogFileKind(StrEnum):
    MOVIES = 'movies'
    SHOWTIMES = 'showtimes'
    SOLD_TICKETS = 'sold_tickets'


class LoadFailureReason(StrEnum):
    MISSING = 'missing'
    MALFORMED = 'malformed'


class CatalogLoadError(CustomBaseError):
    """Persisted catalog data cannot be loaded. Raised at startup only."""

    def __init__(
        self,
        *,
        file_kind: CatalogFileKind,
        path: Path,
        reason: LoadFailureReason,
        line_no: int | None = None,
        detail: str = '',
    ) -> None:
        self.file_kind = file_kind
        self.path = path
        self.reason = reason
        self.line_no = line_no
        self.detail = detail
        location = f'{path}:{line_no}' if line_no is not None else str(path)
        message = f'{file_kind} file {reason}: {location}'
        if detail:
            message = f'{message} ({detail})'
        super().__init__(message, 500)
