import sys
from typing import TextIO

from src.platform.exception.exceptions import CatalogLoadError, LoadFailureReason
from src.service.cinema.app.dto import OperationResult
from src.service.cinema.driving_adapter.console_message import (
    AVAILABLE_SEATS_HEADER,
    FILE_DESCRIPTIONS,
    MALFORMED_FILE_MESSAGE,
    MALFORMED_LOCATION,
    MISSING_FILE_MESSAGE,
    NO_AVAILABLE_SEATS,
    OPERATION_MESSAGES,
    UNEXPECTED_FAILURE,
)


class ConsolePresenter:
    """Prints operation outcomes and seat listings for the cashier."""

    def __init__(self, out: TextIO | None = None) -> None:
        self._out = out

    def _print(self, text: str) -> None:
        # Resolved per call so redirected stdout is honoured
        print(text, file=self._out or sys.stdout)

    def report(self, result: OperationResult) -> None:
        self._print(OPERATION_MESSAGES[result.status])

    def display_available_seats(self, *, time: str, seats: list[str]) -> None:
        self._print(AVAILABLE_SEATS_HEADER.format(time=time))
        if not seats:
            self._print(NO_AVAILABLE_SEATS)
        for seat in seats:
            self._print(seat)

    def report_load_error(self, error: CatalogLoadError) -> None:
        description = FILE_DESCRIPTIONS[error.file_kind]
        if error.reason == LoadFailureReason.MISSING:
            self._print(
                MISSING_FILE_MESSAGE.format(
                    description=description,
                    file_name=error.path.name,
                    directory=error.path.parent.resolve(),
                )
            )
            return

        location = (
            MALFORMED_LOCATION.format(line_no=error.line_no) if error.line_no is not None else ''
        )
        self._print(MALFORMED_FILE_MESSAGE.format(description=description, location=location))

    def report_unexpected_failure(self) -> None:
        self._print(UNEXPECTED_FAILURE)
