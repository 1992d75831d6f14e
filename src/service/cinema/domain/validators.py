"""Cinema domain validation utilities."""

from typing import Any, Final

from src.platform.exception.exceptions import DomainError


FIELD_DELIMITER: Final[str] = ','
FORBIDDEN_CHARACTERS: Final[tuple[str, ...]] = (FIELD_DELIMITER, '\n', '\r')


class FlatFieldValidators:
    """Values stored as a single unquoted field of a catalog file."""

    @staticmethod
    def validate_flat_value(value: str, field_name: str) -> None:
        if any(char in value for char in FORBIDDEN_CHARACTERS):
            raise DomainError(f'{field_name} cannot contain commas or line breaks: {value!r}')

    @staticmethod
    def validate_title(_instance: Any, _attribute: Any, value: str) -> None:
        FlatFieldValidators.validate_flat_value(value, 'Movie title')

    @staticmethod
    def validate_time_label(_instance: Any, _attribute: Any, value: str) -> None:
        FlatFieldValidators.validate_flat_value(value, 'Showtime time')

    @staticmethod
    def validate_seat_label(_instance: Any, _attribute: Any, value: str) -> None:
        FlatFieldValidators.validate_flat_value(value, 'Seat')

    @staticmethod
    def validate_seat_labels(_instance: Any, _attribute: Any, value: list[str]) -> None:
        for seat in value:
            FlatFieldValidators.validate_flat_value(seat, 'Seat')
