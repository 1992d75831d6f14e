import attrs

from src.service.cinema.domain.validators import FlatFieldValidators


@attrs.define(frozen=True)
class Movie:
    """Replaced as a whole by edit_movie, never changed in place."""

    id: int
    title: str = attrs.field(validator=FlatFieldValidators.validate_title)
    duration: int  # minutes
