"""Showtime identity value object."""

import attrs

from src.service.cinema.domain.validators import FlatFieldValidators


@attrs.define(frozen=True)
class ShowtimeKey:
    """
    Stable identifier of a showtime (Value Object).

    A cinema screens a movie at most once per time label, so the
    (movie_id, time) pair names a showtime. Tickets reference showtimes
    through this key instead of holding a copy of the showtime.
    """

    movie_id: int
    time: str = attrs.field(validator=FlatFieldValidators.validate_time_label)

    def __str__(self) -> str:
        return f'{self.movie_id}@{self.time}'
