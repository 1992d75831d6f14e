"""
Flat file codec

One record per line, fields separated by commas, no header, no quoting:

    movies.csv        id,title,duration
    showTimes.csv     movieId,time[,seat...]
    sold_tickets.csv  movieId,time,seat
"""

import re
from typing import Final

from src.platform.exception.exceptions import DomainError
from src.service.cinema.domain.entity import Movie, Showtime, Ticket
from src.service.cinema.domain.validators import FIELD_DELIMITER, FlatFieldValidators
from src.service.cinema.domain.value_object import ShowtimeKey


MOVIE_FIELD_COUNT: Final[int] = 3
SHOWTIME_MIN_FIELD_COUNT: Final[int] = 2
TICKET_FIELD_COUNT: Final[int] = 3

# Plain decimal digits only, so a loaded number is written back unchanged
INTEGER_PATTERN: Final[re.Pattern[str]] = re.compile(r'-?\d+', re.ASCII)


def _split(line: str) -> list[str]:
    return line.split(FIELD_DELIMITER)


def _join(*fields: object) -> str:
    values = [str(field) for field in fields]
    for value in values:
        FlatFieldValidators.validate_flat_value(value, 'Field')
    return FIELD_DELIMITER.join(values)


def _parse_int(value: str, field_name: str) -> int:
    if not INTEGER_PATTERN.fullmatch(value):
        raise DomainError(f'{field_name} must be an integer, got {value!r}')
    return int(value)


def parse_movie(line: str) -> Movie:
    fields = _split(line)
    if len(fields) != MOVIE_FIELD_COUNT:
        raise DomainError(f'Expected {MOVIE_FIELD_COUNT} fields, got {len(fields)}')
    movie_id, title, duration = fields
    return Movie(
        id=_parse_int(movie_id, 'Movie id'),
        title=title,
        duration=_parse_int(duration, 'Duration'),
    )


def format_movie(movie: Movie) -> str:
    return _join(movie.id, movie.title, movie.duration)


def parse_showtime(line: str) -> Showtime:
    fields = _split(line)
    if len(fields) < SHOWTIME_MIN_FIELD_COUNT:
        raise DomainError(
            f'Expected at least {SHOWTIME_MIN_FIELD_COUNT} fields, got {len(fields)}'
        )
    movie_id, time, *seats = fields
    return Showtime(movie_id=_parse_int(movie_id, 'Movie id'), time=time, seats=seats)


def format_showtime(showtime: Showtime) -> str:
    return _join(showtime.movie_id, showtime.time, *showtime.seats)


def parse_ticket(line: str) -> Ticket:
    fields = _split(line)
    if len(fields) != TICKET_FIELD_COUNT:
        raise DomainError(f'Expected {TICKET_FIELD_COUNT} fields, got {len(fields)}')
    movie_id, time, seat = fields
    return Ticket(
        showtime_key=ShowtimeKey(movie_id=_parse_int(movie_id, 'Movie id'), time=time),
        seat=seat,
    )


def format_ticket(ticket: Ticket) -> str:
    return _join(ticket.showtime_key.movie_id, ticket.showtime_key.time, ticket.seat)
