import attrs

from src.service.cinema.domain.validators import FlatFieldValidators
from src.service.cinema.domain.value_object.showtime_key import ShowtimeKey


@attrs.define(frozen=True)
class Ticket:
    """A sold seat. Equal tickets are interchangeable, there is no ticket number."""

    showtime_key: ShowtimeKey
    seat: str = attrs.field(validator=FlatFieldValidators.validate_seat_label)
