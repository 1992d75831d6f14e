import attrs

from src.service.cinema.domain.validators import FlatFieldValidators
from src.service.cinema.domain.value_object.showtime_key import ShowtimeKey


@attrs.define
class Showtime:
    # Not checked against the movies collection
    movie_id: int
    time: str = attrs.field(validator=FlatFieldValidators.validate_time_label)
    # Occupied seats in the order they were taken
    seats: list[str] = attrs.field(factory=list, validator=FlatFieldValidators.validate_seat_labels)

    @property
    def key(self) -> ShowtimeKey:
        return ShowtimeKey(movie_id=self.movie_id, time=self.time)

    def is_seat_taken(self, seat: str) -> bool:
        return seat in self.seats

    def occupy(self, seat: str) -> bool:
        """Add ``seat`` to the occupied seats. Returns False if it was already taken."""
        if self.is_seat_taken(seat):
            return False
        FlatFieldValidators.validate_flat_value(seat, 'Seat')
        self.seats.append(seat)
        return True

    def release(self, seat: str) -> bool:
        if not self.is_seat_taken(seat):
            return False
        self.seats.remove(seat)
        return True

    def copy(self) -> 'Showtime':
        return attrs.evolve(self, seats=list(self.seats))
