from src.service.cinema.domain.value_object.seat_grid import HALL_GRID, SeatGrid
from src.service.cinema.domain.value_object.showtime_key import ShowtimeKey


__all__ = ['HALL_GRID', 'SeatGrid', 'ShowtimeKey']
