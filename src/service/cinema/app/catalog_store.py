"""
Catalog Store - movies, showtimes and sold tickets of the cinema

Owns the three in-memory collections and keeps the catalog files in sync:
every operation that changes a collection rewrites that whole collection
through the repository before returning.
"""

from typing import Iterable, TypeVar

from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.cinema.app.dto import OperationResult
from src.service.cinema.app.interface import ICatalogRepo
from src.service.cinema.domain.entity import Movie, Showtime, Ticket
from src.service.cinema.domain.enum.operation_status import OperationStatus
from src.service.cinema.domain.validators import FlatFieldValidators
from src.service.cinema.domain.value_object import HALL_GRID, SeatGrid, ShowtimeKey


_K = TypeVar('_K')


def _index_first_positions(keys: Iterable[_K]) -> dict[_K, int]:
    """Map each key to the position of its first record, like a linear scan would find it."""
    index: dict[_K, int] = {}
    for position, key in enumerate(keys):
        index.setdefault(key, position)
    return index


class CatalogStore:
    """
    Catalog Store

    Flow of a mutation:
    1. Resolve the target record by its key (movie id or ShowtimeKey)
    2. Apply the change in memory
    3. Rewrite the affected file(s)
    4. Return an OperationResult describing the outcome

    Unknown records, taken seats and missing tickets are outcomes, not errors:
    the state is left unchanged and nothing is written.

    Not safe for concurrent use: exactly one process may own the data files.
    """

    def __init__(self, repo: ICatalogRepo, grid: SeatGrid = HALL_GRID) -> None:
        self.repo = repo
        self.grid = grid

        snapshot = repo.load()
        self._movies = snapshot.movies
        self._showtimes = snapshot.showtimes
        self._sold_tickets = snapshot.sold_tickets

        # Movies and showtimes are never inserted or removed, so positions stay valid
        self._movie_positions = _index_first_positions(movie.id for movie in self._movies)
        self._showtime_positions = _index_first_positions(st.key for st in self._showtimes)

        Logger.base.info(
            f'🎬 [CATALOG] Loaded {len(self._movies)} movies, {len(self._showtimes)} showtimes, '
            f'{len(self._sold_tickets)} sold tickets'
        )

    # ---------- read access ----------

    @property
    def movies(self) -> list[Movie]:
        return list(self._movies)

    @property
    def showtimes(self) -> list[Showtime]:
        return [showtime.copy() for showtime in self._showtimes]

    @property
    def sold_tickets(self) -> list[Ticket]:
        return list(self._sold_tickets)

    def get_movie(self, movie_id: int) -> Movie | None:
        position = self._movie_positions.get(movie_id)
        return None if position is None else self._movies[position]

    def get_showtime(self, key: ShowtimeKey) -> Showtime | None:
        showtime = self._find_showtime(key)
        return None if showtime is None else showtime.copy()

    def _find_showtime(self, key: ShowtimeKey) -> Showtime | None:
        position = self._showtime_positions.get(key)
        return None if position is None else self._showtimes[position]

    # ---------- tickets ----------

    @Logger.io
    def sell_ticket(self, *, showtime_key: ShowtimeKey, seat: str) -> OperationResult:
        showtime = self._find_showtime(showtime_key)
        if showtime is None:
            return OperationResult.of(OperationStatus.SHOWTIME_NOT_FOUND, showtime_key)

        if not showtime.occupy(seat):
            Logger.base.info(f'🚫 [SELL] Seat {seat} already taken for {showtime_key}')
            return OperationResult.of(OperationStatus.SEAT_TAKEN, seat)

        self._sold_tickets.append(Ticket(showtime_key=showtime_key, seat=seat))
        self.repo.save_showtimes(showtimes=self._showtimes)
        self.repo.save_sold_tickets(sold_tickets=self._sold_tickets)

        Logger.base.info(f'🎟️ [SELL] Sold {seat} for {showtime_key}')
        return OperationResult.of(OperationStatus.TICKET_SOLD, seat)

    @Logger.io
    def return_ticket(self, *, ticket: Ticket) -> OperationResult:
        if ticket not in self._sold_tickets:
            return OperationResult.of(OperationStatus.TICKET_NOT_FOUND, ticket.seat)

        self._sold_tickets.remove(ticket)
        showtime = self._find_showtime(ticket.showtime_key)
        if showtime is None or not showtime.release(ticket.seat):
            # Ticket bookkeeping and occupancy drifted apart; the ticket still goes
            Logger.base.warning(
                f'⚠️ [RETURN] Seat {ticket.seat} was not occupied for {ticket.showtime_key}'
            )

        self.repo.save_showtimes(showtimes=self._showtimes)
        self.repo.save_sold_tickets(sold_tickets=self._sold_tickets)

        Logger.base.info(f'↩️ [RETURN] Returned {ticket.seat} for {ticket.showtime_key}')
        return OperationResult.of(OperationStatus.TICKET_RETURNED, ticket.seat)

    # ---------- seats ----------

    @Logger.io
    def available_seats(self, *, showtime_key: ShowtimeKey) -> list[str]:
        """Grid seats not occupied for the showtime, row by row."""
        showtime = self._find_showtime(showtime_key)
        if showtime is None:
            raise NotFoundError(f'Showtime not found: {showtime_key}')
        return self.grid.available(showtime.seats)

    @Logger.io
    def mark_seats_taken(self, *, showtime_key: ShowtimeKey, seats: list[str]) -> OperationResult:
        """Occupy seats without selling tickets for them (blocked or externally sold seats)."""
        showtime = self._find_showtime(showtime_key)
        if showtime is None:
            return OperationResult.of(OperationStatus.SHOWTIME_NOT_FOUND, showtime_key)

        for seat in seats:
            FlatFieldValidators.validate_flat_value(seat, 'Seat')
        newly_taken = [seat for seat in seats if showtime.occupy(seat)]
        self.repo.save_showtimes(showtimes=self._showtimes)

        Logger.base.info(f'🔒 [MARK] Marked {newly_taken} as taken for {showtime_key}')
        return OperationResult.of(OperationStatus.SEATS_MARKED, ','.join(newly_taken))

    # ---------- edits ----------

    @Logger.io
    def edit_movie(self, *, movie: Movie) -> OperationResult:
        position = self._movie_positions.get(movie.id)
        if position is None:
            return OperationResult.of(OperationStatus.MOVIE_NOT_FOUND, movie.id)

        self._movies[position] = movie
        self.repo.save_movies(movies=self._movies)
        return OperationResult.of(OperationStatus.MOVIE_UPDATED, movie.id)

    @Logger.io
    def edit_showtime(self, *, showtime: Showtime) -> OperationResult:
        """Replace the showtime with the same movie and time, seats included."""
        position = self._showtime_positions.get(showtime.key)
        if position is None:
            return OperationResult.of(OperationStatus.SHOWTIME_NOT_FOUND, showtime.key)

        self._showtimes[position] = showtime.copy()
        self.repo.save_showtimes(showtimes=self._showtimes)
        return OperationResult.of(OperationStatus.SHOWTIME_UPDATED, showtime.key)
