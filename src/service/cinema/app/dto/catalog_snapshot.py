import attrs

from src.service.cinema.domain.entity import Movie, Showtime, Ticket


@attrs.define
class CatalogSnapshot:
    """Everything the catalog files hold, in file order."""

    movies: list[Movie] = attrs.field(factory=list)
    showtimes: list[Showtime] = attrs.field(factory=list)
    sold_tickets: list[Ticket] = attrs.field(factory=list)
