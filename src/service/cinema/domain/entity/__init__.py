from src.service.cinema.domain.entity.movie_entity import Movie
from src.service.cinema.domain.entity.showtime_entity import Showtime
from src.service.cinema.domain.entity.ticket_entity import Ticket


__all__ = ['Movie', 'Showtime', 'Ticket']
