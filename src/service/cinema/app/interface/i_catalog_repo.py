"""
Catalog Repository Interface

Persistence port of the catalog. Each save rewrites the whole collection.
"""

from abc import ABC, abstractmethod

from src.service.cinema.app.dto.catalog_snapshot import CatalogSnapshot
from src.service.cinema.domain.entity import Movie, Showtime, Ticket


class ICatalogRepo(ABC):
    @abstractmethod
    def load(self) -> CatalogSnapshot:
        """
        Load movies, showtimes and sold tickets.

        Raises:
            CatalogLoadError: a collection is missing or holds a malformed record
        """
        pass

    @abstractmethod
    def save_movies(self, *, movies: list[Movie]) -> None:
        pass

    @abstractmethod
    def save_showtimes(self, *, showtimes: list[Showtime]) -> None:
        pass

    @abstractmethod
    def save_sold_tickets(self, *, sold_tickets: list[Ticket]) -> None:
        pass
