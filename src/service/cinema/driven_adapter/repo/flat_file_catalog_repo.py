"""
Flat File Catalog Repository

Keeps the catalog in three comma-delimited text files. Saves rewrite the
whole file; there is no locking, so only one process may use the files.
"""

from pathlib import Path
from typing import Callable, Iterable, TypeVar

from src.platform.config.core_setting import Settings
from src.platform.exception.exceptions import (
    CatalogFileKind,
    CatalogLoadError,
    DomainError,
    LoadFailureReason,
)
from src.platform.logging.loguru_io import Logger
from src.service.cinema.app.dto import CatalogSnapshot
from src.service.cinema.app.interface import ICatalogRepo
from src.service.cinema.domain.entity import Movie, Showtime, Ticket
from src.service.cinema.driven_adapter.repo.flat_file_codec import (
    format_movie,
    format_showtime,
    format_ticket,
    parse_movie,
    parse_showtime,
    parse_ticket,
)


_R = TypeVar('_R')


class FlatFileCatalogRepo(ICatalogRepo):
    def __init__(
        self,
        *,
        movies_path: Path,
        showtimes_path: Path,
        sold_tickets_path: Path,
        encoding: str = 'utf-8',
    ) -> None:
        self.paths = {
            CatalogFileKind.MOVIES: movies_path,
            CatalogFileKind.SHOWTIMES: showtimes_path,
            CatalogFileKind.SOLD_TICKETS: sold_tickets_path,
        }
        self.encoding = encoding

    @classmethod
    def from_settings(cls, settings: Settings) -> 'FlatFileCatalogRepo':
        return cls(
            movies_path=settings.MOVIES_PATH,
            showtimes_path=settings.SHOWTIMES_PATH,
            sold_tickets_path=settings.SOLD_TICKETS_PATH,
            encoding=settings.FILE_ENCODING,
        )

    @Logger.io
    def load(self) -> CatalogSnapshot:
        return CatalogSnapshot(
            movies=self._read(CatalogFileKind.MOVIES, parse_movie),
            showtimes=self._read(CatalogFileKind.SHOWTIMES, parse_showtime),
            sold_tickets=self._read(CatalogFileKind.SOLD_TICKETS, parse_ticket),
        )

    def save_movies(self, *, movies: list[Movie]) -> None:
        self._write(CatalogFileKind.MOVIES, (format_movie(movie) for movie in movies))

    def save_showtimes(self, *, showtimes: list[Showtime]) -> None:
        self._write(CatalogFileKind.SHOWTIMES, (format_showtime(st) for st in showtimes))

    def save_sold_tickets(self, *, sold_tickets: list[Ticket]) -> None:
        self._write(CatalogFileKind.SOLD_TICKETS, (format_ticket(t) for t in sold_tickets))

    def _read(self, file_kind: CatalogFileKind, parse: Callable[[str], _R]) -> list[_R]:
        path = self.paths[file_kind]
        if not path.is_file():
            raise CatalogLoadError(
                file_kind=file_kind, path=path, reason=LoadFailureReason.MISSING
            )

        records: list[_R] = []
        # Decoded line by line so an undecodable byte is reported on its own line
        with path.open('rb') as file:
            for line_no, raw_line in enumerate(file, start=1):
                try:
                    line = raw_line.decode(self.encoding).rstrip('\r\n')
                    records.append(parse(line))
                except UnicodeDecodeError as e:
                    raise CatalogLoadError(
                        file_kind=file_kind,
                        path=path,
                        reason=LoadFailureReason.MALFORMED,
                        line_no=line_no,
                        detail=f'not valid {self.encoding}: {e.reason}',
                    ) from e
                except DomainError as e:
                    raise CatalogLoadError(
                        file_kind=file_kind,
                        path=path,
                        reason=LoadFailureReason.MALFORMED,
                        line_no=line_no,
                        detail=e.message,
                    ) from e

        Logger.base.debug(f'📖 [FLAT_FILE] Read {len(records)} records from {path}')
        return records

    def _write(self, file_kind: CatalogFileKind, lines: Iterable[str]) -> None:
        path = self.paths[file_kind]
        # Format everything first so a bad record never truncates the file
        content = ''.join(f'{line}\n' for line in lines)
        with path.open('w', encoding=self.encoding, newline='\n') as file:
            file.write(content)
        Logger.base.debug(f'💾 [FLAT_FILE] Rewrote {path}')
