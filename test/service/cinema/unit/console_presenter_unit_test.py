"""Unit tests for ConsolePresenter."""

from pathlib import Path

import pytest

from src.platform.exception.exceptions import (
    CatalogFileKind,
    CatalogLoadError,
    LoadFailureReason,
)
from src.service.cinema.app.dto import OperationResult
from src.service.cinema.domain.enum.operation_status import OperationStatus
from src.service.cinema.driving_adapter.console_message import OPERATION_MESSAGES
from src.service.cinema.driving_adapter.console_presenter import ConsolePresenter


pytestmark = pytest.mark.unit


class TestConsolePresenter:
    @pytest.fixture
    def presenter(self) -> ConsolePresenter:
        return ConsolePresenter()

    def test_every_status_has_a_message(self):
        assert set(OPERATION_MESSAGES) == set(OperationStatus)

    @pytest.mark.parametrize(
        'status, expected',
        [
            (OperationStatus.TICKET_SOLD, 'Билет продан.'),
            (OperationStatus.SEAT_TAKEN, 'Извините, выбранное место уже занято.'),
            (OperationStatus.TICKET_NOT_FOUND, 'Указанный билет не найден.'),
            (OperationStatus.MOVIE_NOT_FOUND, 'Фильм с указанным ID не найден.'),
        ],
    )
    def test_report_prints_outcome_message(
        self, presenter: ConsolePresenter, capsys, status: OperationStatus, expected: str
    ):
        presenter.report(OperationResult.of(status))

        assert capsys.readouterr().out == f'{expected}\n'

    def test_display_available_seats(self, presenter: ConsolePresenter, capsys):
        presenter.display_available_seats(time='16:00', seats=['A2', 'A3'])

        assert capsys.readouterr().out.splitlines() == [
            'Доступные места для сеанса 16:00:',
            'A2',
            'A3',
        ]

    def test_display_sold_out_showtime(self, presenter: ConsolePresenter, capsys):
        presenter.display_available_seats(time='16:00', seats=[])

        assert capsys.readouterr().out.splitlines()[-1] == 'Свободных мест нет.'

    def test_missing_file_message_names_file(self, presenter: ConsolePresenter, capsys, tmp_path):
        error = CatalogLoadError(
            file_kind=CatalogFileKind.MOVIES,
            path=tmp_path / 'movies.csv',
            reason=LoadFailureReason.MISSING,
        )

        presenter.report_load_error(error)

        out = capsys.readouterr().out
        assert out.startswith('Добавьте файл с информацией о фильмах movies.csv в папку ')
        assert str(tmp_path.resolve()) in out

    def test_malformed_file_message_names_line(self, presenter: ConsolePresenter, capsys):
        error = CatalogLoadError(
            file_kind=CatalogFileKind.SOLD_TICKETS,
            path=Path('sold_tickets.csv'),
            reason=LoadFailureReason.MALFORMED,
            line_no=3,
        )

        presenter.report_load_error(error)

        assert capsys.readouterr().out == (
            'Некорректные входные данные в файле с информацией о проданных билетах (строка 3)!\n'
        )

    def test_unexpected_failure(self, presenter: ConsolePresenter, capsys):
        presenter.report_unexpected_failure()

        assert capsys.readouterr().out == 'Что-то произошло!\n'
