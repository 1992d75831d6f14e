"""Tests for the demo entry point: the two error tiers and the full walkthrough."""

from pathlib import Path
from unittest.mock import Mock

from dependency_injector import providers
import pytest

from src.main import main
from src.platform.config.core_setting import Settings
from src.platform.config.di import Container
from src.service.cinema.app.interface import ICatalogRepo
from src.service.cinema.domain.entity import Showtime


def _container_for(data_dir: Path) -> Container:
    app_container = Container()
    app_container.config_service.override(providers.Object(Settings(DATA_DIR=data_dir)))
    return app_container


class TestMainWalkthrough:
    def test_runs_every_operation_against_the_files(
        self, catalog_dir: Path, read_catalog_file, capsys
    ):
        # When
        main(_container_for(catalog_dir))

        # Then
        out = capsys.readouterr().out.splitlines()
        assert out[:3] == ['Билет продан.', 'Билет возвращен.', 'Доступные места для сеанса 16:00:']
        assert out[3:53] == [f'{row}{n}' for row in 'ABCDE' for n in range(1, 11)]
        assert out[53:] == [
            'Данные о фильме обновлены.',
            'Данные о сеансе обновлены.',
            'Места отмечены как занятые.',
        ]
        assert read_catalog_file('movies.csv') == '1,Новое название фильма,120\n'
        assert read_catalog_file('showTimes.csv') == '1,16:00,A2,A3,A4,A5\n'
        assert read_catalog_file('sold_tickets.csv') == ''

    def test_empty_catalog_skips_seat_operations(self, write_catalog_files, capsys):
        data_dir = write_catalog_files(movies='', showtimes='', sold_tickets='')

        main(_container_for(data_dir))

        assert capsys.readouterr().out.splitlines() == [
            'Фильм с указанным ID не найден.',
            'Сеанс с указанным фильмом и временем не найден.',
        ]


class TestMainErrorTiers:
    def test_missing_file_prints_diagnostic_and_exits(self, write_catalog_files, capsys):
        # Given
        data_dir = write_catalog_files(showtimes=None)

        # When
        with pytest.raises(SystemExit) as exc_info:
            main(_container_for(data_dir))

        # Then
        assert exc_info.value.code == 1
        out = capsys.readouterr().out
        assert out.startswith('Добавьте файл с информацией о сеансах showTimes.csv')
        assert 'Traceback' not in out

    def test_malformed_file_prints_diagnostic_and_exits(self, write_catalog_files, capsys):
        data_dir = write_catalog_files(movies='1,Inception\n')

        with pytest.raises(SystemExit):
            main(_container_for(data_dir))

        assert capsys.readouterr().out == (
            'Некорректные входные данные в файле с информацией о фильмах (строка 1)!\n'
        )

    def test_undecodable_file_prints_diagnostic_and_exits(self, write_catalog_files, capsys):
        # Given
        data_dir = write_catalog_files()
        (data_dir / 'movies.csv').write_bytes(b'1,Incep\xfftion,148\n')

        # When
        with pytest.raises(SystemExit) as exc_info:
            main(_container_for(data_dir))

        # Then
        assert exc_info.value.code == 1
        assert capsys.readouterr().out == (
            'Некорректные входные данные в файле с информацией о фильмах (строка 1)!\n'
        )

    def test_failure_while_loading_is_reported_generically(self, tmp_path: Path, capsys):
        # Given
        unreadable_repo = Mock(spec=ICatalogRepo)
        unreadable_repo.load.side_effect = PermissionError('movies.csv')
        app_container = _container_for(tmp_path)
        app_container.catalog_repo.override(providers.Object(unreadable_repo))

        # When
        main(app_container)

        # Then
        assert capsys.readouterr().out == 'Что-то произошло!\n'

    def test_unexpected_failure_is_reported_generically(self, tmp_path: Path, capsys):
        # Given
        broken_store = Mock()
        broken_store.showtimes = [Showtime(movie_id=1, time='16:00')]
        broken_store.sell_ticket.side_effect = OSError('disk full')
        app_container = _container_for(tmp_path)
        app_container.catalog_store.override(providers.Object(broken_store))

        # When
        main(app_container)

        # Then
        assert capsys.readouterr().out == 'Что-то произошло!\n'
