"""
Test Configuration and Fixtures

This module provides:
- Test log directory setup before any application import
- Catalog data directories built from flat-file contents (tmp_path based)
- Settings, repository and CatalogStore fixtures bound to that directory
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# loguru_io_config reads TEST_LOG_DIR at import time
# =============================================================================
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)


_early_setup_test_environment()

from collections.abc import Callable  # noqa: E402

import pytest  # noqa: E402

from src.platform.config.core_setting import Settings  # noqa: E402
from src.service.cinema.app.catalog_store import CatalogStore  # noqa: E402
from src.service.cinema.driven_adapter.repo.flat_file_catalog_repo import (  # noqa: E402
    FlatFileCatalogRepo,
)


DEFAULT_MOVIES = '1,Inception,148\n'
DEFAULT_SHOWTIMES = '1,16:00\n'
DEFAULT_SOLD_TICKETS = ''


@pytest.fixture
def write_catalog_files(tmp_path: Path) -> Callable[..., Path]:
    """Write the three catalog files into tmp_path. Pass None to leave a file out."""

    def _write(
        movies: str | None = DEFAULT_MOVIES,
        showtimes: str | None = DEFAULT_SHOWTIMES,
        sold_tickets: str | None = DEFAULT_SOLD_TICKETS,
    ) -> Path:
        contents = {
            'movies.csv': movies,
            'showTimes.csv': showtimes,
            'sold_tickets.csv': sold_tickets,
        }
        for file_name, content in contents.items():
            if content is not None:
                (tmp_path / file_name).write_text(content, encoding='utf-8')
        return tmp_path

    return _write


@pytest.fixture
def catalog_dir(write_catalog_files: Callable[..., Path]) -> Path:
    return write_catalog_files()


@pytest.fixture
def read_catalog_file(tmp_path: Path) -> Callable[[str], str]:
    def _read(file_name: str) -> str:
        return (tmp_path / file_name).read_text(encoding='utf-8')

    return _read


@pytest.fixture
def test_settings(catalog_dir: Path) -> Settings:
    return Settings(DATA_DIR=catalog_dir)


@pytest.fixture
def flat_file_repo(test_settings: Settings) -> FlatFileCatalogRepo:
    return FlatFileCatalogRepo.from_settings(test_settings)


@pytest.fixture
def catalog_store(flat_file_repo: FlatFileCatalogRepo) -> CatalogStore:
    return CatalogStore(flat_file_repo)
